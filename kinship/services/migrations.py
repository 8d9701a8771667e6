"""
Load-time migrations for persisted connection records.

Each function takes a raw record dict and returns a new dict; none of them
mutate their input. `migrate_record` applies them in order.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from kinship.schemas.connection import ContactType, DEFAULT_PLANNED_CONTACT_TYPE, as_utc, new_id

CONNECTION_DATE_FIELDS = ("lastContactDate", "plannedContactDate")
REQUIRED_TEXT_FIELDS = ("name", "company", "role", "address")
MEMORY_FIELDS = ("contextInput", "contextSummary", "overviewSummary")
CONTACT_FIELDS = ("emailWork", "emailPersonal", "phoneWork", "phonePersonal", "linkedinUrl", "avatarUrl")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Normalize a date-like value to an aware UTC datetime, or None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        # Epoch milliseconds, as a browser Date.now() would store.
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        return None

    return as_utc(parsed)


def _contact_type(value: Any) -> Optional[str]:
    try:
        return ContactType(value).value
    except ValueError:
        return None


def default_planned_contact_type(record: dict) -> dict:
    out = dict(record)
    if not _contact_type(out.get("plannedContactType")):
        out["plannedContactType"] = DEFAULT_PLANNED_CONTACT_TYPE.value
    return out


def copy_legacy_contact_fields(record: dict) -> dict:
    """Pre-v5 records carried a single `email` / `phone`."""
    out = dict(record)
    if not out.get("emailWork") and out.get("email"):
        out["emailWork"] = out["email"]
    if not out.get("phoneWork") and out.get("phone"):
        out["phoneWork"] = out["phone"]
    out.pop("email", None)
    out.pop("phone", None)
    return out


def coerce_contact_fields(record: dict) -> dict:
    """Numbers are kept as text; lists, dicts and booleans are dropped."""
    out = dict(record)
    for field in CONTACT_FIELDS:
        value = out.get(field)
        if value is None or isinstance(value, str):
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            out[field] = str(value)
        else:
            out[field] = None
    return out


def coerce_interactions(record: dict) -> dict:
    out = dict(record)
    raw = out.get("interactions")
    if not isinstance(raw, list):
        out["interactions"] = []
        return out

    interactions = []
    seen = set()
    for item in raw:
        if not isinstance(item, dict):
            continue
        interaction = dict(item)
        interaction["date"] = parse_timestamp(interaction.get("date"))
        interaction["type"] = _contact_type(interaction.get("type")) or ContactType.CALL.value
        interaction["notes"] = interaction.get("notes") if isinstance(interaction.get("notes"), str) else ""
        if not isinstance(interaction.get("summary"), str):
            interaction["summary"] = None
        interaction_id = str(interaction.get("id") or "")
        if not interaction_id or interaction_id in seen:
            interaction_id = new_id()
        seen.add(interaction_id)
        interaction["id"] = interaction_id
        interactions.append(interaction)
    out["interactions"] = interactions
    return out


def coerce_dates(record: dict) -> dict:
    out = dict(record)
    for field in CONNECTION_DATE_FIELDS:
        out[field] = parse_timestamp(out.get(field))
    out["lastContactType"] = _contact_type(out.get("lastContactType"))
    return out


def fill_text_fields(record: dict) -> dict:
    out = dict(record)
    for field in REQUIRED_TEXT_FIELDS + MEMORY_FIELDS:
        if not isinstance(out.get(field), str):
            out[field] = ""
    if not out.get("id"):
        out["id"] = new_id()
    else:
        out["id"] = str(out["id"])
    return out


MIGRATIONS = (
    fill_text_fields,
    default_planned_contact_type,
    copy_legacy_contact_fields,
    coerce_contact_fields,
    coerce_interactions,
    coerce_dates,
)


def migrate_record(record: dict) -> dict:
    for migration in MIGRATIONS:
        record = migration(record)
    return record
