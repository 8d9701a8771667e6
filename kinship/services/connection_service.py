from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, TypeVar

from kinship.schemas.connection import Connection, ConnectionFields, ContactType, as_utc

Record = TypeVar("Record", bound=ConnectionFields)

NEVER_CONTACTED_DAYS = 999


class SortOption(str, Enum):
    NAME = "name"
    LAST_CONTACTED = "lastContacted"
    UPCOMING = "upcoming"


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


# -----------------------------
# 🔎 Search + sort
# -----------------------------
def search_connections(connections: List[Connection], query: str = "") -> List[Connection]:
    needle = (query or "").strip().lower()
    if not needle:
        return list(connections)
    return [c for c in connections if needle in c.name.lower() or needle in c.company.lower()]


def sort_connections(connections: List[Connection], option: SortOption = SortOption.LAST_CONTACTED) -> List[Connection]:
    if option == SortOption.NAME:
        return sorted(connections, key=lambda c: c.name.casefold())

    if option == SortOption.LAST_CONTACTED:
        contacted = [c for c in connections if c.last_contact_date]
        never = [c for c in connections if not c.last_contact_date]
        return sorted(contacted, key=lambda c: c.last_contact_date, reverse=True) + never

    planned = [c for c in connections if c.planned_contact_date]
    unplanned = [c for c in connections if not c.planned_contact_date]
    return sorted(planned, key=lambda c: c.planned_contact_date) + unplanned


# -----------------------------
# 💚 Relationship health
# -----------------------------
def days_dormant(connection: ConnectionFields, now: Optional[datetime] = None) -> int:
    if not connection.last_contact_date:
        return NEVER_CONTACTED_DAYS
    return (_now(now) - connection.last_contact_date).days


def health_score(connection: ConnectionFields, now: Optional[datetime] = None) -> Dict:
    days = days_dormant(connection, now)
    if days <= 14:
        return {"score": 95, "label": "High", "daysDormant": days}
    if days <= 30:
        return {"score": 60, "label": "Medium", "daysDormant": days}
    return {"score": 25, "label": "Low", "daysDormant": days}


# -----------------------------
# 📅 Planning
# -----------------------------
def is_planned_in_future(connection: ConnectionFields, now: Optional[datetime] = None) -> bool:
    if not connection.planned_contact_date:
        return False
    return connection.planned_contact_date > _now(now)


def plan_contact(record: Record, date: Optional[datetime], type: Optional[ContactType] = None) -> Record:
    update = {"planned_contact_date": as_utc(date)}
    if type is not None:
        update["planned_contact_type"] = type
    return record.model_copy(update=update)


def planned_on(connections: List[Connection], year: int, month: int) -> Dict[int, List[Connection]]:
    """Connections with a planned contact in the given month, keyed by day."""
    days: Dict[int, List[Connection]] = {}
    for connection in connections:
        planned = connection.planned_contact_date
        if planned and planned.year == year and planned.month == month:
            days.setdefault(planned.day, []).append(connection)
    return dict(sorted(days.items()))


# -----------------------------
# ✏️ Contact details
# -----------------------------
DETAIL_FIELDS = (
    "name", "company", "role", "address",
    "email_work", "email_personal", "phone_work", "phone_personal",
    "linkedin_url", "avatar_url",
)


def update_details(record: Record, changes: Dict) -> Record:
    """Partial update of descriptive fields. Summaries and interactions are untouched."""
    update = {k: v for k, v in changes.items() if k in DETAIL_FIELDS}
    for field in ("name", "company", "role", "address"):
        if field in update and update[field] is None:
            update[field] = ""
    return record.model_copy(update=update)
