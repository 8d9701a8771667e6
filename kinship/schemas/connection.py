from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return uuid4().hex


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ContactType(str, Enum):
    EMAIL = "Email"
    TEXT = "Text"
    IN_PERSON = "In-person"
    CALL = "Call"
    TEAMS = "Teams/Zoom"


DEFAULT_PLANNED_CONTACT_TYPE = ContactType.CALL


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire and in the snapshot."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# -----------------------------
# 🗒️ Interaction
# -----------------------------
class Interaction(CamelModel):
    id: str = Field(default_factory=new_id)
    date: Optional[datetime] = None
    type: ContactType
    notes: str
    summary: Optional[str] = None

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, v):
        return as_utc(v)


def sort_interactions(interactions: List[Interaction]) -> List[Interaction]:
    """Most recent first. Interactions without a date go last."""
    dated = [i for i in interactions if i.date is not None]
    undated = [i for i in interactions if i.date is None]
    dated.sort(key=lambda i: i.date, reverse=True)
    return dated + undated


# -----------------------------
# 👤 Connection
# -----------------------------
class ConnectionFields(CamelModel):
    name: str = ""
    company: str = ""
    role: str = ""
    address: str = ""

    email_work: Optional[str] = None
    email_personal: Optional[str] = None
    phone_work: Optional[str] = None
    phone_personal: Optional[str] = None
    linkedin_url: Optional[str] = None
    avatar_url: Optional[str] = None

    last_contact_date: Optional[datetime] = None
    last_contact_type: Optional[ContactType] = None
    planned_contact_date: Optional[datetime] = None
    planned_contact_type: ContactType = DEFAULT_PLANNED_CONTACT_TYPE

    context_input: str = ""
    context_summary: str = ""
    overview_summary: str = ""

    interactions: List[Interaction] = Field(default_factory=list)

    @field_validator("planned_contact_type", mode="before")
    @classmethod
    def planned_type_default(cls, v):
        return DEFAULT_PLANNED_CONTACT_TYPE if v is None else v

    @field_validator("last_contact_date", "planned_contact_date")
    @classmethod
    def dates_to_utc(cls, v):
        return as_utc(v)

    @model_validator(mode="after")
    def keep_interactions_sorted(self):
        self.interactions = sort_interactions(self.interactions)
        return self

    @property
    def latest_interaction(self) -> Optional[Interaction]:
        return self.interactions[0] if self.interactions else None


class ConnectionDraft(ConnectionFields):
    """A connection that has not been saved yet and has no identity."""


class Connection(ConnectionFields):
    id: str

    @classmethod
    def from_draft(cls, draft: ConnectionDraft, id: Optional[str] = None) -> "Connection":
        return cls(id=id or new_id(), **draft.model_dump())
