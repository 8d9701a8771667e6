from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from kinship.schemas.connection import CamelModel, Connection, ConnectionDraft, ContactType, Interaction, as_utc


class ContextUpdate(CamelModel):
    context_input: str = ""


class InteractionCreate(CamelModel):
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    type: ContactType = ContactType.CALL
    notes: str

    @field_validator("notes")
    @classmethod
    def notes_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("notes must not be blank")
        return v

    @field_validator("date")
    @classmethod
    def date_is_aware(cls, v: datetime) -> datetime:
        return as_utc(v)


class PlannedContactUpdate(CamelModel):
    planned_contact_date: Optional[datetime] = None
    planned_contact_type: Optional[ContactType] = None


class ConnectionUpdate(CamelModel):
    name: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    address: Optional[str] = None
    email_work: Optional[str] = None
    email_personal: Optional[str] = None
    phone_work: Optional[str] = None
    phone_personal: Optional[str] = None
    linkedin_url: Optional[str] = None
    avatar_url: Optional[str] = None


class DraftContextRequest(CamelModel):
    draft: ConnectionDraft
    context_input: str = ""


class DraftInteractionRequest(CamelModel):
    draft: ConnectionDraft
    interaction: InteractionCreate


# -----------------------------
# 📤 Responses
# -----------------------------
class Health(CamelModel):
    score: int
    label: str
    days_dormant: int


class ConnectionOut(Connection):
    health: Health


class LoggedInteractionOut(CamelModel):
    connection: Connection
    interaction: Interaction


class LoggedDraftInteractionOut(CamelModel):
    draft: ConnectionDraft
    interaction: Interaction


class CalendarOut(CamelModel):
    year: int
    month: int
    days: Dict[int, List[Connection]]
