from sqlalchemy import Column, String, Text, DateTime
from datetime import datetime, timezone
from kinship.core.db import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Snapshot(Base):
    __tablename__ = "snapshots"

    key = Column(String(128), primary_key=True)
    blob = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
