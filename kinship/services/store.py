import json
import logging
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from kinship.core.config import STORAGE_KEY
from kinship.models.snapshot import Snapshot
from kinship.schemas.connection import Connection, ConnectionDraft, new_id
from kinship.services.migrations import migrate_record
from kinship.services.seed import default_connections

logger = logging.getLogger(__name__)


class ConnectionNotFound(KeyError):
    def __init__(self, connection_id: str):
        super().__init__(connection_id)
        self.connection_id = connection_id


def parse_snapshot(blob: str) -> Optional[List[Connection]]:
    """
    Decode a snapshot blob. Returns None when the blob is valid JSON but not a
    list of records. Raises ValueError (JSON or validation) when unreadable.
    """
    parsed = json.loads(blob)
    if not isinstance(parsed, list):
        return None

    connections = []
    seen = set()
    for record in parsed:
        if not isinstance(record, dict):
            continue
        migrated = migrate_record(record)
        if migrated["id"] in seen:
            logger.warning(f"Duplicate connection id '{migrated['id']}' in snapshot, assigning a new one")
            migrated["id"] = new_id()
        seen.add(migrated["id"])
        connections.append(Connection.model_validate(migrated))
    return connections


def dump_snapshot(connections: List[Connection]) -> str:
    return json.dumps([c.to_dict() for c in connections])


def load_defaults() -> List[Connection]:
    return [Connection.model_validate(migrate_record(record)) for record in default_connections()]


class ConnectionStore:
    """
    Every connection lives in one JSON blob stored under a fixed,
    schema-versioned key. Mutations replace whole records by id and rewrite
    the blob.
    """

    def __init__(self, session_factory: Callable[[], Session], key: str = STORAGE_KEY):
        self.session_factory = session_factory
        self.key = key
        self.connections: List[Connection] = []

    # -----------------------------
    # 💾 Snapshot
    # -----------------------------
    def load(self) -> List[Connection]:
        db = self.session_factory()
        try:
            row = db.get(Snapshot, self.key)
            if row is None:
                logger.info(f"No snapshot under '{self.key}', seeding defaults")
                self.connections = load_defaults()
                self._write(db)
                return self.connections

            try:
                loaded = parse_snapshot(row.blob)
            except ValueError:
                logger.exception(f"Failed to load connections from snapshot '{self.key}'")
                db.delete(row)
                db.commit()
                self.connections = load_defaults()
                return self.connections

            if loaded is None:
                logger.warning(f"Snapshot '{self.key}' is not a list, using defaults")
                self.connections = load_defaults()
            else:
                self.connections = loaded
            logger.info(f"✅ Loaded {len(self.connections)} connections")
            return self.connections
        finally:
            db.close()

    def save(self) -> None:
        # An empty list is never written, so a wiped store reseeds on next load.
        if not self.connections:
            return
        db = self.session_factory()
        try:
            self._write(db)
        finally:
            db.close()

    def _write(self, db: Session) -> None:
        blob = dump_snapshot(self.connections)
        row = db.get(Snapshot, self.key)
        if row is None:
            db.add(Snapshot(key=self.key, blob=blob))
        else:
            row.blob = blob
        db.commit()

    # -----------------------------
    # 📇 Records
    # -----------------------------
    def all(self) -> List[Connection]:
        return list(self.connections)

    def get(self, connection_id: str) -> Optional[Connection]:
        for connection in self.connections:
            if connection.id == connection_id:
                return connection
        return None

    def find(self, connection_id: str) -> Connection:
        connection = self.get(connection_id)
        if connection is None:
            raise ConnectionNotFound(connection_id)
        return connection

    def create(self, draft: ConnectionDraft) -> Connection:
        connection = Connection.from_draft(draft)
        while self.get(connection.id) is not None:
            connection = Connection.from_draft(draft)
        self.connections = [connection] + self.connections
        self.save()
        logger.info(f"📇 Created connection {connection.id}")
        return connection

    def replace(self, connection: Connection) -> Connection:
        for index, existing in enumerate(self.connections):
            if existing.id == connection.id:
                self.connections[index] = connection
                self.save()
                return connection
        raise ConnectionNotFound(connection.id)
