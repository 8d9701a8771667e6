from fastapi import HTTPException, Request

from kinship.schemas.connection import Connection
from kinship.services.store import ConnectionNotFound, ConnectionStore
from kinship.utils.llm_client import SummarizerClient


# === Shared state lives on app.state, set up in the lifespan handler
def get_store(request: Request) -> ConnectionStore:
    return request.app.state.store


def get_summarizer(request: Request) -> SummarizerClient:
    return request.app.state.summarizer


def find_or_404(store: ConnectionStore, connection_id: str) -> Connection:
    try:
        return store.find(connection_id)
    except ConnectionNotFound:
        raise HTTPException(status_code=404, detail="Connection not found")
