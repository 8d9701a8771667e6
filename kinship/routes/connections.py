import asyncio
from typing import List

from fastapi import APIRouter, Depends, Query

from kinship.dependencies.deps import find_or_404, get_store, get_summarizer
from kinship.schemas.connection import Connection, ConnectionDraft
from kinship.schemas.requests import (
    CalendarOut,
    ConnectionOut,
    ConnectionUpdate,
    ContextUpdate,
    PlannedContactUpdate,
)
from kinship.services.connection_service import (
    SortOption,
    health_score,
    plan_contact,
    planned_on,
    search_connections,
    sort_connections,
    update_details,
)
from kinship.services.store import ConnectionStore
from kinship.services.summary_service import save_context
from kinship.utils.llm_client import SummarizerClient

router = APIRouter()


def _with_health(connection: Connection) -> ConnectionOut:
    return ConnectionOut(**connection.model_dump(), health=health_score(connection))


# -----------------------------
# 📇 List / search / sort
# -----------------------------
@router.get("/connections", response_model=List[ConnectionOut])
def list_connections(
    q: str = Query("", description="Match on name or company"),
    sort: SortOption = Query(SortOption.LAST_CONTACTED),
    store: ConnectionStore = Depends(get_store),
):
    connections = sort_connections(search_connections(store.all(), q), sort)
    return [_with_health(c) for c in connections]


@router.get("/connections/calendar", response_model=CalendarOut)
def calendar(
    year: int = Query(..., ge=1),
    month: int = Query(..., ge=1, le=12),
    store: ConnectionStore = Depends(get_store),
):
    return CalendarOut(year=year, month=month, days=planned_on(store.all(), year, month))


@router.get("/connections/{connection_id}", response_model=ConnectionOut)
def get_connection(connection_id: str, store: ConnectionStore = Depends(get_store)):
    return _with_health(find_or_404(store, connection_id))


# -----------------------------
# 📥 Create (save a draft)
# -----------------------------
@router.post("/connections", response_model=Connection, status_code=201)
def create_connection(draft: ConnectionDraft, store: ConnectionStore = Depends(get_store)):
    return store.create(draft)


# -----------------------------
# ✏️ Updates
# -----------------------------
@router.patch("/connections/{connection_id}", response_model=Connection)
def update_connection(
    connection_id: str,
    payload: ConnectionUpdate,
    store: ConnectionStore = Depends(get_store),
):
    connection = find_or_404(store, connection_id)
    changes = payload.model_dump(exclude_unset=True)
    return store.replace(update_details(connection, changes))


@router.put("/connections/{connection_id}/planned-contact", response_model=Connection)
def update_planned_contact(
    connection_id: str,
    payload: PlannedContactUpdate,
    store: ConnectionStore = Depends(get_store),
):
    connection = find_or_404(store, connection_id)
    updated = plan_contact(connection, payload.planned_contact_date, payload.planned_contact_type)
    return store.replace(updated)


@router.put("/connections/{connection_id}/context", response_model=Connection)
async def update_context(
    connection_id: str,
    payload: ContextUpdate,
    store: ConnectionStore = Depends(get_store),
    summarizer: SummarizerClient = Depends(get_summarizer),
):
    connection = find_or_404(store, connection_id)
    updated = await save_context(summarizer, connection, payload.context_input)
    return await asyncio.to_thread(store.replace, updated)
