import asyncio
from typing import List

from fastapi import APIRouter, Depends

from kinship.dependencies.deps import find_or_404, get_store, get_summarizer
from kinship.schemas.connection import Interaction
from kinship.schemas.requests import InteractionCreate, LoggedInteractionOut
from kinship.services.store import ConnectionStore
from kinship.services.summary_service import log_interaction
from kinship.utils.llm_client import SummarizerClient

router = APIRouter()


@router.get("/connections/{connection_id}/interactions", response_model=List[Interaction])
def get_interactions(connection_id: str, store: ConnectionStore = Depends(get_store)):
    return find_or_404(store, connection_id).interactions


@router.post("/connections/{connection_id}/interactions", response_model=LoggedInteractionOut, status_code=201)
async def add_interaction(
    connection_id: str,
    payload: InteractionCreate,
    store: ConnectionStore = Depends(get_store),
    summarizer: SummarizerClient = Depends(get_summarizer),
):
    connection = find_or_404(store, connection_id)
    updated, interaction = await log_interaction(
        summarizer, connection, payload.date, payload.type, payload.notes,
    )
    saved = await asyncio.to_thread(store.replace, updated)
    return LoggedInteractionOut(connection=saved, interaction=interaction)
