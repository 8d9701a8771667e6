from fastapi import APIRouter, Depends

from kinship.dependencies.deps import get_summarizer
from kinship.schemas.connection import ConnectionDraft
from kinship.schemas.requests import DraftContextRequest, DraftInteractionRequest, LoggedDraftInteractionOut
from kinship.services.summary_service import log_interaction, save_context
from kinship.utils.llm_client import SummarizerClient

# Drafts are never stored: the caller sends the draft, gets the updated draft
# back, and saves it with POST /connections when done.
router = APIRouter()


@router.post("/drafts/context", response_model=ConnectionDraft)
async def draft_context(
    payload: DraftContextRequest,
    summarizer: SummarizerClient = Depends(get_summarizer),
):
    return await save_context(summarizer, payload.draft, payload.context_input)


@router.post("/drafts/interactions", response_model=LoggedDraftInteractionOut)
async def draft_interaction(
    payload: DraftInteractionRequest,
    summarizer: SummarizerClient = Depends(get_summarizer),
):
    entry = payload.interaction
    draft, interaction = await log_interaction(summarizer, payload.draft, entry.date, entry.type, entry.notes)
    return LoggedDraftInteractionOut(draft=draft, interaction=interaction)
