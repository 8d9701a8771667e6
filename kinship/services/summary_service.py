"""
Summary synthesis for connections.

Three generations, each "build prompt -> summarizer -> plain text":

    context      summarizes contextInput only (bullets)
    interaction  one or two sentences about a single interaction's notes
    overview     synthesizes contextInput with the most recent interaction

Two flows decide when they run. Saving context regenerates context + overview.
Logging an interaction generates its recap, then the overview from that recap.
Every flow awaits its calls in order and applies one combined update.
"""

import logging
from datetime import datetime
from typing import NamedTuple, Optional, TypeVar

from kinship.ai.prompt_engine import (
    SummaryKind,
    build_context_prompt,
    build_interaction_prompt,
    build_overview_prompt,
    recent_activity,
)
from kinship.schemas.connection import ConnectionFields, ContactType, Interaction, sort_interactions
from kinship.utils.llm_client import SummarizerClient

logger = logging.getLogger(__name__)

Record = TypeVar("Record", bound=ConnectionFields)


# -----------------------------
# 🧠 Generations
# -----------------------------
async def generate_context_summary(client: SummarizerClient, context_input: str, name: str) -> str:
    if not context_input or not context_input.strip():
        return ""
    prompt = build_context_prompt(context_input, name)
    result = await client.summarize(prompt, SummaryKind.CONTEXT, subject=context_input)
    return result.text


async def generate_interaction_summary(client: SummarizerClient, notes: str) -> str:
    if not notes or not notes.strip():
        return ""
    prompt = build_interaction_prompt(notes)
    result = await client.summarize(prompt, SummaryKind.INTERACTION, subject=notes)
    return result.text


async def generate_overview_summary(
    client: SummarizerClient,
    context_input: str,
    latest_notes: Optional[str],
    latest_summary: Optional[str],
    name: str,
) -> str:
    activity = recent_activity(latest_notes, latest_summary)
    prompt = build_overview_prompt(context_input or "", activity, name)
    result = await client.summarize(prompt, SummaryKind.OVERVIEW, subject=activity)
    return result.text


# -----------------------------
# 🔁 Flows
# -----------------------------
async def save_context(client: SummarizerClient, record: Record, context_input: str) -> Record:
    """
    Store new context text and regenerate the context and overview summaries.

    The overview uses whatever interaction is most recent right now. Interaction
    recaps are left untouched.
    """
    context_summary = await generate_context_summary(client, context_input, record.name)

    latest = record.latest_interaction
    overview_summary = await generate_overview_summary(
        client,
        context_input,
        latest.notes if latest else "",
        latest.summary if latest else "",
        record.name,
    )

    logger.info(f"✅ Context summaries regenerated for '{record.name}'")
    return record.model_copy(update={
        "context_input": context_input,
        "context_summary": context_summary,
        "overview_summary": overview_summary,
    })


class LoggedInteraction(NamedTuple):
    record: ConnectionFields
    interaction: Interaction


async def log_interaction(
    client: SummarizerClient,
    record: Record,
    date: datetime,
    type: ContactType,
    notes: str,
) -> LoggedInteraction:
    """
    Record a new interaction: recap it, insert it, move the contact status to
    it, then rebuild the overview from this interaction's notes and recap.
    The context summary is not regenerated.
    """
    summary = await generate_interaction_summary(client, notes)
    interaction = Interaction(date=date, type=type, notes=notes, summary=summary)

    # The overview always reflects the interaction just logged, even if an
    # older-dated entry would sort it further down the timeline.
    overview_summary = await generate_overview_summary(
        client, record.context_input, notes, summary, record.name,
    )

    updated = record.model_copy(update={
        "interactions": sort_interactions([interaction] + list(record.interactions)),
        "last_contact_date": interaction.date,
        "last_contact_type": interaction.type,
        "overview_summary": overview_summary,
    })
    logger.info(f"🗒️ Logged {type.value} interaction for '{record.name}'")
    return LoggedInteraction(updated, interaction)
