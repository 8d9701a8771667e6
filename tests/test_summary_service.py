"""Tests for the summary synthesis flows."""

import asyncio
from datetime import datetime, timedelta, timezone

from kinship.ai.prompt_engine import OFFLINE_CONTEXT_SUMMARY, OFFLINE_OVERVIEW_SUMMARY
from kinship.schemas.connection import Connection, ConnectionDraft, ContactType, Interaction
from kinship.services.summary_service import (
    generate_context_summary,
    generate_interaction_summary,
    generate_overview_summary,
    log_interaction,
    save_context,
)

from conftest import RecordingSummarizer

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_connection(**overrides) -> Connection:
    fields = dict(id="c1", name="Ada Lovelace", company="Analytical", role="Engineer")
    fields.update(overrides)
    return Connection(**fields)


def by_kind(prompt):
    if "Master Connection Summary" in prompt:
        return "• overview"
    if "ONE or TWO" in prompt:
        return "Signed the deal on the call."
    return "• context"


# ── Context summary ────────────────────────────────────────────────────


class TestContextSummary:
    def test_blank_input_skips_client(self, recorder):
        assert asyncio.run(generate_context_summary(recorder, "   \n", "Ada")) == ""
        assert asyncio.run(generate_context_summary(recorder, "", "Ada")) == ""
        assert recorder.prompts == []

    def test_prompt_carries_context(self, recorder):
        text = asyncio.run(generate_context_summary(recorder, "Loves jazz", "Ada"))
        assert text == "• generated"
        assert '"Loves jazz"' in recorder.prompts[0]
        assert "bullet points" in recorder.prompts[0]

    def test_failure_returns_error_marker(self):
        failing = RecordingSummarizer(fail=True)
        text = asyncio.run(generate_context_summary(failing, "Loves jazz", "Ada"))
        assert text == "Error generating summary."

    def test_empty_reply(self):
        blank = RecordingSummarizer(reply=lambda p: "")
        assert asyncio.run(generate_context_summary(blank, "Loves jazz", "Ada")) == "Could not generate summary."


# ── Interaction summary ────────────────────────────────────────────────


class TestInteractionSummary:
    def test_blank_notes(self, recorder):
        assert asyncio.run(generate_interaction_summary(recorder, "")) == ""
        assert asyncio.run(generate_interaction_summary(recorder, "  ")) == ""
        assert recorder.prompts == []

    def test_prose_prompt(self, recorder):
        asyncio.run(generate_interaction_summary(recorder, "Lunch, talked budget"))
        assert "Do NOT use bullet points" in recorder.prompts[0]

    def test_failure_echoes_notes(self):
        failing = RecordingSummarizer(fail=True)
        notes = "x" * 120
        assert asyncio.run(generate_interaction_summary(failing, notes)) == "x" * 80 + "..."


# ── Overview summary ───────────────────────────────────────────────────


class TestOverviewSummary:
    def test_prefers_recap_over_notes(self, recorder):
        asyncio.run(generate_overview_summary(
            recorder, "ctx", "NOTES-SENTINEL", "SUMMARY-SENTINEL", "Ada",
        ))
        prompt = recorder.prompts[0]
        assert "SUMMARY-SENTINEL" in prompt
        assert "NOTES-SENTINEL" not in prompt

    def test_falls_back_to_notes(self, recorder):
        asyncio.run(generate_overview_summary(recorder, "ctx", "NOTES-SENTINEL", "   ", "Ada"))
        asyncio.run(generate_overview_summary(recorder, "ctx", "NOTES-SENTINEL", None, "Ada"))
        assert all("NOTES-SENTINEL" in p for p in recorder.prompts)

    def test_failure_is_empty(self):
        failing = RecordingSummarizer(fail=True)
        assert asyncio.run(generate_overview_summary(failing, "ctx", "n", "s", "Ada")) == ""


# ── Offline mode ───────────────────────────────────────────────────────


class TestOffline:
    def test_placeholders(self, offline):
        assert asyncio.run(generate_context_summary(offline, "Loves jazz", "Ada")) == OFFLINE_CONTEXT_SUMMARY
        assert asyncio.run(generate_overview_summary(offline, "ctx", "n", None, "Ada")) == OFFLINE_OVERVIEW_SUMMARY
        assert asyncio.run(generate_interaction_summary(offline, "Short call")) == "Short call"

    def test_long_notes_truncated(self, offline):
        notes = "word " * 40
        assert asyncio.run(generate_interaction_summary(offline, notes)) == notes[:80] + "..."

    def test_never_builds_network_client(self, offline):
        asyncio.run(generate_context_summary(offline, "Loves jazz", "Ada"))
        asyncio.run(generate_interaction_summary(offline, "Quick catch-up over coffee"))
        asyncio.run(generate_overview_summary(offline, "Loves jazz", "Quick catch-up", None, "Ada"))
        assert offline._client is None

    def test_flows_never_build_network_client(self, offline):
        conn = make_connection()
        updated = asyncio.run(save_context(offline, conn, "Loves jazz"))
        asyncio.run(log_interaction(offline, updated, T0, ContactType.CALL, "Lunch downtown"))
        assert offline._client is None


# ── save_context flow ──────────────────────────────────────────────────


class TestSaveContext:
    def test_updates_both_summaries(self):
        client = RecordingSummarizer(reply=by_kind)
        older = Interaction(date=T0 - timedelta(days=5), type=ContactType.EMAIL, notes="old", summary="old recap")
        newer = Interaction(date=T0, type=ContactType.CALL, notes="new notes", summary="NEW-RECAP")
        conn = make_connection(interactions=[older, newer])

        updated = asyncio.run(save_context(client, conn, "Loves jazz"))

        assert updated.context_input == "Loves jazz"
        assert updated.context_summary == "• context"
        assert updated.overview_summary == "• overview"
        assert "NEW-RECAP" in client.prompts[1]
        # recaps are not regenerated
        assert [i.summary for i in updated.interactions] == ["NEW-RECAP", "old recap"]
        assert len(client.prompts) == 2

    def test_without_interactions(self, recorder):
        conn = make_connection()
        updated = asyncio.run(save_context(recorder, conn, "Loves jazz"))
        assert updated.overview_summary == "• generated"
        assert 'Most Recent Interaction (Recap): ""' in recorder.prompts[1]

    def test_does_not_mutate_input(self, recorder):
        conn = make_connection(context_input="before")
        asyncio.run(save_context(recorder, conn, "after"))
        assert conn.context_input == "before"

    def test_draft_stays_draft(self, recorder):
        draft = ConnectionDraft(name="New person")
        updated = asyncio.run(save_context(recorder, draft, "Met at a conference"))
        assert isinstance(updated, ConnectionDraft)
        assert not isinstance(updated, Connection)
        assert updated.context_summary == "• generated"


# ── log_interaction flow ───────────────────────────────────────────────


class TestLogInteraction:
    def test_signed_deal(self):
        client = RecordingSummarizer(reply=by_kind)
        existing = Interaction(date=T0 - timedelta(days=10), type=ContactType.EMAIL, notes="intro", summary="Intro email.")
        conn = make_connection(context_input="Investor", context_summary="• kept", interactions=[existing])

        updated, interaction = asyncio.run(log_interaction(
            client, conn, T0, ContactType.CALL, "Had a great call, signed the deal",
        ))

        assert interaction.summary == "Signed the deal on the call."
        assert updated.last_contact_date == T0
        assert updated.last_contact_type == ContactType.CALL
        assert updated.overview_summary == "• overview"
        assert updated.interactions[0].id == interaction.id
        assert updated.context_summary == "• kept"
        # recap first, overview second, overview fed by the fresh recap
        assert "ONE or TWO" in client.prompts[0]
        assert "Signed the deal on the call." in client.prompts[1]

    def test_overview_uses_logged_interaction_even_when_older(self, recorder):
        newest = Interaction(date=T0, type=ContactType.EMAIL, notes="newest", summary="NEWEST-RECAP")
        conn = make_connection(interactions=[newest])

        updated, interaction = asyncio.run(log_interaction(
            recorder, conn, T0 - timedelta(days=30), ContactType.TEXT, "backfilled text",
        ))

        assert updated.interactions[0].summary == "NEWEST-RECAP"
        assert updated.interactions[1].id == interaction.id
        assert "NEWEST-RECAP" not in recorder.prompts[1]

    def test_generation_failure_still_updates(self):
        failing = RecordingSummarizer(fail=True)
        conn = make_connection()
        updated, interaction = asyncio.run(log_interaction(failing, conn, T0, ContactType.CALL, "Quick check-in"))
        assert interaction.summary == "Quick check-in..."
        assert updated.overview_summary == ""
        assert len(updated.interactions) == 1
        assert updated.last_contact_date == T0

    def test_sorted_descending(self, recorder):
        conn = make_connection()
        for offset in (3, 1, 2):
            conn, _ = asyncio.run(log_interaction(recorder, conn, T0 + timedelta(days=offset), ContactType.CALL, f"n{offset}"))
        assert [i.notes for i in conn.interactions] == ["n3", "n2", "n1"]
        assert len({i.id for i in conn.interactions}) == 3
