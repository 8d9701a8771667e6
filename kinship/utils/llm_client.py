import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from openai import AsyncOpenAI

from kinship.ai.prompt_engine import (
    OFFLINE_CONTEXT_SUMMARY,
    OFFLINE_OVERVIEW_SUMMARY,
    TEMPERATURES,
    SummaryKind,
    echo_notes,
)
from kinship.core.config import OPENAI_API_KEY, SUMMARY_MODEL, SUMMARY_OFFLINE_DELAY

logger = logging.getLogger(__name__)

# Interaction recaps are quicker to fake than the bullet summaries.
INTERACTION_OFFLINE_DELAY_RATIO = 0.8 / 1.5


class ResultSource(str, Enum):
    LIVE = "live"
    FALLBACK = "fallback"
    EMPTY = "empty"


@dataclass
class SummaryResult:
    text: str
    source: ResultSource


# What to return when the live call fails or returns nothing
ERROR_FALLBACKS = {
    SummaryKind.CONTEXT: lambda subject: "Error generating summary.",
    SummaryKind.OVERVIEW: lambda subject: "",
    SummaryKind.INTERACTION: lambda subject: echo_notes(subject, always_ellipsis=True),
}
EMPTY_FALLBACKS = {
    SummaryKind.CONTEXT: "Could not generate summary.",
    SummaryKind.OVERVIEW: "",
    SummaryKind.INTERACTION: "",
}


class SummarizerClient:
    """
    Thin wrapper around an OpenAI chat completion.

    Without an API key the client never touches the network: it waits a short
    simulated delay and returns a deterministic placeholder. With a key it makes
    exactly one attempt and converts any failure into a fallback string.
    """

    def __init__(
        self,
        api_key: Optional[str] = OPENAI_API_KEY,
        model: str = SUMMARY_MODEL,
        offline_delay: float = SUMMARY_OFFLINE_DELAY,
    ):
        self.api_key = api_key
        self.model = model
        self.offline_delay = offline_delay
        self._client: Optional[AsyncOpenAI] = None

    @property
    def offline(self) -> bool:
        return not self.api_key

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            # max_retries=0: one attempt, then fall back
            self._client = AsyncOpenAI(api_key=self.api_key, max_retries=0)
        return self._client

    async def summarize(self, prompt: str, kind: SummaryKind, subject: str = "") -> SummaryResult:
        """
        Args:
            prompt: full instruction prompt
            kind: which summary is being generated, selects the fallbacks
            subject: raw material being summarized, used for echo fallbacks
        """
        if self.offline:
            return await self._offline(kind, subject)

        try:
            text = await self.complete(prompt, TEMPERATURES[kind])
        except Exception as e:
            logger.warning(f"⚠️ {kind.value} summary generation failed: {e}")
            return SummaryResult(ERROR_FALLBACKS[kind](subject), ResultSource.FALLBACK)

        if not text:
            return SummaryResult(EMPTY_FALLBACKS[kind], ResultSource.EMPTY)
        return SummaryResult(text, ResultSource.LIVE)

    async def complete(self, prompt: str, temperature: Optional[float] = None) -> str:
        params = {}
        if temperature is not None:
            params["temperature"] = temperature

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            **params,
        )
        content = response.choices[0].message.content
        return (content or "").strip()

    async def _offline(self, kind: SummaryKind, subject: str) -> SummaryResult:
        delay = self.offline_delay
        if kind == SummaryKind.INTERACTION:
            delay *= INTERACTION_OFFLINE_DELAY_RATIO
        if delay > 0:
            await asyncio.sleep(delay)

        if kind == SummaryKind.CONTEXT:
            text = OFFLINE_CONTEXT_SUMMARY
        elif kind == SummaryKind.OVERVIEW:
            text = OFFLINE_OVERVIEW_SUMMARY
        else:
            text = echo_notes(subject)
        return SummaryResult(text, ResultSource.FALLBACK)
