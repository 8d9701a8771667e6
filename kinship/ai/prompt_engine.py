from enum import Enum


class SummaryKind(str, Enum):
    CONTEXT = "context"
    INTERACTION = "interaction"
    OVERVIEW = "overview"


# Sampling temperature per kind. None leaves the model default.
TEMPERATURES = {
    SummaryKind.CONTEXT: 0.1,
    SummaryKind.OVERVIEW: 0.2,
    SummaryKind.INTERACTION: None,
}

# Offline placeholders, returned when no API key is configured.
OFFLINE_CONTEXT_SUMMARY = (
    "• Values personal touches and thoughtful gestures\n"
    "• Key interest in brutalist architecture and jazz\n"
    "• Action: Follow up regarding the waterfront project staffing"
)
OFFLINE_OVERVIEW_SUMMARY = (
    "• Currently focused on the Q4 roadmap discussed in the last call.\n"
    "• Long-term interest in sustainability projects remains relevant.\n"
    "• Action: Send the updated proposal by Friday."
)

ECHO_LIMIT = 80


def echo_notes(notes: str, always_ellipsis: bool = False) -> str:
    """Truncated echo of interaction notes, used when no model output is available."""
    if always_ellipsis or len(notes) > ECHO_LIMIT:
        return notes[:ECHO_LIMIT] + "..."
    return notes


def recent_activity(latest_notes: str | None, latest_summary: str | None) -> str:
    # The recap is denser than raw notes, so it wins whenever it has content.
    if latest_summary and latest_summary.strip():
        return latest_summary
    return latest_notes or ""


# 🧠 Long-term context only
def build_context_prompt(context_input: str, name: str) -> str:
    return f"""You are an expert Personal Relationship Manager assistant.
Analyze the following context notes about a professional contact named {name}.

CRITICAL RULES:
1. Use ONLY the information provided in the "Context Notes" below. Do NOT add, invent, or hallucinate any outside facts.
2. If the notes are empty or meaningless, return an empty string.
3. Output STRICTLY plain text. NO Markdown.
4. Use simple bullet points (•) for each line.
5. Do NOT repeat the person's name or role.
6. Summarize their personality, interests, and key long-term facts based ONLY on the input.

Context Notes:
"{context_input}"
"""


# 🗒️ One interaction, one or two sentences
def build_interaction_prompt(notes: str) -> str:
    return f"""Summarize the following interaction notes into strictly ONE or TWO brief sentences.
Capture the main outcome.
Do NOT use bullet points. Plain text only.

Notes: "{notes}"
"""


# 🔁 Context + latest interaction
def build_overview_prompt(context_input: str, activity: str, name: str) -> str:
    return f"""Create a "Master Connection Summary" for {name}.

Input Data:
1. Long-term Context: "{context_input}"
2. Most Recent Interaction (Recap): "{activity}"

CRITICAL RULES:
1. Your goal is to SYNTHESIZE the long-term context with the latest updates.
2. Use ONLY the Input Data provided. Do NOT invent facts or hallucinate details not present in the text.
3. Output STRICTLY plain text. NO Markdown.
4. Use simple bullet points (•).
5. The FIRST bullet MUST capture the core status/sentiment of the Recent Interaction.
6. Subsequent bullets should merge relevant long-term context that is still applicable.
7. Keep it concise (3-4 bullets max).
"""
