"""Prompt builders."""
from __future__ import annotations

from .transcript import Transcript
from .ui.state import UserContext


BASE_SYSTEM_PROMPT = """You are L'Oréal's virtual product advisor.
- Answer only questions related to L'Oréal products, beauty routines, hair care, skincare, makeup, ingredients, and recommendations.
- If a user asks about unrelated topics, politely redirect them back to L'Oréal products and services.
- Be friendly, concise, professional and a little funny. Explain ingredients and routines clearly, avoid unverified medical claims.
- Encourage safe use (e.g., patch tests) and consulting a dermatologist if needed."""

GREETING = (
    "👋 Hi! I'm your L'Oréal product advisor. "
    "Ask me about routines, ingredients, or which product fits your needs."
)

FALLBACK_MESSAGE = "⚠️ Sorry, I'm having trouble answering right now. Please try again."

CONTEXT_PREFIX = "Conversation context:"
EMPTY_CONTEXT = "(none yet)"


def build_context_text(context: UserContext) -> str:
    parts: list[str] = []
    if context.name:
        parts.append(f"User's name: {context.name}.")
    if context.past_questions:
        parts.append(f"User previously asked about: {'; '.join(context.past_questions)}.")
    if not parts:
        return f"{CONTEXT_PREFIX} {EMPTY_CONTEXT}"
    return f"{CONTEXT_PREFIX} {' '.join(parts)}"


def build_messages_with_context(transcript: Transcript, context: UserContext) -> list[dict[str, str]]:
    """Outbound payload: base prompt, a fresh context line, then the running history."""
    messages: list[dict[str, str]] = [transcript.base.to_dict()]
    messages.append({"role": "system", "content": build_context_text(context)})
    for message in transcript.history:
        messages.append(message.to_dict())
    return messages
