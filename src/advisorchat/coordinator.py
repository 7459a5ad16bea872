"""Send lifecycle for a chat session."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from .backends.base import ChatBackend
from .names import detect_and_store_name
from .prompts import FALLBACK_MESSAGE, GREETING, build_messages_with_context
from .transcript import DEFAULT_MAX_MESSAGES, Message
from .ui.state import SessionState

logger = logging.getLogger(__name__)


class ChatView(Protocol):
    def append_message(self, role: str, text: str) -> None:
        ...

    def show_typing(self) -> None:
        ...

    def hide_typing(self) -> None:
        ...

    def set_input_enabled(self, enabled: bool) -> None:
        ...

    def read_input(self) -> str:
        ...

    def clear_input(self) -> None:
        ...

    def focus_input(self) -> None:
        ...


@dataclass
class SendSettings:
    max_messages: int = DEFAULT_MAX_MESSAGES
    max_past_questions: int = 20
    past_questions_keep: int = 10
    greeting: str = GREETING
    fallback_message: str = FALLBACK_MESSAGE


class SendCoordinator:
    """Owns the single-flight guard and drives one submit from input to reply.

    Only one request is in flight per session. Submits arriving while a
    request is outstanding are dropped rather than queued. Backend failures
    never reach the transcript; the user sees the fallback message instead.
    """

    def __init__(
        self,
        state: SessionState,
        backend: ChatBackend,
        view: ChatView,
        settings: SendSettings | None = None,
    ) -> None:
        self.state = state
        self.backend = backend
        self.view = view
        self.settings = settings or SendSettings()

    def greet(self) -> None:
        if self.settings.greeting:
            self.view.append_message("assistant", self.settings.greeting)

    async def submit(self) -> str | None:
        if self.state.is_sending:
            logger.debug("Submit ignored: a request is already in flight")
            return None
        content = self.view.read_input().strip()
        if not content:
            return None

        self.state.is_sending = True
        try:
            self.view.clear_input()
            self.view.set_input_enabled(False)

            self.view.append_message("user", content)
            self.state.transcript.append(Message(role="user", content=content))
            self.state.user_context.remember_question(content)
            detect_and_store_name(content, self.state.user_context)
            self._apply_trim_policy()
            self.view.show_typing()

            try:
                reply = await self._exchange()
            finally:
                self.view.hide_typing()
            self.view.append_message(
                "assistant", self.settings.fallback_message if reply is None else reply
            )
            return reply
        finally:
            try:
                self.view.set_input_enabled(True)
                self.view.focus_input()
            finally:
                self.state.is_sending = False

    async def _exchange(self) -> str | None:
        messages = build_messages_with_context(self.state.transcript, self.state.user_context)
        logger.info(
            "Sending chat: messages=%s name_set=%s past_questions=%s",
            len(messages),
            bool(self.state.user_context.name),
            len(self.state.user_context.past_questions),
        )
        try:
            reply = await self.backend.send(messages)
        except Exception as exc:  # noqa: BLE001
            logger.error("Backend call failed: %s", exc, exc_info=True)
            return None

        self.state.transcript.append(Message(role="assistant", content=reply))
        return reply

    def _apply_trim_policy(self) -> None:
        self.state.transcript.trim(self.settings.max_messages)
        self.state.user_context.cap_questions(
            self.settings.max_past_questions, self.settings.past_questions_keep
        )
