"""Chat view backing the gradio components."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..backends.base import ChatBackend
from ..coordinator import SendCoordinator, SendSettings
from .state import SessionState

TYPING_PLACEHOLDER = "…"


@dataclass
class GradioView:
    """Plain-data view; the gradio handlers read it back into component updates."""

    messages: list[dict[str, str]] = field(default_factory=list)
    input_text: str = ""
    input_enabled: bool = True
    typing: bool = False
    focused: bool = False

    def append_message(self, role: str, text: str) -> None:
        self.messages.append({"role": "user" if role == "user" else "assistant", "content": text})

    def show_typing(self) -> None:
        self.typing = True

    def hide_typing(self) -> None:
        self.typing = False

    def set_input_enabled(self, enabled: bool) -> None:
        self.input_enabled = enabled
        if not enabled:
            self.focused = False

    def read_input(self) -> str:
        return self.input_text

    def clear_input(self) -> None:
        self.input_text = ""

    def focus_input(self) -> None:
        self.focused = True

    def bubbles(self) -> list[dict[str, str]]:
        snapshot = [dict(message) for message in self.messages]
        if self.typing:
            snapshot.append({"role": "assistant", "content": TYPING_PLACEHOLDER})
        return snapshot


class ChatSession:
    def __init__(
        self,
        system_prompt: str,
        backend: ChatBackend,
        settings: SendSettings | None = None,
    ) -> None:
        self.state = SessionState.create(system_prompt)
        self.view = GradioView()
        self.coordinator = SendCoordinator(self.state, backend, self.view, settings)
        self.coordinator.greet()
