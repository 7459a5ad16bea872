"""Backend protocol and errors."""
from __future__ import annotations

from typing import Any, Protocol


class BackendError(RuntimeError):
    """The backend could not produce a reply."""


class NetworkError(BackendError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ShapeError(BackendError):
    def __init__(self, message: str = "unexpected response shape") -> None:
        super().__init__(message)


class ChatBackend(Protocol):
    async def send(self, messages: list[dict[str, str]]) -> str:
        ...


def extract_reply(data: Any) -> str:
    """Pull the reply text out of an OpenAI-style payload or a {"reply": ...} body."""
    if isinstance(data, dict):
        choices = data.get("choices")
        if isinstance(choices, list) and choices:
            first = choices[0]
            message = first.get("message") if isinstance(first, dict) else None
            content = message.get("content") if isinstance(message, dict) else None
            if isinstance(content, str) and content:
                return content
        reply = data.get("reply")
        if isinstance(reply, str) and reply:
            return reply
    raise ShapeError()
