"""Transcript store."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal

Role = Literal["system", "user", "assistant"]

VALID_ROLES = ("system", "user", "assistant")
DEFAULT_MAX_MESSAGES = 40


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


class Transcript:
    """Ordered conversation history, always led by the base system message."""

    def __init__(self, system_prompt: str) -> None:
        self._messages: list[Message] = [Message(role="system", content=system_prompt)]

    def append(self, message: Message) -> None:
        if message.role not in VALID_ROLES:
            raise ValueError(f"Invalid message role: {message.role!r}")
        self._messages.append(message)

    def trim(self, max_messages: int = DEFAULT_MAX_MESSAGES) -> None:
        """Keep the base system message plus the most recent max_messages - 1."""
        if max_messages < 1:
            raise ValueError(f"max_messages must be >= 1, got {max_messages}")
        if len(self._messages) <= max_messages:
            return
        start = len(self._messages) - (max_messages - 1)
        self._messages = [self._messages[0], *self._messages[start:]]

    @property
    def base(self) -> Message:
        return self._messages[0]

    @property
    def history(self) -> list[Message]:
        return self._messages[1:]

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]
