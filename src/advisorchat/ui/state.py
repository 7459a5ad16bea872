"""UI session state."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..transcript import Transcript


@dataclass
class UserContext:
    name: str | None = None
    past_questions: list[str] = field(default_factory=list)

    def remember_question(self, text: str) -> None:
        self.past_questions.append(text)

    def cap_questions(self, limit: int = 20, keep: int = 10) -> None:
        if len(self.past_questions) > limit:
            self.past_questions = self.past_questions[-keep:] if keep > 0 else []


@dataclass
class SessionState:
    transcript: Transcript
    user_context: UserContext = field(default_factory=UserContext)
    is_sending: bool = False

    @classmethod
    def create(cls, system_prompt: str) -> "SessionState":
        return cls(transcript=Transcript(system_prompt))
