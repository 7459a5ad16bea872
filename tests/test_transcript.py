import pytest

from advisorchat.transcript import Message, Transcript
from advisorchat.ui.state import SessionState, UserContext


def _filled(count: int) -> Transcript:
    transcript = Transcript("base prompt")
    for idx in range(count):
        role = "user" if idx % 2 == 0 else "assistant"
        transcript.append(Message(role=role, content=f"m{idx}"))
    return transcript


class TestTranscriptAppend:
    def test_seeded_with_system_prompt(self):
        transcript = Transcript("base prompt")
        assert len(transcript) == 1
        assert transcript[0] == Message(role="system", content="base prompt")
        assert transcript.history == []

    def test_append_keeps_order(self):
        transcript = _filled(3)
        assert [m.content for m in transcript.history] == ["m0", "m1", "m2"]
        assert transcript[0].role == "system"

    def test_invalid_role_rejected(self):
        transcript = Transcript("base prompt")
        with pytest.raises(ValueError):
            transcript.append(Message(role="tool", content="nope"))  # type: ignore[arg-type]
        assert len(transcript) == 1

    def test_messages_is_a_copy(self):
        transcript = _filled(2)
        snapshot = transcript.messages
        snapshot.clear()
        assert len(transcript) == 3


class TestTranscriptTrim:
    def test_no_trim_at_or_below_limit(self):
        transcript = _filled(39)
        transcript.trim(40)
        assert len(transcript) == 40
        assert transcript[1].content == "m0"

    def test_45_appends_keep_system_plus_latest_39(self):
        transcript = _filled(45)
        assert len(transcript) == 46

        transcript.trim(40)

        assert len(transcript) == 40
        assert transcript[0] == Message(role="system", content="base prompt")
        assert [m.content for m in transcript.history] == [f"m{i}" for i in range(6, 45)]

    def test_system_never_duplicated(self):
        transcript = _filled(5)
        transcript.trim(2)
        assert [m.role for m in transcript].count("system") == 1
        assert [m.content for m in transcript] == ["base prompt", "m4"]

    def test_limit_of_one_keeps_only_system(self):
        transcript = _filled(3)
        transcript.trim(1)
        assert transcript.messages == [Message(role="system", content="base prompt")]

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            _filled(3).trim(0)

    def test_first_message_stays_system_across_appends_and_trims(self):
        transcript = Transcript("base prompt")
        for idx in range(100):
            transcript.append(Message(role="user", content=str(idx)))
            transcript.trim(7)
            assert transcript[0].role == "system"
            assert len(transcript) <= 7


class TestUserContext:
    def test_cap_questions_trims_to_keep(self):
        context = UserContext()
        for idx in range(21):
            context.remember_question(f"q{idx}")
        context.cap_questions(20, 10)
        assert context.past_questions == [f"q{i}" for i in range(11, 21)]

    def test_cap_questions_noop_at_limit(self):
        context = UserContext(past_questions=[f"q{i}" for i in range(20)])
        context.cap_questions(20, 10)
        assert len(context.past_questions) == 20

    def test_session_state_create(self):
        state = SessionState.create("base prompt")
        assert state.is_sending is False
        assert state.user_context == UserContext()
        assert state.transcript.base.content == "base prompt"
