"""Self-introduction name detection."""
from __future__ import annotations

import re

from .ui.state import UserContext

_NAME_CHARS = r"[A-Za-zÀ-ÖØ-öø-ÿ' -]{2,}"

# Evaluated in order; the first match wins.
NAME_PATTERNS: list[tuple[re.Pattern[str], int]] = [
    (re.compile(rf"my name is\s+({_NAME_CHARS})", re.IGNORECASE), 1),
    (re.compile(rf"\bi am\s+({_NAME_CHARS})", re.IGNORECASE), 1),
    (re.compile(rf"\bi['’]m\s+({_NAME_CHARS})", re.IGNORECASE), 1),
    (re.compile(rf"\bim\s+({_NAME_CHARS})", re.IGNORECASE), 1),
]

# The name class also matches spaces, so the capture runs on into the rest of
# the sentence; cut it at the first connector word, including a leading one.
_BOUNDARY = re.compile(
    r"(?:^|\s+)(?:and|but|or|from|with|looking|trying|wondering|interested|asking)"
    r"(?=\s|$).*$",
    re.IGNORECASE,
)

# Words that open a clause rather than a name ("I'm so confused", "I am a
# student"). Only checked at the start of the capture; "Jean So" is a name.
_NOT_A_NAME = re.compile(
    r"^(?:so|just|here|also|too|not|a|an|the|very|really|sure|new|curious|"
    r"having|going|getting|in|on|at|back|still|currently)(?=\s|$)",
    re.IGNORECASE,
)


def detect_name(message: str) -> str | None:
    for pattern, group in NAME_PATTERNS:
        match = pattern.search(message)
        if not match or not match.group(group):
            continue
        captured = match.group(group).strip()
        if _NOT_A_NAME.match(captured):
            return None
        name = _BOUNDARY.sub("", captured).strip()
        if len(name) >= 2:
            return name
        return None
    return None


def detect_and_store_name(message: str, context: UserContext) -> str | None:
    if context.name:
        return context.name
    name = detect_name(message)
    if name:
        context.name = name
    return context.name
