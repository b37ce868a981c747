import re
from typing import Optional, Sequence

from .models import Question, QuestionType

_PUNCTUATION = re.compile(r"[.,!?;:'\"]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Canonical form used for answer comparison.

    Strips ``. , ! ? ; : ' "``, collapses whitespace runs, trims and
    lower-cases.
    """
    if not text:
        return ""
    text = _PUNCTUATION.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip().lower()


def evaluate(question: Question, raw_response: str) -> bool:
    return normalize(raw_response) == normalize(question.correct_answer)


def build_response(
    question: Question,
    option: Optional[str] = None,
    text: Optional[str] = None,
    parts: Optional[Sequence[str]] = None,
) -> str:
    """Turns the player's input for ``question`` into the string to judge.

    Returns an empty string when nothing usable was given; such responses
    are never submitted.
    """
    if question.type == QuestionType.MULTIPLE_CHOICE:
        if option is not None and option in (question.options or []):
            return option
        return ""
    if question.type == QuestionType.FILL_IN_BLANK:
        return (text or "").strip()
    if question.type == QuestionType.REARRANGE:
        if not parts:
            return ""
        return " ".join(parts)
    raise ValueError(f"Unknown question type: {question.type}")
