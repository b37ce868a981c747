import math
from typing import Mapping

from .config import settings
from .models import AnswerStatus, Question, Report, UserAnswer

Answers = Mapping[int, UserAnswer]


def correct_count(answers: Answers) -> int:
    return sum(1 for a in answers.values() if a.is_correct)


def score(answers: Answers, points: int = settings.POINTS_PER_CORRECT) -> int:
    return correct_count(answers) * points


def answered_count(answers: Answers) -> int:
    return len(answers)


def answer_status(question: Question, answers: Answers) -> AnswerStatus:
    answer = answers.get(question.id)
    if answer is None:
        return AnswerStatus.UNANSWERED
    return AnswerStatus.CORRECT if answer.is_correct else AnswerStatus.INCORRECT


def build_report(
    user_name: str, answers: Answers, points: int = settings.POINTS_PER_CORRECT
) -> Report:
    """Final result card. Percent is taken over answered questions only."""
    correct = correct_count(answers)
    answered = answered_count(answers)
    percent = math.floor(correct / answered * 100 + 0.5) if answered > 0 else 0
    return Report(
        user_name=user_name,
        correct=correct,
        wrong=answered - correct,
        answered=answered,
        percent=percent,
        score=correct * points,
        has_wrong=correct < answered,
    )
