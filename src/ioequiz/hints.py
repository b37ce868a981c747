import random

from .evaluator import normalize
from .models import Question, QuestionType


def make_hint(question: Question, rng: random.Random = random) -> str:
    """One clue for the current question.

    Multiple choice: eliminate a random wrong option. Fill in the blank:
    first letter of the answer. Rearrange: first word of the sentence.
    """
    if question.type == QuestionType.MULTIPLE_CHOICE:
        wrong = [
            opt
            for opt in question.options or []
            if normalize(opt) != normalize(question.correct_answer)
        ]
        if not wrong:
            return ""
        return f'Eliminate one wrong answer: "{rng.choice(wrong)}"'
    if question.type == QuestionType.FILL_IN_BLANK:
        answer = question.correct_answer.strip()
        return f'First letter: "{answer[0].upper()}..."'
    if question.type == QuestionType.REARRANGE:
        return f'First word: "{question.correct_answer.split(" ")[0]}"'
    raise ValueError(f"Unknown question type: {question.type}")
