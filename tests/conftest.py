import pytest

from ioequiz.models import Question, QuestionType
from ioequiz.session import QuizSession


class ManualHandle:
    def __init__(self, when, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Fake clock: callbacks run only when the test moves time forward."""

    def __init__(self):
        self.now = 0.0
        self.pending = []

    def call_later(self, delay, callback):
        handle = ManualHandle(self.now + delay, callback)
        self.pending.append(handle)
        return handle

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if not h.cancelled and h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.pending.remove(handle)
            self.now = handle.when
            handle.callback()
        self.now = target
        self.pending = [h for h in self.pending if not h.cancelled]


def mc(qid, correct, options=None):
    return Question(
        id=qid,
        type=QuestionType.MULTIPLE_CHOICE,
        question_text=f"Question {qid}",
        options=options or [correct, "wrong", "other"],
        correct_answer=correct,
        explanation=f"Because {correct}.",
    )


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def bank():
    return [
        mc(1, "Paris"),
        Question(
            id=2,
            type=QuestionType.FILL_IN_BLANK,
            question_text="I ___ a student.",
            correct_answer="am",
        ),
        Question(
            id=3,
            type=QuestionType.REARRANGE,
            question_text="Order the words.",
            rearrange_parts=["school", "I", "to", "go"],
            correct_answer="I go to school",
        ),
        mc(4, "cat"),
        mc(5, "blue"),
    ]


@pytest.fixture
def session(bank, scheduler):
    return QuizSession(bank, scheduler=scheduler)


@pytest.fixture
def playing(session):
    session.start("Linh")
    return session
