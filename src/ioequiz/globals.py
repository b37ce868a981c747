from .bank import QuestionBank
from .config import settings
from .session import QuizSession

question_bank = QuestionBank(settings.QUESTION_FILE)
quiz_session = QuizSession(question_bank.questions)


def get_session() -> QuizSession:
    return quiz_session
