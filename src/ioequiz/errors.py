class QuizError(Exception):
    """Base class for operations the quiz engine declines."""

    status_code: int = 400


class InvalidOperation(QuizError):
    """Operation not allowed in the current session state."""

    status_code = 409


class OutOfRange(QuizError):
    status_code = 404


class EmptyQuestionSet(QuizError):
    status_code = 400
