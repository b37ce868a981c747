from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_IN_BLANK = "fill_in_blank"
    REARRANGE = "rearrange"


class GameState(str, Enum):
    START = "start"
    PLAYING = "playing"
    FINISHED = "finished"


class AnswerStatus(str, Enum):
    UNANSWERED = "unanswered"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class SlotStatus(str, Enum):
    CURRENT = "current"
    DONE = "done"
    PENDING = "pending"


class Question(BaseModel):
    """A question record from the bank. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    id: int
    type: QuestionType
    question_text: str
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    options: Optional[List[str]] = None
    rearrange_parts: Optional[List[str]] = None
    correct_answer: str
    explanation: str = ""

    @model_validator(mode="after")
    def check_fields_for_type(self) -> "Question":
        if not self.correct_answer.strip():
            raise ValueError(f"question {self.id}: correct_answer is empty")
        if self.type == QuestionType.MULTIPLE_CHOICE:
            if not self.options:
                raise ValueError(f"question {self.id}: multiple choice needs options")
            if self.rearrange_parts:
                raise ValueError(f"question {self.id}: unexpected rearrange_parts")
        elif self.type == QuestionType.REARRANGE:
            if not self.rearrange_parts:
                raise ValueError(f"question {self.id}: rearrange needs parts")
            if self.options:
                raise ValueError(f"question {self.id}: unexpected options")
        elif self.type == QuestionType.FILL_IN_BLANK:
            if self.options or self.rearrange_parts:
                raise ValueError(
                    f"question {self.id}: fill in blank takes no options or parts"
                )
        return self


class UserAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: int
    user_response: str
    is_correct: bool


# --- Read models for the presentation layer ---
class QuestionView(BaseModel):
    id: int
    type: QuestionType
    question_text: str
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    options: Optional[List[str]] = None
    rearrange_parts: Optional[List[str]] = None
    is_answered: bool
    is_correct: Optional[bool] = None
    user_response: Optional[str] = None
    # Revealed only after the question has been answered.
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None


class NavSlot(BaseModel):
    index: int
    number: int
    question_id: int
    status: SlotStatus


class GridCell(BaseModel):
    index: int
    number: int
    question_id: int
    status: AnswerStatus
    is_current: bool


class SessionView(BaseModel):
    state: GameState
    user_name: str
    current_index: int
    total: int
    score: int
    answered_count: int
    time_left: int
    clock: str
    can_skip: bool
    nav_start: int
    can_page_back: bool
    can_page_forward: bool
    nav_slots: List[NavSlot]
    question: Optional[QuestionView] = None


class Report(BaseModel):
    user_name: str
    correct: int
    wrong: int
    answered: int
    percent: int
    score: int
    has_wrong: bool
