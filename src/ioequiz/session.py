import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from .config import Settings, settings as default_settings
from .errors import EmptyQuestionSet, InvalidOperation, OutOfRange
from .evaluator import build_response, evaluate
from .hints import make_hint
from .models import (
    GameState,
    GridCell,
    NavSlot,
    Question,
    QuestionType,
    QuestionView,
    Report,
    SessionView,
    UserAnswer,
)
from .navigation import NavigationWindow, question_grid
from . import scoring
from .timer import AsyncioScheduler, Handle, Scheduler, SessionTimer, format_clock

logger = logging.getLogger(__name__)


class QuizSession:
    """Single owner of one play-through: state, questions, position, answers.

    All mutation goes through the methods below. Operations called in the
    wrong state raise ``InvalidOperation`` before touching anything.
    """

    def __init__(
        self,
        bank: Sequence[Question],
        scheduler: Optional[Scheduler] = None,
        settings: Settings = default_settings,
        rng: Optional[random.Random] = None,
    ):
        self.bank: Tuple[Question, ...] = tuple(bank)
        self.scheduler = scheduler or AsyncioScheduler()
        self.points = settings.POINTS_PER_CORRECT
        self.advance_delay = settings.AUTO_ADVANCE_DELAY
        self.rng = rng or random.Random()

        self.state = GameState.START
        self.user_name = ""
        self.active_questions: Tuple[Question, ...] = ()
        self.current_index = 0
        self.answers: Dict[int, UserAnswer] = {}
        self.timer = SessionTimer(
            self.scheduler, self._on_timeout, settings.QUIZ_DURATION_SECONDS
        )
        self.nav = NavigationWindow(settings.NAV_PAGE_SIZE)
        self._pending_advance: Optional[Handle] = None

    # --- Lifecycle ---
    def use_bank(self, bank: Sequence[Question]):
        if self.state == GameState.PLAYING:
            raise InvalidOperation("Cannot replace questions during a session")
        self.bank = tuple(bank)

    def start(self, name: str):
        name = (name or "").strip()
        if not name:
            raise InvalidOperation("A player name is required")
        self._check_can_start(self.bank)
        self.user_name = name
        self.start_session(self.bank)

    def _check_can_start(self, questions: Sequence[Question]):
        if self.state == GameState.PLAYING:
            raise InvalidOperation("A session is already in progress")
        if not questions:
            raise EmptyQuestionSet("No questions to play")

    def start_session(self, questions: Sequence[Question]):
        questions = tuple(questions)
        self._check_can_start(questions)

        self._cancel_advance()
        self.active_questions = questions
        self.current_index = 0
        self.answers = {}
        self.nav.reset()
        self.state = GameState.PLAYING
        self.timer.start()
        logger.info(
            f"Session started for {self.user_name or 'player'} "
            f"with {len(questions)} questions"
        )

    def finish(self):
        self._require_playing()
        self._finish()

    def _finish(self):
        self.timer.stop()
        self._cancel_advance()
        self.state = GameState.FINISHED
        logger.info(
            f"Session finished: {self.answered_count}/{self.total} answered, "
            f"score {self.score}"
        )

    def _on_timeout(self):
        if self.state == GameState.PLAYING:
            logger.info("Time is up, submitting automatically")
            self._finish()

    def retry_all(self):
        self._require_finished()
        logger.info("Retrying all questions")
        self.start_session(self.bank)

    def retry_wrong(self):
        self._require_finished()
        wrong_ids = {a.question_id for a in self.answers.values() if not a.is_correct}
        logger.info(f"Retrying {len(wrong_ids)} wrong questions")
        self.start_session([q for q in self.bank if q.id in wrong_ids])

    # --- Answering ---
    def submit_answer(self, raw_response: str) -> Optional[UserAnswer]:
        self._require_playing()
        question = self.current_question
        response = raw_response or ""
        if question.type != QuestionType.MULTIPLE_CHOICE:
            response = response.strip()
        if not response:
            return None

        answer = UserAnswer(
            question_id=question.id,
            user_response=response,
            is_correct=evaluate(question, response),
        )
        self.answers[question.id] = answer

        # A new verdict replaces whatever advance the previous one scheduled.
        self._cancel_advance()
        if answer.is_correct and not self.is_last:
            self._schedule_advance(question.id)
        return answer

    def submit_selection(
        self,
        option: Optional[str] = None,
        text: Optional[str] = None,
        parts: Optional[Sequence[str]] = None,
    ) -> Optional[UserAnswer]:
        self._require_playing()
        response = build_response(self.current_question, option, text, parts)
        return self.submit_answer(response)

    def _schedule_advance(self, question_id: int):
        self._cancel_advance()

        def fire():
            self._pending_advance = None
            if self.state != GameState.PLAYING:
                return
            # The player may have moved on; only advance from the same question.
            if self.current_question.id != question_id:
                return
            self._move_to(self.current_index + 1)

        self._pending_advance = self.scheduler.call_later(self.advance_delay, fire)

    def _cancel_advance(self):
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

    # --- Navigation ---
    def advance(self):
        self._require_playing()
        if not self.is_last:
            self._move_to(self.current_index + 1)

    next = advance

    def skip(self):
        self._require_playing()
        if self.current_answer is not None:
            raise InvalidOperation("Cannot skip an answered question")
        self.advance()

    def jump_to(self, index: int):
        self._require_playing()
        if not 0 <= index < self.total:
            raise OutOfRange(f"Question index {index} out of range")
        self._move_to(index)

    def page_back(self):
        self._require_playing()
        self.nav.page_back()

    def page_forward(self):
        self._require_playing()
        self.nav.page_forward(self.total)

    def _move_to(self, index: int):
        if index != self.current_index:
            self._cancel_advance()
        self.current_index = index
        self.nav.follow(index)

    # --- Read model ---
    @property
    def total(self) -> int:
        return len(self.active_questions)

    @property
    def is_last(self) -> bool:
        return self.current_index >= self.total - 1

    @property
    def current_question(self) -> Question:
        return self.active_questions[self.current_index]

    @property
    def current_answer(self) -> Optional[UserAnswer]:
        if not self.active_questions:
            return None
        return self.answers.get(self.current_question.id)

    @property
    def score(self) -> int:
        return scoring.score(self.answers, self.points)

    @property
    def answered_count(self) -> int:
        return scoring.answered_count(self.answers)

    @property
    def time_left(self) -> int:
        return self.timer.time_left

    @property
    def can_skip(self) -> bool:
        return self.state == GameState.PLAYING and self.current_answer is None

    def nav_slots(self) -> List[NavSlot]:
        return self.nav.slots(self.active_questions, self.current_index, self.answers)

    def grid(self) -> List[GridCell]:
        self._require_playing()
        return question_grid(self.active_questions, self.current_index, self.answers)

    def hint(self) -> str:
        self._require_playing()
        if self.current_answer is not None:
            raise InvalidOperation("Question already answered")
        return make_hint(self.current_question, self.rng)

    def report(self) -> Report:
        self._require_finished()
        return scoring.build_report(self.user_name, self.answers, self.points)

    def question_view(self) -> Optional[QuestionView]:
        if self.state != GameState.PLAYING:
            return None
        q = self.current_question
        answer = self.current_answer
        feedback = {}
        if answer is not None:
            feedback = {
                "is_correct": answer.is_correct,
                "user_response": answer.user_response,
                "correct_answer": q.correct_answer,
                "explanation": q.explanation,
            }
        return QuestionView(
            id=q.id,
            type=q.type,
            question_text=q.question_text,
            image_url=q.image_url,
            audio_url=q.audio_url,
            options=q.options,
            rearrange_parts=q.rearrange_parts,
            is_answered=answer is not None,
            **feedback,
        )

    def view(self) -> SessionView:
        playing = self.state == GameState.PLAYING
        return SessionView(
            state=self.state,
            user_name=self.user_name,
            current_index=self.current_index,
            total=self.total,
            score=self.score,
            answered_count=self.answered_count,
            time_left=self.time_left,
            clock=format_clock(self.time_left),
            can_skip=self.can_skip,
            nav_start=self.nav.start,
            can_page_back=playing and self.nav.can_page_back,
            can_page_forward=playing and self.nav.can_page_forward(self.total),
            nav_slots=self.nav_slots() if playing else [],
            question=self.question_view(),
        )

    # --- Guards ---
    def _require_playing(self):
        if self.state != GameState.PLAYING:
            logger.warning(f"Rejected operation in state {self.state.value}")
            raise InvalidOperation(f"Session is {self.state.value}, not playing")

    def _require_finished(self):
        if self.state != GameState.FINISHED:
            logger.warning(f"Rejected operation in state {self.state.value}")
            raise InvalidOperation(f"Session is {self.state.value}, not finished")
