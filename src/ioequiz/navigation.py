from typing import List, Mapping, Sequence

from .config import settings
from .models import GridCell, NavSlot, Question, SlotStatus, UserAnswer
from .scoring import answer_status


class NavigationWindow:
    """The page of question numbers shown in the jump bar.

    ``start`` follows the current question but can be paged by hand until
    the current question changes again.
    """

    def __init__(self, page_size: int = settings.NAV_PAGE_SIZE):
        self.page_size = page_size
        self.start = 0

    def reset(self):
        self.start = 0

    def follow(self, index: int):
        self.start = (index // self.page_size) * self.page_size

    def page_back(self):
        self.start = max(0, self.start - self.page_size)

    def page_forward(self, total: int):
        if self.start + self.page_size < total:
            self.start += self.page_size

    @property
    def can_page_back(self) -> bool:
        return self.start > 0

    def can_page_forward(self, total: int) -> bool:
        return self.start + self.page_size < total

    def visible(self, total: int) -> range:
        return range(self.start, min(self.start + self.page_size, total))

    def slots(
        self,
        questions: Sequence[Question],
        current_index: int,
        answers: Mapping[int, UserAnswer],
    ) -> List[NavSlot]:
        slots = []
        for index in self.visible(len(questions)):
            q = questions[index]
            if index == current_index:
                status = SlotStatus.CURRENT
            elif q.id in answers:
                status = SlotStatus.DONE
            else:
                status = SlotStatus.PENDING
            slots.append(
                NavSlot(index=index, number=index + 1, question_id=q.id, status=status)
            )
        return slots


def question_grid(
    questions: Sequence[Question],
    current_index: int,
    answers: Mapping[int, UserAnswer],
) -> List[GridCell]:
    """Every question with its answer status, for the full jump overlay."""
    return [
        GridCell(
            index=index,
            number=index + 1,
            question_id=q.id,
            status=answer_status(q, answers),
            is_current=index == current_index,
        )
        for index, q in enumerate(questions)
    ]
