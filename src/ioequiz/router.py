import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Form

from .globals import get_session
from .models import GridCell, Report, SessionView, UserAnswer
from .session import QuizSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/state", response_model=SessionView)
async def get_state(session: QuizSession = Depends(get_session)):
    return session.view()


@router.post("/start", response_model=SessionView)
async def start_quiz(
    name: str = Form(...), session: QuizSession = Depends(get_session)
):
    session.start(name)
    logger.info(f"New session for {session.user_name}")
    return session.view()


@router.post("/answer", response_model=Optional[UserAnswer])
async def submit_answer(
    option: Optional[str] = Form(None),
    text: Optional[str] = Form(None),
    parts: Optional[List[str]] = Form(None),
    session: QuizSession = Depends(get_session),
):
    """Judges the current question. Returns null when the input was empty."""
    return session.submit_selection(option=option, text=text, parts=parts)


@router.post("/next", response_model=SessionView)
async def next_question(session: QuizSession = Depends(get_session)):
    session.advance()
    return session.view()


@router.post("/skip", response_model=SessionView)
async def skip_question(session: QuizSession = Depends(get_session)):
    session.skip()
    return session.view()


@router.post("/jump/{index}", response_model=SessionView)
async def jump_to_question(index: int, session: QuizSession = Depends(get_session)):
    session.jump_to(index)
    return session.view()


@router.post("/nav/back", response_model=SessionView)
async def nav_page_back(session: QuizSession = Depends(get_session)):
    session.page_back()
    return session.view()


@router.post("/nav/forward", response_model=SessionView)
async def nav_page_forward(session: QuizSession = Depends(get_session)):
    session.page_forward()
    return session.view()


@router.post("/finish", response_model=Report)
async def finish_quiz(session: QuizSession = Depends(get_session)):
    session.finish()
    return session.report()


@router.post("/retry/all", response_model=SessionView)
async def retry_all(session: QuizSession = Depends(get_session)):
    session.retry_all()
    return session.view()


@router.post("/retry/wrong", response_model=SessionView)
async def retry_wrong(session: QuizSession = Depends(get_session)):
    session.retry_wrong()
    return session.view()


@router.get("/grid", response_model=List[GridCell])
async def get_grid(session: QuizSession = Depends(get_session)):
    return session.grid()


@router.get("/hint")
async def get_hint(session: QuizSession = Depends(get_session)):
    return {"hint": session.hint()}


@router.get("/result", response_model=Report)
async def get_result(session: QuizSession = Depends(get_session)):
    return session.report()
