import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .globals import question_bank, quiz_session
from .config import settings
from .errors import QuizError
from .router import router

logger = logging.getLogger(__name__)


# --- Logging Setup ---
def setup_logging():
    level = logging.getLevelName(settings.LOG_LEVEL)
    package_logger = logging.getLogger("ioequiz")
    package_logger.setLevel(level)

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.abspath(os.path.join(settings.LOG_DIR, settings.LOG_FILE))
    # create_app may run more than once per process; one file handler per path.
    for handler in package_logger.handlers:
        if getattr(handler, "baseFilename", None) == log_path:
            return handler

    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(file_handler)
    logging.basicConfig(level=level)
    return file_handler


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    question_bank.load()
    quiz_session.use_bank(question_bank.questions)
    yield
    quiz_session.timer.stop()


async def quiz_error_handler(request: Request, exc: QuizError) -> JSONResponse:
    logger.info(f"{request.url.path}: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=exc.status_code)


# --- App Factory ---
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )

    app.add_exception_handler(QuizError, quiz_error_handler)
    app.include_router(router)

    return app
