import os


class Settings:
    PROJECT_NAME: str = "ioequiz"
    DEBUG: bool = os.environ.get("IOEQUIZ_DEBUG", "") == "1"
    LOG_DIR: str = "log"
    LOG_FILE: str = "ioequiz.log"
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
    QUESTION_FILE: str = os.environ.get("QUESTION_FILE", "questions/ioe_k5.csv")
    QUIZ_DURATION_SECONDS: int = 30 * 60
    POINTS_PER_CORRECT: int = 10
    NAV_PAGE_SIZE: int = 10
    AUTO_ADVANCE_DELAY: float = 1.5
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "8000"))
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
