import uvicorn

from .app import create_app
from .config import settings

app = create_app()


def run():
    uvicorn.run(
        "ioequiz.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG
    )


if __name__ == "__main__":
    run()
