"""Run the Quiz API with uvicorn: python -m quiz, or the quiz-api script."""

import uvicorn

from quiz.config import get_settings
from quiz.infrastructure.observability import setup_logging
from quiz.main import create_app


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
