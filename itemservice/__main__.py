"""Run the service with uvicorn: ``python -m itemservice``."""

import uvicorn

from itemservice.config import settings
from itemservice.main import app


def main() -> None:
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
