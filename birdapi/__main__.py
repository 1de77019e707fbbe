"""Run the server: ``python -m birdapi``."""

import uvicorn

from birdapi.config import settings


def main() -> None:
    uvicorn.run(
        "birdapi.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
