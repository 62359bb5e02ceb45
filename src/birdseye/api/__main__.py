"""
birdseye.api.__main__

Entrypoint for running the service via `python -m birdseye.api`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from birdseye.api.app import create_app
from birdseye.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    # Single worker: the registry is in-process state and must have one owner.
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
