"""Entry point for running the framers calculator web application."""

from __future__ import annotations

import uvicorn

from ..config import Settings
from .app import create_app


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":  # pragma: no cover
    main()
