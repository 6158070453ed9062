"""Process entry point: configure logging and serve the ASGI app."""

from __future__ import annotations

import logging

import uvicorn

from session_handoff.infrastructure.config import get_settings


def main() -> None:
    """Start the uvicorn ASGI server using the configured host and port."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    uvicorn.run(
        "session_handoff.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
