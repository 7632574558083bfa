"""Main entry point for the Hotel Recommender service."""

import sys

import uvicorn

from hotel_recommender.api import create_app
from hotel_recommender.config import configure_logging, get_logger, settings

logger = get_logger(__name__)


def main() -> int:
    """Serve the recommendation API until interrupted.

    Returns:
        Exit code
    """
    logger.info(
        "Starting Hotel Recommender",
        environment=settings.environment,
        host=settings.server.host,
        port=settings.server.port,
    )

    try:
        app = create_app(settings)
        uvicorn.run(
            app,
            host=settings.server.host,
            port=settings.server.port,
            log_config=None,
        )
    except Exception as e:
        logger.error(
            "Fatal error in main application",
            error=str(e),
            exc_info=True,
        )
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
