"""FastAPI application factory for the recommendation service."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from structlog import get_logger

from hotel_recommender.api.error_handlers import register_exception_handlers
from hotel_recommender.api.routes import router
from hotel_recommender.clients import PartnershipClient, create_http_client
from hotel_recommender.config import Settings, settings
from hotel_recommender.services import AvailabilityGetter, RecommendationService

logger = get_logger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    availability: Optional[AvailabilityGetter] = None,
) -> FastAPI:
    """Build the application.

    When no availability source is given, the partner client and its HTTP
    client are created on startup and the HTTP client is closed on shutdown.

    Args:
        app_settings: Settings to use; defaults to the global settings
        availability: Availability source to use instead of the partner API

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or settings
    require_forward_stay = app_settings.recommendation.require_forward_stay

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if availability is not None:
            yield
            return

        async with create_http_client(app_settings) as http_client:
            partnership_client = PartnershipClient(
                http_client,
                app_settings.partner_base_url,
                currency=app_settings.recommendation.currency,
            )
            app.state.recommendation_service = RecommendationService(
                partnership_client,
                require_forward_stay=require_forward_stay,
            )
            logger.info(
                "Partner client ready",
                base_url=app_settings.partner_base_url,
                max_retries=app_settings.partner.max_retries,
            )
            yield
        logger.info("Partner client closed")

    app = FastAPI(title="Hotel Recommender", debug=app_settings.debug, lifespan=lifespan)
    app.state.currency = app_settings.recommendation.currency
    if availability is not None:
        app.state.recommendation_service = RecommendationService(
            availability,
            require_forward_stay=require_forward_stay,
        )

    register_exception_handlers(app)
    app.include_router(router)
    return app
