"""Partner availability API client for hotel options."""

from datetime import datetime
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError
from structlog import get_logger

from hotel_recommender.config import Settings, settings
from hotel_recommender.models import Money, Option, PartnershipResponse

logger = get_logger(__name__)

PARTNERSHIPS_ENDPOINT = "/partnerships"


class PartnershipClientError(Exception):
    """Base exception for partner API client errors."""

    pass


class PartnershipConnectionError(PartnershipClientError):
    """Raised when the partner API cannot be reached."""

    pass


class PartnershipUpstreamError(PartnershipClientError):
    """Raised when the partner API answers with a non-200 status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Partner API returned status {status_code}")


class PartnershipDecodeError(PartnershipClientError):
    """Raised when the partner API response body cannot be decoded."""

    pass


def format_partner_date(value: datetime) -> str:
    """Format a date as year-month-day without zero padding (e.g. 2024-1-4)."""
    return f"{value.year}-{value.month}-{value.day}"


def create_http_client(app_settings: Optional[Settings] = None) -> httpx.AsyncClient:
    """Create the shared HTTP client used to talk to the partner API.

    Connection failures are retried by the transport up to
    ``partner.max_retries`` times; status codes are never retried.
    Redirects are followed.

    Args:
        app_settings: Settings to use; defaults to the global settings

    Returns:
        Configured httpx.AsyncClient, owned and closed by the caller
    """
    app_settings = app_settings or settings
    transport = httpx.AsyncHTTPTransport(retries=app_settings.partner.max_retries)
    return httpx.AsyncClient(
        transport=transport,
        timeout=app_settings.partner.request_timeout,
        follow_redirects=True,
        headers={
            "Accept": "application/json",
            "User-Agent": "HotelRecommender/1.0",
        },
    )


class PartnershipClient:
    """Client for the partner availability endpoint."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        currency: str = "USD",
    ):
        """Initialize the partner client.

        Args:
            http_client: Shared async HTTP client (retries and timeouts live there)
            base_url: Partner API base URL
            currency: Currency the partner prices are expressed in

        Raises:
            ValueError: If the HTTP client or base URL is missing
        """
        if http_client is None:
            raise ValueError("http_client cannot be None")
        if not base_url or not base_url.strip():
            raise ValueError("base_url cannot be empty")

        self.http_client = http_client
        self.base_url = base_url.strip().rstrip("/")
        self.currency = currency

    async def get_availability(
        self,
        trip_start: datetime,
        trip_end: datetime,
        location: str,
    ) -> list[Option]:
        """Fetch hotel options for a location and date range.

        Args:
            trip_start: First day of the trip
            trip_end: Last day of the trip
            location: Location to search in

        Returns:
            Options in the order the partner returned them

        Raises:
            PartnershipConnectionError: If the request fails at the network level
            PartnershipUpstreamError: If the partner returns a non-200 status
            PartnershipDecodeError: If the response body is malformed
        """
        url = f"{self.base_url}{PARTNERSHIPS_ENDPOINT}"
        params = {
            "from": format_partner_date(trip_start),
            "to": format_partner_date(trip_end),
            "location": location,
        }

        logger.debug(
            "Requesting partner availability",
            location=location,
            date_from=params["from"],
            date_to=params["to"],
        )

        try:
            async with self.http_client.stream("GET", url, params=params) as response:
                if response.status_code != 200:
                    logger.error(
                        "Partner API returned error status",
                        location=location,
                        status_code=response.status_code,
                    )
                    raise PartnershipUpstreamError(
                        response.status_code,
                        f"Bad request to partnerships: {response.status_code}",
                    )
                body = await response.aread()
        except httpx.RequestError as e:
            logger.error(
                "Partner API request failed",
                location=location,
                error=str(e),
            )
            raise PartnershipConnectionError(
                f"Failed to get availability: {str(e)}"
            ) from e

        try:
            partnership = PartnershipResponse.model_validate_json(body)
        except PydanticValidationError as e:
            logger.error(
                "Failed to decode partner response",
                location=location,
                error=str(e),
            )
            raise PartnershipDecodeError(f"Failed to decode response: {str(e)}") from e

        options = [
            Option(
                location=location,
                hotel_name=hotel.name,
                price_per_night=Money(
                    amount=hotel.price_in_usd_per_night, currency=self.currency
                ),
            )
            for hotel in partnership.available_hotels
        ]

        logger.info(
            "Fetched partner availability",
            location=location,
            hotel_count=len(options),
        )
        return options
