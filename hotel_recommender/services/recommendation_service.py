"""Recommendation service selecting the cheapest hotel within budget."""

from datetime import datetime, timedelta
from typing import Optional

from structlog import get_logger

from hotel_recommender.models import Money, Option, Recommendation
from hotel_recommender.services.availability import AvailabilityGetter

logger = get_logger(__name__)

_DAY = timedelta(days=1)
_MICROSECOND = timedelta(microseconds=1)


class RecommendationError(Exception):
    """Base exception for recommendation errors."""

    pass


class ValidationError(RecommendationError):
    """Raised when a request parameter is missing or invalid."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class AvailabilityError(RecommendationError):
    """Raised when hotel availability could not be retrieved."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NoOptionsAvailableError(RecommendationError):
    """Raised when no hotel option fits the budget."""

    pass


def _is_unset(value: Optional[datetime]) -> bool:
    return value is None or value.replace(tzinfo=None) == datetime.min


def trip_nights(trip_start: datetime, trip_end: datetime) -> int:
    """Count nights as 24-hour periods between two dates, rounded half away from zero.

    Reversed ranges give a negative count; nothing here rejects them.

    Args:
        trip_start: Start of the trip
        trip_end: End of the trip

    Returns:
        Number of nights used as the price multiplier
    """
    elapsed = (trip_end - trip_start) // _MICROSECOND
    day = _DAY // _MICROSECOND
    nights, remainder = divmod(abs(elapsed), day)
    if 2 * remainder >= day:
        nights += 1
    return nights if elapsed >= 0 else -nights


class RecommendationService:
    """Recommends the cheapest hotel option for a trip within a budget.

    Holds no per-request state, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        availability: AvailabilityGetter,
        require_forward_stay: bool = False,
    ):
        """Initialize the recommendation service.

        Args:
            availability: Source of priced hotel options
            require_forward_stay: Reject trips that do not end after they start

        Raises:
            ValueError: If no availability source is given
        """
        if availability is None:
            raise ValueError("availability cannot be None")
        self.availability = availability
        self.require_forward_stay = require_forward_stay

    def _validate(
        self,
        trip_start: Optional[datetime],
        trip_end: Optional[datetime],
        location: str,
    ) -> None:
        if _is_unset(trip_start):
            raise ValidationError("trip_start", "trip_start cannot be zero")
        if _is_unset(trip_end):
            raise ValidationError("trip_end", "trip_end cannot be zero")
        if not location:
            raise ValidationError("location", "location cannot be empty")

    async def get(
        self,
        trip_start: datetime,
        trip_end: datetime,
        location: str,
        budget: Money,
    ) -> Recommendation:
        """Recommend the cheapest hotel whose total trip price fits the budget.

        Args:
            trip_start: Start of the trip
            trip_end: End of the trip
            location: Location to stay in
            budget: Maximum total price for the whole stay

        Returns:
            Recommendation with the chosen hotel and its total trip price

        Raises:
            ValidationError: If a parameter is missing or the stay is not forward
            AvailabilityError: If the availability source fails
            NoOptionsAvailableError: If no option fits the budget
        """
        self._validate(trip_start, trip_end, location)

        nights = trip_nights(trip_start, trip_end)
        if nights <= 0:
            if self.require_forward_stay:
                raise ValidationError("trip_end", "trip_end must be after trip_start")
            logger.warning(
                "Trip has no positive duration",
                location=location,
                nights=nights,
            )

        try:
            options = await self.availability.get_availability(
                trip_start, trip_end, location
            )
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            logger.error(
                "Failed to get availability",
                location=location,
                status_code=status_code,
                error=str(e),
            )
            raise AvailabilityError(
                f"Failed to get availability: {str(e)}", status_code=status_code
            ) from e

        best_option: Optional[Option] = None
        best_price: Optional[Money] = None
        for option in options:
            total_price = option.price_per_night.multiply(nights)
            if total_price > budget:
                continue
            if best_price is None or total_price < best_price:
                best_option = option
                best_price = total_price

        if best_option is None:
            logger.info(
                "No options within budget",
                location=location,
                budget=budget.amount,
                option_count=len(options),
            )
            raise NoOptionsAvailableError("No options available")

        logger.info(
            "Recommendation selected",
            location=location,
            hotel_name=best_option.hotel_name,
            trip_price=best_price.amount,
            nights=nights,
        )
        return Recommendation(
            trip_start=trip_start,
            trip_end=trip_end,
            location=location,
            hotel_name=best_option.hotel_name,
            trip_price=best_price,
        )
