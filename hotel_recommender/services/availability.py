"""Availability capability consumed by the recommendation service."""

from datetime import datetime
from typing import Protocol

from hotel_recommender.models import Option


class AvailabilityGetter(Protocol):
    """Anything that can list priced hotel options for a trip.

    Implementations raise on failure; PartnershipClient is the production one.
    """

    async def get_availability(
        self,
        trip_start: datetime,
        trip_end: datetime,
        location: str,
    ) -> list[Option]:
        ...
