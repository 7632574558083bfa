"""Business services package."""

from hotel_recommender.services.availability import AvailabilityGetter
from hotel_recommender.services.recommendation_service import (
    AvailabilityError,
    NoOptionsAvailableError,
    RecommendationError,
    RecommendationService,
    ValidationError,
    trip_nights,
)

__all__ = [
    "AvailabilityGetter",
    "RecommendationService",
    "RecommendationError",
    "ValidationError",
    "AvailabilityError",
    "NoOptionsAvailableError",
    "trip_nights",
]
