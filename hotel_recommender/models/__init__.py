"""Domain, partner API and response models."""

from hotel_recommender.models.money import CurrencyMismatchError, Money
from hotel_recommender.models.partner import AvailableHotel, PartnershipResponse
from hotel_recommender.models.recommendation import Option, Recommendation
from hotel_recommender.models.response import RecommendationResponse, TotalCost

__all__ = [
    "Money",
    "CurrencyMismatchError",
    "Option",
    "Recommendation",
    "AvailableHotel",
    "PartnershipResponse",
    "RecommendationResponse",
    "TotalCost",
]
