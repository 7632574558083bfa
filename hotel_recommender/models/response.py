"""Pydantic models for the recommendation HTTP response."""

from pydantic import BaseModel, ConfigDict, Field

from hotel_recommender.models.recommendation import Recommendation


class TotalCost(BaseModel):
    """Total trip cost in currency minor units."""

    cost: int
    currency: str


class RecommendationResponse(BaseModel):
    """Body returned by GET /recommendation."""

    hotel_name: str = Field(alias="hotelName")
    total_cost: TotalCost = Field(alias="totalCost")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_recommendation(cls, recommendation: Recommendation) -> "RecommendationResponse":
        """Build the response body from a domain recommendation."""
        return cls(
            hotel_name=recommendation.hotel_name,
            total_cost=TotalCost(
                cost=recommendation.trip_price.amount,
                currency=recommendation.trip_price.currency,
            ),
        )
