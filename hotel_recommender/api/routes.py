"""Routes for hotel recommendation requests."""

from datetime import date, datetime, time

from fastapi import APIRouter, Depends, Query, Request

from hotel_recommender.models import Money, RecommendationResponse
from hotel_recommender.services import RecommendationService

router = APIRouter(tags=["recommendation"])


def get_recommendation_service(request: Request) -> RecommendationService:
    """Return the service built for this application."""
    return request.app.state.recommendation_service


def get_currency(request: Request) -> str:
    """Return the currency budgets and prices are expressed in."""
    return request.app.state.currency


@router.get("/recommendation", response_model=RecommendationResponse)
async def get_recommendation(
    location: str = Query(...),
    trip_from: date = Query(..., alias="from"),
    trip_to: date = Query(..., alias="to"),
    budget: int = Query(..., description="Budget in currency minor units"),
    service: RecommendationService = Depends(get_recommendation_service),
    currency: str = Depends(get_currency),
) -> RecommendationResponse:
    """Recommend the cheapest hotel for the trip that fits the budget."""
    recommendation = await service.get(
        datetime.combine(trip_from, time.min),
        datetime.combine(trip_to, time.min),
        location,
        Money(amount=budget, currency=currency),
    )
    return RecommendationResponse.from_recommendation(recommendation)


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


__all__ = ["router"]
