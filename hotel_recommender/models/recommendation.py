"""Domain models for hotel options and trip recommendations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from hotel_recommender.models.money import Money


class Option(BaseModel):
    """A priced hotel offer for a location, independent of trip length."""

    location: str
    hotel_name: str
    price_per_night: Money

    model_config = ConfigDict(frozen=True)


class Recommendation(BaseModel):
    """The cheapest hotel that fits the budget for a specific trip."""

    trip_start: datetime
    trip_end: datetime
    location: str
    hotel_name: str
    trip_price: Money  # Total for the whole stay, not per night

    model_config = ConfigDict(frozen=True)
