import json
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from hotel_recommender.models import Money, Option


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_option(name: str, price: int, location: str = "NYC") -> Option:
    """Build a USD option priced per night in cents."""
    return Option(
        location=location,
        hotel_name=name,
        price_per_night=Money(amount=price, currency="USD"),
    )


@pytest.fixture
def partner_availability_response():
    """Load partner availability response from fixture."""
    with open(FIXTURES_DIR / "partner_api" / "availability_response.json") as f:
        return json.load(f)


@pytest.fixture
def partner_empty_response():
    """Load partner response without hotels."""
    with open(FIXTURES_DIR / "partner_api" / "empty_response.json") as f:
        return json.load(f)


@pytest.fixture
def partner_malformed_response_text():
    """Load partner response with a non-integer price."""
    return (FIXTURES_DIR / "partner_api" / "malformed_response.json").read_text()


@pytest.fixture
def trip_start():
    return datetime(2024, 1, 1)


@pytest.fixture
def trip_end():
    """Three nights after trip_start."""
    return datetime(2024, 1, 4)


@pytest.fixture(name="make_option")
def make_option_fixture():
    """Factory for USD options."""
    return make_option


@pytest.fixture
def mock_availability():
    """Availability source returning HotelA at 100 and HotelB at 150 per night."""
    availability = Mock()
    availability.get_availability = AsyncMock(
        return_value=[make_option("HotelA", 100), make_option("HotelB", 150)]
    )
    return availability
