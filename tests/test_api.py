"""Integration tests for the recommendation HTTP API."""

from datetime import datetime
from unittest.mock import AsyncMock, Mock

import httpx
import pytest
from fastapi.testclient import TestClient

from hotel_recommender.api import create_app
from hotel_recommender.clients import PartnershipConnectionError, PartnershipUpstreamError
from hotel_recommender.config import Settings
from hotel_recommender.config.settings import PartnerSettings, RecommendationSettings

VALID_PARAMS = {"location": "NYC", "from": "2024-01-01", "to": "2024-01-04", "budget": "500"}


@pytest.fixture
def client(mock_availability):
    """Test client backed by the mocked availability source."""
    return TestClient(create_app(Settings(), availability=mock_availability))


class TestGetRecommendation:
    """Tests for GET /recommendation."""

    def test_returns_cheapest_hotel(self, client, mock_availability):
        response = client.get("/recommendation", params=VALID_PARAMS)

        assert response.status_code == 200
        assert response.json() == {
            "hotelName": "HotelA",
            "totalCost": {"cost": 300, "currency": "USD"},
        }
        mock_availability.get_availability.assert_awaited_once_with(
            datetime(2024, 1, 1), datetime(2024, 1, 4), "NYC"
        )

    def test_no_option_within_budget(self, client):
        response = client.get("/recommendation", params={**VALID_PARAMS, "budget": "250"})

        assert response.status_code == 404
        assert response.json()["detail"] == "No options available"

    @pytest.mark.parametrize("missing", ["location", "from", "to", "budget"])
    def test_missing_parameter(self, client, mock_availability, missing):
        params = {key: value for key, value in VALID_PARAMS.items() if key != missing}

        response = client.get("/recommendation", params=params)

        assert response.status_code == 400
        assert missing in response.json()["detail"]
        mock_availability.get_availability.assert_not_called()

    @pytest.mark.parametrize(
        "param,value",
        [("from", "01/01/2024"), ("to", "2024-13-01"), ("budget", "five hundred")],
    )
    def test_malformed_parameter(self, client, param, value):
        response = client.get("/recommendation", params={**VALID_PARAMS, param: value})

        assert response.status_code == 400
        assert param in response.json()["detail"]

    def test_empty_location(self, client):
        response = client.get("/recommendation", params={**VALID_PARAMS, "location": ""})

        assert response.status_code == 400
        assert response.json()["field"] == "location"

    def test_upstream_error(self, mock_availability):
        mock_availability.get_availability = AsyncMock(
            side_effect=PartnershipUpstreamError(500)
        )
        client = TestClient(create_app(Settings(), availability=mock_availability))

        response = client.get("/recommendation", params=VALID_PARAMS)

        assert response.status_code == 502
        assert response.json()["upstream_status"] == 500

    def test_connection_error(self):
        availability = Mock()
        availability.get_availability = AsyncMock(
            side_effect=PartnershipConnectionError("connection refused")
        )
        client = TestClient(create_app(Settings(), availability=availability))

        response = client.get("/recommendation", params=VALID_PARAMS)

        assert response.status_code == 502
        assert "upstream_status" not in response.json()

    def test_forward_stay_setting(self, mock_availability):
        app_settings = Settings(
            recommendation=RecommendationSettings(require_forward_stay=True)
        )
        client = TestClient(create_app(app_settings, availability=mock_availability))

        response = client.get(
            "/recommendation", params={**VALID_PARAMS, "from": "2024-01-04", "to": "2024-01-01"}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "trip_end"


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestPartnerWiring:
    """Tests for the app built against the partner client."""

    def test_lifespan_builds_partner_client(self, monkeypatch, partner_availability_response):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=partner_availability_response)

        def fake_http_client(app_settings):
            return httpx.AsyncClient(transport=httpx.MockTransport(handler))

        monkeypatch.setattr("hotel_recommender.api.app.create_http_client", fake_http_client)
        app_settings = Settings(partner=PartnerSettings(base_url="http://partner.test/"))

        with TestClient(create_app(app_settings)) as client:
            response = client.get("/recommendation", params=VALID_PARAMS)

        assert response.status_code == 200
        assert response.json()["hotelName"] == "HotelA"
        assert str(requests[0].url) == (
            "http://partner.test/partnerships?from=2024-1-1&to=2024-1-4&location=NYC"
        )
