"""HTTP API package."""

from hotel_recommender.api.app import create_app
from hotel_recommender.api.routes import router

__all__ = ["create_app", "router"]
