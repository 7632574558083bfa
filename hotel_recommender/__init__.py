"""Hotel Recommender: cheapest partner hotel for a trip within budget."""

__version__ = "1.0.0"
