"""API clients package."""

from hotel_recommender.clients.partnership_client import (
    PartnershipClient,
    PartnershipClientError,
    PartnershipConnectionError,
    PartnershipDecodeError,
    PartnershipUpstreamError,
    create_http_client,
    format_partner_date,
)

__all__ = [
    "PartnershipClient",
    "PartnershipClientError",
    "PartnershipConnectionError",
    "PartnershipDecodeError",
    "PartnershipUpstreamError",
    "create_http_client",
    "format_partner_date",
]
