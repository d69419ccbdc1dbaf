"""Contracts for the external price search provider."""

from __future__ import annotations

from typing import Protocol

from psc_client.models import FareResponse, SearchRequest


class PriceSearchProtocol(Protocol):
    """Port describing interactions with the price search service."""

    async def search(self, query: SearchRequest) -> FareResponse:
        """Run one price search and return the decoded response."""
