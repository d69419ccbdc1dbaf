"""Adapter wrapping PriceSearchApi to conform to PriceSearchProtocol."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from psc_client.api_service import PriceSearchApi
from psc_client.models import FareResponse, SearchRequest

from ..config import Settings
from ..domain.exceptions import PriceSearchError

logger = logging.getLogger(__name__)


class PriceSearchAdapter:
    """
    Adapter wrapping PriceSearchApi implementation to conform to the protocol.

    Transport failures, non-2xx statuses and undecodable bodies are all
    reported as PriceSearchError. Nothing is retried.
    """

    def __init__(self, api: PriceSearchApi | None = None) -> None:
        """
        Initialize adapter with optional PriceSearchApi instance.

        Args:
            api: PriceSearchApi instance to use
        """
        self._api = api or PriceSearchApi()

    @classmethod
    def from_settings(cls, settings: Settings) -> PriceSearchAdapter:
        return cls(
            PriceSearchApi(
                endpoint=settings.endpoint,
                service=settings.service,
                lang=settings.lang,
                timeout=settings.request_timeout,
            )
        )

    async def search(self, query: SearchRequest) -> FareResponse:
        """Run the search and decode the response."""
        log_extra = {"s": query.s, "d": query.d, "dt": query.dt}
        try:
            response = await self._api.search(query)
        except httpx.HTTPStatusError as e:
            logger.error(
                "Price search returned error status",
                extra={**log_extra, "status_code": e.response.status_code},
            )
            raise PriceSearchError(f"Unexpected status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("Price search request failed", exc_info=True, extra=log_extra)
            raise PriceSearchError(f"Request failed: {e}") from e
        except ValidationError as e:
            logger.error("Price search response not decodable", extra={**log_extra, "error": str(e)})
            raise PriceSearchError("Response body is not a fare response") from e

        logger.debug(
            "Price search finished",
            extra={**log_extra, "offers": len(response.offers), "connections": len(response.connections)},
        )
        return response

    async def aclose(self) -> None:
        await self._api.aclose()

    async def __aenter__(self) -> PriceSearchAdapter:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
