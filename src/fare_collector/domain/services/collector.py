"""Application service running the fare collection loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Protocol

from ..exceptions import CollectionAborted, PriceSearchError
from ..ports.price_search import PriceSearchProtocol
from ..records import FlatRecord
from .converter import ConnectionFlattener
from .delay_policy import DelayPolicy
from .query_builder import build_query

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class RecordSink(Protocol):
    """Destination for flattened records."""

    def write(self, records: Iterable[FlatRecord]) -> int:
        """Write records and return how many were written."""


@dataclass(frozen=True, slots=True)
class Route:
    """Station pair to scan, with resolved station ids."""

    origin: str
    destination: str
    origin_id: int
    destination_id: int

    @classmethod
    def resolve(cls, stations: Mapping[str, int], origin: str, destination: str) -> Route:
        """
        Resolve station names through the lookup table.

        Raises:
            KeyError: If either station is unknown
        """
        return cls(origin, destination, stations[origin], stations[destination])

    def __str__(self) -> str:
        return f"{self.origin}->{self.destination}"


@dataclass(slots=True)
class CollectionStats:
    """Counters for one collection run."""

    requests: int = 0
    failed_requests: int = 0
    records: int = 0
    skipped_references: int = 0
    unparsable_prices: int = 0


class FareCollector:
    """
    Scan every route for a number of consecutive days.

    Requests are strictly sequential: all days of a route are queried
    before the next route, and the records of a day are written before
    the next day is requested.
    """

    def __init__(
        self,
        price_search: PriceSearchProtocol,
        sink: RecordSink,
        flattener: ConnectionFlattener | None = None,
        delay_policy: DelayPolicy | None = None,
        sleep: Sleep = asyncio.sleep,
        abort_on_error: bool = True,
    ) -> None:
        self._price_search = price_search
        self._sink = sink
        self._flattener = flattener or ConnectionFlattener()
        self._delay_policy = delay_policy or DelayPolicy()
        self._sleep = sleep
        self._abort_on_error = abort_on_error

    async def run(
        self,
        routes: Sequence[Route],
        start_date: date,
        days: int,
        departure_hour: int = 1,
    ) -> CollectionStats:
        """
        Collect fares for all routes.

        Raises:
            CollectionAborted: If a request fails and abort_on_error is set
        """
        stats = CollectionStats()
        for route in routes:
            await self._sleep(self._delay_policy.route_delay())
            for offset in range(days):
                await self._sleep(self._delay_policy.request_delay)
                instant = datetime.combine(start_date + timedelta(days=offset), time(departure_hour))
                await self.collect_day(route, instant, stats)

        logger.info(
            "collection finished",
            extra={
                "requests": stats.requests,
                "failed_requests": stats.failed_requests,
                "records": stats.records,
                "skipped_references": stats.skipped_references,
                "unparsable_prices": stats.unparsable_prices,
            },
        )
        return stats

    async def collect_day(
        self,
        route: Route,
        instant: datetime,
        stats: CollectionStats | None = None,
    ) -> list[FlatRecord]:
        """Query one route for one day and write the resulting records."""
        if stats is None:
            stats = CollectionStats()
        query = build_query(route.origin_id, route.destination_id, instant)
        log_extra = {"route": str(route), "dt": query.dt, "t": query.t}

        stats.requests += 1
        try:
            response = await self._price_search.search(query)
        except PriceSearchError as e:
            stats.failed_requests += 1
            if self._abort_on_error:
                logger.error("price search failed, aborting: %s", e, extra=log_extra)
                raise CollectionAborted(f"Price search failed for {route} on {query.dt}") from e
            logger.error("price search failed, skipping day: %s", e, extra=log_extra)
            return []

        records = self._flattener.flatten_response(response, route.origin_id, route.destination_id)
        references = sum(len(offer.sids) for offer in response.offers.values())
        stats.skipped_references += references - len(records)
        stats.unparsable_prices += sum(1 for record in records if not record.price_parsed)
        stats.records += self._sink.write(records)

        logger.info(
            "day collected",
            extra={**log_extra, "offers": len(response.offers), "records": len(records)},
        )
        return records
