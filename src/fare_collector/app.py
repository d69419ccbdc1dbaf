"""Collector wiring."""

from __future__ import annotations

import random
from datetime import date
from typing import TextIO

from fare_collector.config import Settings
from fare_collector.domain.services.collector import CollectionStats, FareCollector, Route
from fare_collector.domain.services.delay_policy import DelayPolicy
from fare_collector.infrastructure.price_search_adapter import PriceSearchAdapter
from fare_collector.infrastructure.record_writer import CsvRecordWriter


def build_routes(settings: Settings) -> list[Route]:
    """Resolve configured station pairs through the station table."""
    return [
        Route.resolve(settings.stations, origin, destination)
        for origin, destination in settings.routes
    ]


async def run_collection(
    settings: Settings,
    stream: TextIO,
    rng: random.Random | None = None,
) -> CollectionStats:
    """Run one collection pass with the given settings, writing records to `stream`."""
    delay_policy = DelayPolicy(
        route_delay_min=settings.route_delay_min,
        route_delay_max=settings.route_delay_max,
        request_delay=settings.request_delay,
        rng=rng or random.Random(),
    )
    async with PriceSearchAdapter.from_settings(settings) as price_search:
        collector = FareCollector(
            price_search=price_search,
            sink=CsvRecordWriter(stream),
            delay_policy=delay_policy,
            abort_on_error=settings.abort_on_error,
        )
        return await collector.run(
            build_routes(settings),
            start_date=settings.start_date or date.today(),
            days=settings.days,
            departure_hour=settings.departure_hour,
        )
