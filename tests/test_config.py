"""Tests for Settings."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from fare_collector.app import build_routes
from fare_collector.config import DEFAULT_ROUTES, Settings, get_settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.days == 7
    assert settings.departure_hour == 1
    assert settings.request_delay == 3.0
    assert (settings.route_delay_min, settings.route_delay_max) == (60.0, 240.0)
    assert settings.routes == DEFAULT_ROUTES
    assert settings.stations["Frankfurt(Main)Hbf"] == 8000105
    assert settings.abort_on_error is True


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("FARE_COLLECTOR_DAYS", "3")
    monkeypatch.setenv("FARE_COLLECTOR_START_DATE", "2018-07-16")
    monkeypatch.setenv("FARE_COLLECTOR_STATIONS", '{"A": 1, "B": 2}')
    monkeypatch.setenv("FARE_COLLECTOR_ROUTES", '[["A", "B"], ["B", "A"]]')

    settings = get_settings()

    assert settings.days == 3
    assert settings.start_date == date(2018, 7, 16)
    assert [(r.origin_id, r.destination_id) for r in build_routes(settings)] == [(1, 2), (2, 1)]


def test_unknown_station_fails_fast() -> None:
    with pytest.raises(ValidationError, match="Unknown station names in routes: Nowhere"):
        Settings(routes=[("Nowhere", "Hamburg Hbf")])


def test_inverted_delay_bounds_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(route_delay_min=300, route_delay_max=60)


@pytest.mark.parametrize("days", [0, -1])
def test_days_must_be_positive(days) -> None:
    with pytest.raises(ValidationError):
        Settings(days=days)
