"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from copy import deepcopy
from typing import Any

import pytest

from fare_collector.config import get_settings


def make_leg(
    s: str,
    d: str,
    dep_utc: str,
    arr_utc: str,
    sn: str | None = None,
    dn: str | None = None,
) -> dict[str, Any]:
    """Build a raw leg as returned by the service."""
    return {
        "tid": f"{s}-{d}",
        "lt": "ICE",
        "ltShort": "ICE",
        "s": s,
        "sn": sn or f"Station {s}",
        "d": d,
        "dn": dn or f"Station {d}",
        "tn": "ICE 1601",
        "eg": "",
        "dep": {"d": "16.07.18", "t": "06:00", "m": dep_utc},
        "arr": {"d": "16.07.18", "t": "10:00", "m": arr_utc},
        "pd": "7",
        "pa": "3",
        "rp": False,
        "re": False,
        "sp": False,
    }


BASE_RESPONSE: dict[str, Any] = {
    "dir": "1",
    "angebote": {
        "0_0": {
            "t": "Sparpreis",
            "c": "2",
            "p": "49,90",
            "tt": "",
            "zb": "",
            "arq": "",
            "ff": "",
            "aix": "",
            "sids": ["c1"],
            "pky": "",
            "angnm": "Sparpreis",
            "kotxt": "",
        }
    },
    "verbindungen": {
        "c1": {
            "dir": "1",
            "sid": "c1",
            "dt": "16.07.18",
            "dur": "04:00",
            "nt": "1",
            "NZVerb": False,
            "eg": "",
            "trains": [
                make_leg(
                    "8000105",
                    "8010085",
                    "1531717200000",
                    "1531731600000",
                    sn="Frankfurt(Main)Hbf",
                    dn="Dresden Hbf",
                ),
            ],
        }
    },
    "peTexte": {},
    "sbf": [{"nummer": "8000105", "name": "Frankfurt(Main)Hbf"}],
    "dbf": [{"nummer": "8010085", "name": "Dresden Hbf"}],
    "durs": {},
    "prices": {},
    "sp": False,
    "device": "HANDY",
}


@pytest.fixture
def response_builder() -> Callable[[], dict[str, Any]]:
    """Return a factory that produces independent copies of the sample response."""

    def _builder() -> dict[str, Any]:
        return deepcopy(BASE_RESPONSE)

    return _builder


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def leg_builder() -> Callable[..., dict[str, Any]]:
    """Return the raw leg factory."""
    return make_leg
