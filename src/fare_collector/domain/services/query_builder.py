"""Construction of price search queries."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from psc_client.models import SearchRequest, Traveller

_EPOCH = datetime(1970, 1, 1)
_DAY = timedelta(days=1)
_HALF_DAY = timedelta(hours=12)


def search_day(instant: datetime) -> date:
    """
    Snap an instant onto the search day used by the service.

    The local wall clock is moved back 12 hours and rounded half up
    to the nearest 24-hour boundary.
    """
    wall_clock = instant.replace(tzinfo=None) - _HALF_DAY
    days, remainder = divmod(wall_clock - _EPOCH, _DAY)
    if remainder >= _HALF_DAY:
        days += 1
    return (_EPOCH + days * _DAY).date()


def build_query(origin_id: int, destination_id: int, instant: datetime) -> SearchRequest:
    """Build the search request for one station pair starting at `instant`."""
    return SearchRequest(
        s=origin_id,
        d=destination_id,
        dt=search_day(instant).strftime("%d.%m.%y"),
        t=instant.strftime("%H:%M"),
        c=2,
        without_ice=False,
        tct=5,
        dur=1440,
        travellers=[Traveller(bc=0, typ="E", alter=25)],
        sv=True,
    )
