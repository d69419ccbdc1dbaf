"""Conversion utilities for flattening price search responses into records."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from psc_client.models import FareResponse, Itinerary, Leg, Offer

from ..exceptions import EmptyItinerary, FlattenError, MalformedLeg, MissingItinerary
from ..records import FlatRecord

logger = logging.getLogger(__name__)

PRICE_SENTINEL = Decimal("0.00")


@dataclass(slots=True)
class ConnectionFlattener:
    """Turn (offer, itinerary) pairs into flat records."""

    clock: Callable[[], float] = field(default=time.time)

    def flatten_response(
        self,
        response: FareResponse,
        origin_id: int,
        destination_id: int,
    ) -> list[FlatRecord]:
        """
        Flatten every (offer, referenced itinerary) pair of a response.

        Pairs that cannot be flattened are logged and skipped.
        """
        records: list[FlatRecord] = []
        for offer_id, offer in response.offers.items():
            for sid in offer.sids:
                try:
                    itinerary = self.resolve(response, sid)
                    records.append(self.flatten(offer, itinerary, origin_id, destination_id))
                except FlattenError as e:
                    logger.warning(
                        "offer %s skipped for itinerary %r: %s",
                        offer_id,
                        sid,
                        e,
                        extra={"offer_id": offer_id, "sid": sid, "error": str(e)},
                    )
        return records

    @staticmethod
    def resolve(response: FareResponse, sid: str) -> Itinerary:
        try:
            return response.connections[sid]
        except KeyError:
            raise MissingItinerary(sid) from None

    def flatten(
        self,
        offer: Offer,
        itinerary: Itinerary,
        origin_id: int,
        destination_id: int,
    ) -> FlatRecord:
        first, last = select_endpoints(itinerary.trains, sid=itinerary.sid)
        price = parse_price(offer.p)
        return FlatRecord(
            origin_id=origin_id,
            destination_id=destination_id,
            departure=epoch_seconds(first.dep.utc),
            arrival=epoch_seconds(last.arr.utc),
            collected_at=int(self.clock()),
            price=price if price is not None else PRICE_SENTINEL,
            origin_code=first.s,
            destination_code=last.d,
            origin_name=first.sn,
            destination_name=last.dn,
            transfers=len(itinerary.trains) - 1,
            price_parsed=price is not None,
        )


def select_endpoints(legs: Sequence[Leg], sid: str = "") -> tuple[Leg, Leg]:
    """
    Pick the earliest departing and the latest arriving leg.

    UTC timestamps are fixed-width strings, so string order is time order.

    Raises:
        EmptyItinerary: If there are no legs
    """
    if not legs:
        raise EmptyItinerary(sid)
    first = last = legs[0]
    for leg in legs[1:]:
        if leg.dep.utc < first.dep.utc:
            first = leg
        if leg.arr.utc > last.arr.utc:
            last = leg
    return first, last


def epoch_seconds(utc_millis: str) -> int:
    """Convert an epoch-milliseconds string to epoch seconds, truncating."""
    try:
        millis = int(utc_millis)
    except ValueError:
        raise MalformedLeg(f"Invalid UTC timestamp {utc_millis!r}") from None
    seconds = abs(millis) // 1000
    return seconds if millis >= 0 else -seconds


def parse_price(text: str) -> Decimal | None:
    """Parse a comma-decimal price, None if it is not a finite number."""
    try:
        price = Decimal(text.strip().replace(",", "."))
    except InvalidOperation:
        logger.warning("unparsable price %r", text, extra={"price": text})
        return None
    if not price.is_finite():
        logger.warning("unparsable price %r", text, extra={"price": text})
        return None
    return price
