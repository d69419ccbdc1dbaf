"""Domain exceptions."""

from __future__ import annotations


class FareCollectorError(Exception):
    """Base exception for the fare collector."""


class FlattenError(FareCollectorError):
    """Raised when an (offer, itinerary) pair cannot be turned into a record."""


class MissingItinerary(FlattenError):
    """Raised when an offer references an itinerary id absent from the response."""

    def __init__(self, sid: str) -> None:
        self.sid = sid
        super().__init__(f"Itinerary {sid!r} not found in response")


class EmptyItinerary(FlattenError):
    """Raised when an itinerary has no legs."""

    def __init__(self, sid: str = "") -> None:
        self.sid = sid
        super().__init__(f"Itinerary {sid!r} has no legs")


class MalformedLeg(FlattenError):
    """Raised when a leg timestamp is not an epoch-milliseconds integer."""


class PriceSearchError(FareCollectorError):
    """Raised when the price search request fails or returns an unusable body."""


class CollectionAborted(FareCollectorError):
    """Raised when a fatal error stops the collection run."""
