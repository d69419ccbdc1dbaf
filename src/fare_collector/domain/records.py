"""Flat observation records produced from price search responses."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class FlatRecord(BaseModel):
    """One observed fare for one itinerary of one offer."""

    model_config = ConfigDict(frozen=True)

    origin_id: int
    destination_id: int
    departure: int = Field(description="Departure epoch seconds (UTC)")
    arrival: int = Field(description="Arrival epoch seconds (UTC)")
    collected_at: int = Field(description="Collection epoch seconds")
    price: Decimal
    origin_code: str
    destination_code: str
    origin_name: str
    destination_name: str
    transfers: int = Field(ge=0)
    price_parsed: bool = Field(default=True, exclude=True)

    def as_row(self) -> list[str]:
        """Return fields in output column order."""
        return [
            str(self.origin_id),
            str(self.destination_id),
            str(self.departure),
            str(self.arrival),
            str(self.collected_at),
            f"{self.price:.2f}",
            self.origin_code,
            self.destination_code,
            self.origin_name,
            self.destination_name,
            str(self.transfers),
        ]
