"""Application configuration using Pydantic Settings."""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from psc_client.api_service import DEFAULT_ENDPOINT, DEFAULT_SERVICE

DEFAULT_STATIONS: dict[str, int] = {
    "Frankfurt(Main)Hbf": 8000105,
    "Berlin Hbf (tief)": 8098160,
    "Hamburg Hbf": 8098549,
    "Muenchen Hbf": 8000261,
    "Dresden Hbf": 8010085,
    "Erfurt Hbf": 8010101,
}

DEFAULT_ROUTES: list[tuple[str, str]] = [
    ("Frankfurt(Main)Hbf", "Dresden Hbf"),
    ("Berlin Hbf (tief)", "Muenchen Hbf"),
    ("Hamburg Hbf", "Erfurt Hbf"),
]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="FARE_COLLECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Price search endpoint
    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Price search endpoint URL")
    service: str = Field(default=DEFAULT_SERVICE, description="Value of the `service` query parameter")
    lang: str = Field(default="en", description="Value of the `lang` query parameter")
    request_timeout: float = Field(
        default=30.0,
        description="HTTP request timeout (seconds)",
        gt=0,
        le=600,
    )

    # Collection plan
    stations: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_STATIONS),
        description="Station name to station id lookup table",
    )
    routes: list[tuple[str, str]] = Field(
        default_factory=lambda: list(DEFAULT_ROUTES),
        description="(origin, destination) station names to scan",
    )
    start_date: date | None = Field(default=None, description="First travel day, today if unset")
    days: int = Field(default=7, description="Number of day offsets per route", gt=0, le=365)
    departure_hour: int = Field(default=1, description="Search start hour of day", ge=0, le=23)

    # Delays
    route_delay_min: float = Field(
        default=60.0,
        description="Lower bound of the random delay before each route (seconds)",
        ge=0,
    )
    route_delay_max: float = Field(
        default=240.0,
        description="Upper bound of the random delay before each route (seconds)",
        ge=0,
    )
    request_delay: float = Field(
        default=3.0,
        description="Fixed delay before each request (seconds)",
        ge=0,
    )

    # Output
    output_path: Path | None = Field(default=None, description="Append records here instead of stdout")
    abort_on_error: bool = Field(
        default=True,
        description="Abort the whole run on a failed request instead of skipping the day",
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @model_validator(mode="after")
    def _check_plan(self) -> Settings:
        unknown = sorted(
            {name for route in self.routes for name in route if name not in self.stations}
        )
        if unknown:
            raise ValueError(f"Unknown station names in routes: {', '.join(unknown)}")
        if self.route_delay_min > self.route_delay_max:
            raise ValueError("route_delay_min must not exceed route_delay_max")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get application settings (singleton).

    Returns:
        Settings instance
    """
    return Settings()
