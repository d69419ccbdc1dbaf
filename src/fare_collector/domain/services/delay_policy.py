"""Delays between price search requests."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass(slots=True)
class DelayPolicy:
    """Random wait before each route, fixed wait before each request."""

    route_delay_min: float = 60.0
    route_delay_max: float = 240.0
    request_delay: float = 3.0
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        if self.route_delay_min > self.route_delay_max:
            raise ValueError("route_delay_min must not exceed route_delay_max")

    def route_delay(self) -> float:
        return self.rng.uniform(self.route_delay_min, self.route_delay_max)
