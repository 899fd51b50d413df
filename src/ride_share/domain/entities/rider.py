# domain/entities/rider.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ride_share.domain.entities.ride import Ride, RideTier

if TYPE_CHECKING:
    from ride_share.app.protocols import PricingPolicy

SEPARATOR = "-----------------"


@dataclass
class Rider:
    rider_id: str
    name: str
    _requested: list[Ride] = field(default_factory=list, init=False, repr=False)

    def request_ride(self, ride: Ride) -> None:
        self._requested.append(ride)

    def requested_rides(self) -> list[Ride]:
        return list(self._requested)

    def view_rides(self, policies: Mapping[RideTier, PricingPolicy] | None = None) -> str:
        lines = [f"Rider: {self.name} - Ride history:\n"]
        for ride in self._requested:
            lines.append(ride.details(policies))
            lines.append(SEPARATOR + "\n")
        return "".join(lines)
