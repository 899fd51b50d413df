# domain/entities/ride.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ride_share.app.protocols import PricingPolicy


class RideTier(Enum):
    STANDARD = "standard"
    PREMIUM = "premium"


@dataclass
class Ride:
    """
    A single trip record. The tier tag selects the fare policy; everything
    else is shared between the variants.
    Units: kilometers for distance.
    """

    ride_id: str
    pickup: str
    dropoff: str
    distance_km: float
    tier: RideTier = RideTier.STANDARD

    @classmethod
    def standard(cls, ride_id: str, pickup: str, dropoff: str, distance_km: float) -> Ride:
        return cls(ride_id, pickup, dropoff, distance_km, RideTier.STANDARD)

    @classmethod
    def premium(cls, ride_id: str, pickup: str, dropoff: str, distance_km: float) -> Ride:
        return cls(ride_id, pickup, dropoff, distance_km, RideTier.PREMIUM)

    def fare(self, policies: Mapping[RideTier, PricingPolicy] | None = None) -> float:
        # always from the current distance; nothing is cached
        from ride_share.policy.pricing import fare_for

        return fare_for(self.tier, self.distance_km, policies)

    def details(self, policies: Mapping[RideTier, PricingPolicy] | None = None) -> str:
        return (
            f"Ride {self.ride_id}\n"
            f"  Pickup: {self.pickup}\n"
            f"  Dropoff: {self.dropoff}\n"
            f"  Distance: {format_plain(self.distance_km)} km\n"
            f"  Fare: {self.fare(policies):.2f}\n"
        )


def format_plain(x: float) -> str:
    """Shortest text that reads back as the same float; drops a trailing ".0"."""
    s = repr(float(x))
    return s[:-2] if s.endswith(".0") else s


StandardRide = Ride.standard
PremiumRide = Ride.premium
