# domain/entities/driver.py
from dataclasses import dataclass, field

from ride_share.domain.entities.ride import Ride, format_plain


@dataclass
class Driver:
    driver_id: str
    name: str
    rating: float = 0.0
    _assigned: list[Ride] = field(default_factory=list, init=False, repr=False)

    def add_ride(self, ride: Ride) -> None:
        self._assigned.append(ride)

    def assigned_rides(self) -> list[Ride]:
        # copy-out; the ride objects themselves stay shared
        return list(self._assigned)

    @property
    def ride_count(self) -> int:
        return len(self._assigned)

    def info(self) -> str:
        return (
            f"Driver ID: {self.driver_id}\n"
            f"Name: {self.name}\n"
            f"Rating: {format_plain(self.rating)}\n"
            f"Assigned rides: {self.ride_count}\n"
        )
