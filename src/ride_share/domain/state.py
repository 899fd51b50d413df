# ride_share/domain/state.py
from dataclasses import dataclass, field

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider


@dataclass
class WorldState:
    # id -> entity, insertion ordered; drivers and riders hold references into `rides`
    rides: dict[str, Ride] = field(default_factory=dict)
    drivers: dict[str, Driver] = field(default_factory=dict)
    riders: dict[str, Rider] = field(default_factory=dict)

    def add_ride(self, r: Ride) -> None:
        self.rides[r.ride_id] = r

    def add_driver(self, d: Driver) -> None:
        self.drivers[d.driver_id] = d

    def add_rider(self, r: Rider) -> None:
        self.riders[r.rider_id] = r

    def ride(self, ride_id: str) -> Ride:
        try:
            return self.rides[ride_id]
        except KeyError:
            raise KeyError(f"unknown ride {ride_id!r}") from None

    def driver(self, driver_id: str) -> Driver:
        try:
            return self.drivers[driver_id]
        except KeyError:
            raise KeyError(f"unknown driver {driver_id!r}") from None

    def rider(self, rider_id: str) -> Rider:
        try:
            return self.riders[rider_id]
        except KeyError:
            raise KeyError(f"unknown rider {rider_id!r}") from None
