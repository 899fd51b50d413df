# app/hooks.py
from typing import Protocol

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider


class LifecycleHooks(Protocol):
    def build_start(self, *, scenario: str): ...
    def build_end(self, *, rides: int, drivers: int, riders: int): ...
    def ride_created(self, ride: Ride, *, source: str): ...
    def ride_assigned(self, driver: Driver, ride: Ride): ...
    def ride_requested(self, rider: Rider, ride: Ride): ...


class NoopHooks:
    def build_start(self, **_):
        pass

    def build_end(self, **_):
        pass

    def ride_created(self, *_, **__):
        pass

    def ride_assigned(self, *_, **__):
        pass

    def ride_requested(self, *_, **__):
        pass
