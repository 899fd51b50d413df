# ride_share/app/controllers/trips.py
from ride_share.app.hooks import LifecycleHooks, NoopHooks
from ride_share.domain.entities.ride import Ride
from ride_share.domain.state import WorldState


class TripHandler:
    """Attaches rides to drivers (assignments) and riders (requests) by id."""

    def __init__(self, world: WorldState, hooks: LifecycleHooks | None = None):
        self.world = world
        self.hooks = hooks or NoopHooks()

    def assign(self, driver_id: str, ride_id: str) -> Ride:
        # look up both before touching either
        d = self.world.driver(driver_id)
        ride = self.world.ride(ride_id)
        d.add_ride(ride)
        self.hooks.ride_assigned(d, ride)
        return ride

    def request(self, rider_id: str, ride_id: str) -> Ride:
        r = self.world.rider(rider_id)
        ride = self.world.ride(ride_id)
        r.request_ride(ride)
        self.hooks.ride_requested(r, ride)
        return ride
