# tests/app/test_trips.py
import pytest

from ride_share.app.controllers.trips import TripHandler
from ride_share.app.hooks import NoopHooks
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import PremiumRide, StandardRide
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import WorldState


# --- test hook that records lifecycle calls ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []

    def ride_assigned(self, driver, ride):
        self.trace.append(("assigned", driver.driver_id, ride.ride_id))

    def ride_requested(self, rider, ride):
        self.trace.append(("requested", rider.rider_id, ride.ride_id))


@pytest.fixture
def world():
    w = WorldState()
    w.add_ride(StandardRide("R100", "Station", "Mall", 4.5))
    w.add_ride(PremiumRide("R101", "Home", "Airport", 12.0))
    w.add_driver(Driver("D01", "Asha", 4.8))
    w.add_rider(Rider("U01", "Rahul"))
    return w


def test_assign_and_request_report_to_hooks(world):
    hooks = TraceHooks()
    h = TripHandler(world, hooks=hooks)
    assert h.assign("D01", "R101") is world.ride("R101")
    h.request("U01", "R101")
    h.request("U01", "R100")
    assert hooks.trace == [
        ("assigned", "D01", "R101"),
        ("requested", "U01", "R101"),
        ("requested", "U01", "R100"),
    ]
    assert [r.ride_id for r in world.rider("U01").requested_rides()] == ["R101", "R100"]


def test_unknown_ride_leaves_driver_untouched(world):
    hooks = TraceHooks()
    h = TripHandler(world, hooks=hooks)
    with pytest.raises(KeyError, match="R999"):
        h.assign("D01", "R999")
    assert world.driver("D01").assigned_rides() == []
    assert hooks.trace == []


def test_unknown_driver_and_rider(world):
    h = TripHandler(world)
    with pytest.raises(KeyError, match="D99"):
        h.assign("D99", "R100")
    with pytest.raises(KeyError, match="U99"):
        h.request("U99", "R100")
