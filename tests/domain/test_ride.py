# tests/domain/test_ride.py
import pytest

from ride_share.domain.entities.ride import PremiumRide, Ride, RideTier, StandardRide
from ride_share.policy.pricing import PremiumPricingPolicy, StandardPricingPolicy


@pytest.mark.parametrize("d", [0.0, 1.0, 3.0, 4.5, 12.0, 250.25])
def test_standard_fare_is_distance(d):
    assert StandardRide("R", "a", "b", d).fare() == pytest.approx(d)


@pytest.mark.parametrize("d", [0.0, 1.0, 3.0, 4.5, 12.0, 250.25])
def test_premium_fare_is_double_plus_booking_fee(d):
    assert PremiumRide("R", "a", "b", d).fare() == pytest.approx(2 * d + 5)


def test_named_constructors_tag_the_tier():
    assert StandardRide("R1", "a", "b", 1.0).tier is RideTier.STANDARD
    assert PremiumRide("R2", "a", "b", 1.0).tier is RideTier.PREMIUM
    assert Ride("R3", "a", "b", 1.0).tier is RideTier.STANDARD


def test_fare_follows_distance_changes():
    r = PremiumRide("R101", "Home", "Airport", 12.0)
    assert r.fare() == pytest.approx(29.0)
    r.distance_km = 20.0
    assert r.fare() == pytest.approx(45.0)


def test_changing_tier_switches_policy():
    r = StandardRide("R100", "Station", "Mall", 4.5)
    r.tier = RideTier.PREMIUM
    assert r.fare() == pytest.approx(14.0)


def test_negative_distance_is_accepted_as_is():
    assert StandardRide("R", "a", "b", -2.0).fare() == pytest.approx(-2.0)
    assert PremiumRide("R", "a", "b", -2.0).fare() == pytest.approx(1.0)


def test_fare_uses_supplied_policies():
    policies = {
        RideTier.STANDARD: StandardPricingPolicy(per_km=1.5),
        RideTier.PREMIUM: PremiumPricingPolicy(per_km=3.0, booking_fee=0.0),
    }
    assert StandardRide("R", "a", "b", 2.0).fare(policies) == pytest.approx(3.0)
    assert PremiumRide("R", "a", "b", 2.0).fare(policies) == pytest.approx(6.0)


def test_details_layout():
    r = StandardRide("R100", "Station", "Mall", 4.5)
    assert r.details() == (
        "Ride R100\n"
        "  Pickup: Station\n"
        "  Dropoff: Mall\n"
        "  Distance: 4.5 km\n"
        "  Fare: 4.50\n"
    )


def test_details_keeps_distance_unrounded_and_fare_two_decimals():
    r = PremiumRide("R101", "Home", "Airport", 12.0)
    text = r.details()
    assert "  Distance: 12 km\n" in text
    assert "  Fare: 29.00\n" in text

    r.distance_km = 3.3333
    text = r.details()
    assert "  Distance: 3.3333 km\n" in text
    assert "  Fare: 11.67\n" in text


def test_fields_are_mutable():
    r = StandardRide("R100", "Station", "Mall", 4.5)
    r.ride_id, r.pickup, r.dropoff = "R900", "Port", "Park"
    assert r.details().startswith("Ride R900\n  Pickup: Port\n  Dropoff: Park\n")


def test_distance_is_rendered_without_rounding():
    r = StandardRide("R1", "a", "b", 12.3456789)
    assert "  Distance: 12.3456789 km\n" in r.details()
    r.distance_km = 7
    assert "  Distance: 7 km\n" in r.details()
    r.distance_km = -2.0
    assert "  Distance: -2 km\n" in r.details()
