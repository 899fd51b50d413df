# tests/policy/test_pricing.py
import pytest

from ride_share.app.protocols import PricingPolicy
from ride_share.config.models import PremiumPricingModel, PricingModel, StandardPricingModel
from ride_share.domain.entities.ride import RideTier
from ride_share.policy.pricing import (
    DEFAULT_POLICIES,
    PremiumPricingPolicy,
    StandardPricingPolicy,
    fare_for,
    make_pricing_policies,
    make_pricing_policy,
)


def test_default_rates():
    assert fare_for(RideTier.STANDARD, 4.5) == pytest.approx(4.5)
    assert fare_for(RideTier.PREMIUM, 12.0) == pytest.approx(29.0)
    assert fare_for(RideTier.STANDARD, 3.0) == pytest.approx(3.0)


def test_policies_satisfy_protocol():
    for p in DEFAULT_POLICIES.values():
        assert isinstance(p, PricingPolicy)


def test_fare_is_pure():
    p = PremiumPricingPolicy()
    assert p.fare(7.0) == p.fare(7.0) == pytest.approx(19.0)


def test_missing_tier_raises_key_error():
    with pytest.raises(KeyError):
        fare_for(RideTier.PREMIUM, 1.0, {RideTier.STANDARD: StandardPricingPolicy()})


def test_factory_from_config():
    policies = make_pricing_policies(
        PricingModel(
            standard=StandardPricingModel(per_km=1.25),
            premium=PremiumPricingModel(per_km=2.5, booking_fee=3.0),
        )
    )
    assert policies[RideTier.STANDARD] == StandardPricingPolicy(per_km=1.25)
    assert fare_for(RideTier.PREMIUM, 2.0, policies) == pytest.approx(8.0)


def test_factory_defaults_match_default_policies():
    assert make_pricing_policies(PricingModel()) == dict(DEFAULT_POLICIES)


def test_factory_rejects_unknown_config():
    with pytest.raises(TypeError):
        make_pricing_policy(object())
