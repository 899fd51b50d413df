# ride_share/policy/pricing.py
from collections.abc import Mapping
from dataclasses import dataclass

from ride_share.app.protocols import PricingPolicy
from ride_share.config.models import PricingModel, PremiumPricingModel, StandardPricingModel
from ride_share.domain.entities.ride import RideTier


@dataclass(frozen=True)
class StandardPricingPolicy(PricingPolicy):
    per_km: float = 1.0

    def fare(self, distance_km: float) -> float:
        return distance_km * self.per_km


@dataclass(frozen=True)
class PremiumPricingPolicy(PricingPolicy):
    per_km: float = 2.0
    booking_fee: float = 5.0  # flat, per ride

    def fare(self, distance_km: float) -> float:
        return distance_km * self.per_km + self.booking_fee


DEFAULT_POLICIES: Mapping[RideTier, PricingPolicy] = {
    RideTier.STANDARD: StandardPricingPolicy(),
    RideTier.PREMIUM: PremiumPricingPolicy(),
}


def fare_for(
    tier: RideTier,
    distance_km: float,
    policies: Mapping[RideTier, PricingPolicy] | None = None,
) -> float:
    table = DEFAULT_POLICIES if policies is None else policies
    try:
        policy = table[tier]
    except KeyError:
        raise KeyError(f"no pricing policy for tier {tier!r}") from None
    return policy.fare(distance_km)


def make_pricing_policy(cfg: StandardPricingModel | PremiumPricingModel) -> PricingPolicy:
    if isinstance(cfg, StandardPricingModel):
        return StandardPricingPolicy(per_km=cfg.per_km)
    elif isinstance(cfg, PremiumPricingModel):
        return PremiumPricingPolicy(per_km=cfg.per_km, booking_fee=cfg.booking_fee)
    else:
        raise TypeError(cfg)


def make_pricing_policies(cfg: PricingModel) -> dict[RideTier, PricingPolicy]:
    return {
        RideTier.STANDARD: make_pricing_policy(cfg.standard),
        RideTier.PREMIUM: make_pricing_policy(cfg.premium),
    }
