# ride_share/app/controllers/demand.py
import numpy as np

from ride_share.config.models import DemandModel
from ride_share.domain.entities.ride import Ride, RideTier


class DemandSampler:
    """Draws synthetic rides: tier, route between two named places, lognormal distance."""

    def __init__(self, cfg: DemandModel, rng: np.random.Generator):
        self.cfg = cfg
        self.rng = rng

    def sample_ride(self, ride_id: str) -> Ride:
        premium = self.rng.random() < self.cfg.premium_share
        pickup, dropoff = self.rng.choice(sorted(set(self.cfg.places)), size=2, replace=False)
        distance_km = round(float(self.rng.lognormal(self.cfg.mean_log, self.cfg.sigma_log)), 1)
        return Ride(
            ride_id=ride_id,
            pickup=str(pickup),
            dropoff=str(dropoff),
            distance_km=distance_km,
            tier=RideTier.PREMIUM if premium else RideTier.STANDARD,
        )

    def sample(self) -> list[Ride]:
        return [self.sample_ride(rid) for rid in self.cfg.ride_ids()]
