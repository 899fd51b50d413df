from collections import Counter
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    debug: bool = False


# ------------------ PRICING -----------------------------


class StandardPricingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["standard"] = "standard"
    per_km: float = 1.0


class PremiumPricingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["premium"] = "premium"
    per_km: float = 2.0
    booking_fee: float = 5.0


class PricingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    standard: StandardPricingModel = Field(default_factory=StandardPricingModel)
    premium: PremiumPricingModel = Field(default_factory=PremiumPricingModel)


# ------------------ ENTITIES -----------------------------


class RideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str = Field(min_length=1)
    tier: Literal["standard", "premium"] = "standard"
    pickup: str
    dropoff: str
    distance_km: float

    @field_validator("distance_km")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str = Field(min_length=1)
    name: str
    rating: float = 0.0
    rides: list[str] = Field(default_factory=list)  # ride ids, in assignment order


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str = Field(min_length=1)
    name: str
    requests: list[str] = Field(default_factory=list)  # ride ids, in request order


# ------------------ DEMAND -----------------------------


class DemandModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    count: int = Field(default=0, ge=0)
    seed: int = 123
    premium_share: float = Field(default=0.3, ge=0.0, le=1.0)
    # lognormal distance in km; exp(1.5) ~ 4.5 km median
    mean_log: float = 1.5
    sigma_log: float = Field(default=0.6, gt=0.0)
    places: list[str] = Field(
        default_factory=lambda: ["Station", "Mall", "Home", "Airport", "Office", "Gym"]
    )
    id_prefix: str = "S"

    @field_validator("places")
    @classmethod
    def _enough_places(cls, v: list[str]) -> list[str]:
        if len(set(v)) < 2:
            raise ValueError("places must hold at least two distinct names")
        return v

    def ride_ids(self) -> list[str]:
        return [f"{self.id_prefix}{n:03d}" for n in range(1, self.count + 1)]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    pricing: PricingModel = Field(default_factory=PricingModel)
    rides: list[RideModel] = Field(default_factory=list)
    drivers: list[DriverModel] = Field(default_factory=list)
    riders: list[RiderModel] = Field(default_factory=list)
    demand: DemandModel = Field(default_factory=DemandModel)

    @model_validator(mode="after")
    def _check_references(self):
        ids = [r.id for r in self.rides] + self.demand.ride_ids()
        dupes = sorted(i for i, n in Counter(ids).items() if n > 1)
        if dupes:
            raise ValueError(f"duplicate ride ids: {dupes}")
        known = set(ids)
        for d in self.drivers:
            missing = [i for i in d.rides if i not in known]
            if missing:
                raise ValueError(f"driver {d.id!r} references unknown rides {missing}")
        for r in self.riders:
            missing = [i for i in r.requests if i not in known]
            if missing:
                raise ValueError(f"rider {r.id!r} references unknown rides {missing}")
        return self
