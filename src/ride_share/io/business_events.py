# ride_share/io/business_events.py

from dataclasses import dataclass
from typing import Literal


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable event name


@dataclass
class RideCreatedBiz(BizEvent):
    ride_id: str
    tier: str
    distance_km: float
    fare_cents: int
    source: Literal["config", "synthetic", "other"] = "other"


@dataclass
class RideAssignedBiz(BizEvent):
    ride_id: str
    driver_id: str
    assigned_count: int


@dataclass
class RideRequestedBiz(BizEvent):
    ride_id: str
    rider_id: str
    fare_cents: int
