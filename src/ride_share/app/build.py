# ride_share/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from ride_share.app.controllers.demand import DemandSampler
from ride_share.app.controllers.trips import TripHandler
from ride_share.app.hooks import LifecycleHooks, NoopHooks
from ride_share.app.protocols import PricingPolicy
from ride_share.config.models import ScenarioModel
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride, RideTier
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import WorldState
from ride_share.io.event_logging import EventLogging
from ride_share.io.recorder import Recorder
from ride_share.policy.pricing import make_pricing_policies
from ride_share.sim.rng import RNGRegistry


@dataclass
class App:
    model: ScenarioModel
    world: WorldState
    trips: TripHandler
    pricing: dict[RideTier, PricingPolicy]
    hooks: LifecycleHooks


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Policies & hooks
    pricing = make_pricing_policies(model.pricing)
    hooks = (
        EventLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            recorder=recorder,
            policies=pricing,
        )
        if use_logging
        else NoopHooks()
    )
    hooks.build_start(scenario=model.name)

    # 2) World: configured rides first, then synthetic ones
    world = WorldState()
    for rm in model.rides:
        ride = Ride(rm.id, rm.pickup, rm.dropoff, rm.distance_km, RideTier(rm.tier))
        world.add_ride(ride)
        hooks.ride_created(ride, source="config")

    if model.demand.count:
        rng = RNGRegistry(model.demand.seed, scenario=model.name)
        demand = DemandSampler(model.demand, rng.stream("demand"))
        for ride in demand.sample():
            world.add_ride(ride)
            hooks.ride_created(ride, source="synthetic")

    for dm in model.drivers:
        world.add_driver(Driver(dm.id, dm.name, dm.rating))
    for rm in model.riders:
        world.add_rider(Rider(rm.id, rm.name))

    # 3) Replay assignments and requests in listed order
    trips = TripHandler(world, hooks=hooks)
    for dm in model.drivers:
        for ride_id in dm.rides:
            trips.assign(dm.id, ride_id)
    for rm in model.riders:
        for ride_id in rm.requests:
            trips.request(rm.id, ride_id)

    hooks.build_end(rides=len(world.rides), drivers=len(world.drivers), riders=len(world.riders))
    return App(model, world, trips, pricing, hooks)
