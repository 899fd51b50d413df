# io/event_logging.py
import json
import logging
import sys
from collections.abc import Mapping

from ride_share.app.hooks import NoopHooks
from ride_share.app.protocols import PricingPolicy
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride, RideTier
from ride_share.domain.entities.rider import Rider
from ride_share.io.business_events import RideAssignedBiz, RideCreatedBiz, RideRequestedBiz
from ride_share.io.recorder import Recorder


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def default_json_logger(name="ride_share", level="WARNING", stream=None):
    # stderr by default: stdout carries the transcript
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def _cents(amount: float) -> int:
    return int(round(amount * 100))


class EventLogging(NoopHooks):
    """
    Shapes and emits structured logs for build and ride lifecycle events,
    and forwards business events to the recorder when one is attached.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "WARNING",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
        policies: Mapping[RideTier, PricingPolicy] | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.policies = policies
        self.log = logger or default_json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def _biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # --------------------------------------------------------

    def build_start(self, *, scenario: str):
        self._emit("INFO", "build_start", scenario=scenario)

    def build_end(self, *, rides: int, drivers: int, riders: int):
        self._emit("INFO", "build_end", rides=rides, drivers=drivers, riders=riders)

    def ride_created(self, ride: Ride, *, source: str):
        fare = ride.fare(self.policies)
        if self.debug:
            self._emit(
                "DEBUG",
                "ride_created",
                ride_id=ride.ride_id,
                tier=ride.tier.value,
                distance_km=ride.distance_km,
                fare=fare,
                source=source,
            )
        self._biz(
            RideCreatedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideCreated",
                ride_id=ride.ride_id,
                tier=ride.tier.value,
                distance_km=ride.distance_km,
                fare_cents=_cents(fare),
                source=source,
            )
        )

    def ride_assigned(self, driver: Driver, ride: Ride):
        self._emit(
            "INFO",
            "ride_assigned",
            ride_id=ride.ride_id,
            driver_id=driver.driver_id,
            assigned=driver.ride_count,
        )
        self._biz(
            RideAssignedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideAssigned",
                ride_id=ride.ride_id,
                driver_id=driver.driver_id,
                assigned_count=driver.ride_count,
            )
        )

    def ride_requested(self, rider: Rider, ride: Ride):
        self._emit("INFO", "ride_requested", ride_id=ride.ride_id, rider_id=rider.rider_id)
        self._biz(
            RideRequestedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideRequested",
                ride_id=ride.ride_id,
                rider_id=rider.rider_id,
                fare_cents=_cents(ride.fare(self.policies)),
            )
        )
