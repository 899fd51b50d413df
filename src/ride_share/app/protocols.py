from typing import Protocol, runtime_checkable


# --------------- Policies -------------------------


@runtime_checkable
class PricingPolicy(Protocol):
    """
    Fare for a ride of the given length.
    Pure: same distance, same fare. No validation of the input.
    Units: kilometers in, currency units out.
    """

    def fare(self, distance_km: float) -> float: ...


# --------------- Telemetry -------------------------


@runtime_checkable
class Sink(Protocol):
    def write(self, ev) -> None: ...
