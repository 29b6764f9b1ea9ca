# domain/entities/ride.py
import itertools
import logging
import math
import threading
from dataclasses import dataclass, field
from typing import ClassVar

from ride_share.errors import InvalidRideError
from ride_share.policy.pricing import (
    BaseFarePolicy,
    FarePolicy,
    PremiumFarePolicy,
    StandardFarePolicy,
)

log = logging.getLogger(__name__)

# process-wide, starts at 1, never reset
_ride_ids = itertools.count(1)
_ride_ids_lock = threading.Lock()


def next_ride_id() -> int:
    with _ride_ids_lock:
        return next(_ride_ids)


@dataclass(frozen=True, eq=False)
class Ride:
    """
    A trip between two named places. Immutable once built; the fare is
    recomputed from the variant's FarePolicy on every call.
    Subclasses only choose the policy, so anything that renders or sums
    rides works for every variant.
    """

    kind: ClassVar[str] = "base"
    _policy: ClassVar[FarePolicy] = BaseFarePolicy()

    pickup: str
    dropoff: str
    distance_mi: float
    id: int = field(init=False, default_factory=next_ride_id)

    def __post_init__(self):
        if not math.isfinite(self.distance_mi) or self.distance_mi < 0:
            raise InvalidRideError(f"distance_mi must be finite and >= 0, got {self.distance_mi!r}")
        log.debug("ride created", extra={"extra": {"ride_id": self.id, "kind": self.kind}})

    @property
    def pricing(self) -> FarePolicy:
        return self._policy

    def fare(self) -> float:
        return self.pricing.fare(self.distance_mi)

    def describe(self) -> str:
        return (
            f"{self.pricing.prefix}Ride #{self.id}"
            f" | From: {self.pickup} -> To: {self.dropoff}"
            f" | Distance: {self.distance_mi:.2f} miles"
            f" | Fare: ${self.fare():.2f}"
        )


@dataclass(frozen=True, eq=False)
class StandardRide(Ride):
    kind: ClassVar[str] = "standard"
    _policy: ClassVar[FarePolicy] = StandardFarePolicy()


@dataclass(frozen=True, eq=False)
class PremiumRide(Ride):
    kind: ClassVar[str] = "premium"

    luxury_multiplier: float = 2.0

    def __post_init__(self):
        if not math.isfinite(self.luxury_multiplier) or self.luxury_multiplier < 0:
            raise InvalidRideError(
                f"luxury_multiplier must be finite and >= 0, got {self.luxury_multiplier!r}"
            )
        super().__post_init__()

    @property
    def pricing(self) -> FarePolicy:
        return PremiumFarePolicy(luxury_multiplier=self.luxury_multiplier)
