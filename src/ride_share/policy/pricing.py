# ride_share/policy/pricing.py
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class FarePolicy(Protocol):
    """
    Maps a trip distance (miles) to a fare (dollars).
    `prefix` is prepended to the ride's one-line description.
    Additive fees are applied before the minimum fare.
    """

    prefix: str

    def fare(self, distance_mi: float) -> float: ...


@dataclass(frozen=True)
class BaseFarePolicy:
    per_mile: float = 1.0
    minimum: float = 2.0
    prefix: str = ""

    def fare(self, distance_mi: float) -> float:
        return max(self.minimum, self.per_mile * distance_mi)


@dataclass(frozen=True)
class StandardFarePolicy:
    per_mile: float = 1.5
    booking_fee: float = 1.0
    minimum: float = 3.0
    prefix: str = "[Standard] "

    def fare(self, distance_mi: float) -> float:
        return max(self.minimum, self.per_mile * distance_mi + self.booking_fee)


@dataclass(frozen=True)
class PremiumFarePolicy:
    luxury_multiplier: float = 2.0
    per_mile: float = 2.5
    surge: float = 2.0
    minimum: float = 10.0
    prefix: str = "[Premium]  "

    def fare(self, distance_mi: float) -> float:
        # multiplier scales the distance term only
        return max(self.minimum, self.per_mile * distance_mi * self.luxury_multiplier + self.surge)
