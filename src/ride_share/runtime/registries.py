# runtime/registries.py
from collections.abc import Callable

from ride_share.config.models import (
    BaseRideModel,
    PremiumRideModel,
    RideUnion,
    StandardRideModel,
)
from ride_share.domain.entities.ride import PremiumRide, Ride, StandardRide

RideFactory = Callable[[RideUnion], Ride]

_ride_registry: dict[str, RideFactory] = {}


def register_ride(kind: str):
    def deco(fn: RideFactory):
        _ride_registry[kind] = fn
        return fn

    return deco


def registered_kinds() -> list[str]:
    return sorted(_ride_registry)


def make_ride(cfg: RideUnion) -> Ride:
    try:
        factory = _ride_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown ride kind {cfg.kind!r}")
    return factory(cfg)


@register_ride("base")
def _make_base(cfg: BaseRideModel):
    return Ride(cfg.pickup, cfg.dropoff, cfg.distance_mi)


@register_ride("standard")
def _make_standard(cfg: StandardRideModel):
    return StandardRide(cfg.pickup, cfg.dropoff, cfg.distance_mi)


@register_ride("premium")
def _make_premium(cfg: PremiumRideModel):
    return PremiumRide(cfg.pickup, cfg.dropoff, cfg.distance_mi, cfg.luxury_multiplier)
