# ride_share/domain/state.py
import itertools
from dataclasses import dataclass, field

import numpy as np

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider
from ride_share.io.business_events import (
    AssignmentsClearedBiz,
    RideAssignedBiz,
    RideCreatedBiz,
    RideRequestedBiz,
)
from ride_share.io.recorder import Recorder


@dataclass
class FareSummary:
    count: int
    total: float
    mean: float
    min: float
    max: float


@dataclass
class Fleet:
    """
    Registry for one run: every created ride (by id, in creation order) plus
    the drivers and riders that reference them. Rides are shared, never copied.
    """

    run_id: str = "local"
    recorder: Recorder | None = None
    rides_by_id: dict[int, Ride] = field(default_factory=dict)
    drivers: dict[int, Driver] = field(default_factory=dict)
    riders: dict[int, Rider] = field(default_factory=dict)
    _seq: itertools.count = field(default_factory=lambda: itertools.count(1), repr=False)

    def _biz(self, cls, **data) -> None:
        if self.recorder:
            self.recorder.emit(cls(run_id=self.run_id, seq=next(self._seq), **data))

    # ------------- registration -------------------

    def add_ride(self, ride: Ride) -> Ride:
        if ride.id in self.rides_by_id:
            raise ValueError(f"ride {ride.id} already registered")
        self.rides_by_id[ride.id] = ride
        self._biz(
            RideCreatedBiz,
            name="RideCreated",
            ride_id=ride.id,
            kind=ride.kind,
            distance_mi=ride.distance_mi,
            fare=ride.fare(),
        )
        return ride

    def add_driver(self, d: Driver) -> Driver:
        if d.id in self.drivers:
            raise ValueError(f"driver {d.id} already registered")
        self.drivers[d.id] = d
        return d

    def add_rider(self, r: Rider) -> Rider:
        if r.id in self.riders:
            raise ValueError(f"rider {r.id} already registered")
        self.riders[r.id] = r
        return r

    def ride(self, ride_id: int) -> Ride:
        return self.rides_by_id[ride_id]

    @property
    def rides(self) -> list[Ride]:
        return list(self.rides_by_id.values())

    # ------------- bookkeeping -------------------

    def assign(self, driver_id: int, ride_id: int) -> None:
        d, ride = self.drivers[driver_id], self.rides_by_id[ride_id]
        d.add_ride(ride)
        self._biz(RideAssignedBiz, name="RideAssigned", ride_id=ride.id, driver_id=d.id)

    def request(self, rider_id: int, ride_id: int) -> None:
        r, ride = self.riders[rider_id], self.rides_by_id[ride_id]
        r.request_ride(ride)
        self._biz(RideRequestedBiz, name="RideRequested", ride_id=ride.id, rider_id=r.id)

    def clear_assignments(self, driver_id: int) -> int:
        d = self.drivers[driver_id]
        n = d.assigned_count
        d.clear_assigned_rides()
        self._biz(AssignmentsClearedBiz, name="AssignmentsCleared", driver_id=d.id, cleared=n)
        return n

    # ------------- aggregates -------------------

    def total_revenue(self) -> float:
        return sum(r.fare() for r in self.rides_by_id.values())

    def fare_summary(self) -> FareSummary:
        fares = np.fromiter((r.fare() for r in self.rides_by_id.values()), dtype=float)
        if fares.size == 0:
            return FareSummary(count=0, total=0.0, mean=0.0, min=0.0, max=0.0)
        return FareSummary(
            count=int(fares.size),
            total=float(fares.sum()),
            mean=float(fares.mean()),
            min=float(fares.min()),
            max=float(fares.max()),
        )
