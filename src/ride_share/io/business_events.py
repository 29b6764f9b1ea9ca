# ride_share/io/business_events.py

from dataclasses import dataclass


# Base type for bookkeeping events emitted by the Fleet
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable event name


@dataclass
class RideCreatedBiz(BizEvent):
    ride_id: int
    kind: str
    distance_mi: float
    fare: float


@dataclass
class RideAssignedBiz(BizEvent):
    ride_id: int
    driver_id: int


@dataclass
class RideRequestedBiz(BizEvent):
    ride_id: int
    rider_id: int


@dataclass
class AssignmentsClearedBiz(BizEvent):
    driver_id: int
    cleared: int
