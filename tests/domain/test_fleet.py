# tests/domain/test_fleet.py
import pytest

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import PremiumRide, Ride, StandardRide
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import Fleet
from ride_share.io.business_events import (
    AssignmentsClearedBiz,
    RideAssignedBiz,
    RideCreatedBiz,
    RideRequestedBiz,
)
from ride_share.io.recorder import MemorySink, Recorder


def _fleet():
    sink = MemorySink()
    fleet = Fleet(run_id="t-1", recorder=Recorder(sink))
    r1 = fleet.add_ride(StandardRide("Downtown", "Airport", 18.4))
    r2 = fleet.add_ride(PremiumRide("Hotel", "Convention Center", 12.0))
    fleet.add_driver(Driver(101, "Aisha Khan", 4.92))
    fleet.add_rider(Rider(201, "Nabiha S."))
    return fleet, sink, r1, r2


def test_rides_kept_in_creation_order_and_shared():
    fleet, _, r1, r2 = _fleet()
    assert fleet.rides == [r1, r2]
    assert fleet.ride(r1.id) is r1
    fleet.assign(101, r1.id)
    fleet.request(201, r1.id)
    assert fleet.drivers[101].rides[0] is fleet.riders[201].rides[0] is r1


def test_total_revenue_sums_all_rides():
    fleet, *_ = _fleet()
    assert fleet.total_revenue() == pytest.approx(90.6)


def test_fare_summary():
    fleet, *_ = _fleet()
    s = fleet.fare_summary()
    assert s.count == 2
    assert s.total == pytest.approx(90.6)
    assert s.mean == pytest.approx(45.3)
    assert s.min == pytest.approx(28.6)
    assert s.max == pytest.approx(62.0)


def test_fare_summary_empty():
    s = Fleet().fare_summary()
    assert (s.count, s.total, s.mean, s.min, s.max) == (0, 0.0, 0.0, 0.0, 0.0)


def test_unknown_ids_raise_keyerror():
    fleet, _, r1, _ = _fleet()
    with pytest.raises(KeyError):
        fleet.assign(999, r1.id)
    with pytest.raises(KeyError):
        fleet.request(201, -1)
    with pytest.raises(KeyError):
        fleet.ride(-1)


def test_bookkeeping_emits_business_events():
    fleet, sink, r1, r2 = _fleet()
    fleet.assign(101, r1.id)
    fleet.assign(101, r2.id)
    fleet.request(201, r2.id)
    assert fleet.clear_assignments(101) == 2
    assert fleet.drivers[101].assigned_count == 0

    kinds = [type(ev) for ev in sink.events]
    assert kinds == [
        RideCreatedBiz,
        RideCreatedBiz,
        RideAssignedBiz,
        RideAssignedBiz,
        RideRequestedBiz,
        AssignmentsClearedBiz,
    ]
    assert [ev.seq for ev in sink.events] == [1, 2, 3, 4, 5, 6]
    assert all(ev.run_id == "t-1" for ev in sink.events)
    created = sink.events[0]
    assert created.ride_id == r1.id and created.kind == "standard"
    assert created.fare == pytest.approx(28.6)
    assert sink.events[-1].cleared == 2


def test_fleet_without_recorder_is_silent():
    fleet = Fleet()
    r = fleet.add_ride(Ride("a", "b", 1.0))
    fleet.add_driver(Driver(1, "a"))
    fleet.assign(1, r.id)
    assert fleet.drivers[1].assigned_count == 1


def test_duplicate_registration_rejected():
    fleet, sink, r1, _ = _fleet()
    created = len(sink.named("RideCreated"))
    with pytest.raises(ValueError, match="ride"):
        fleet.add_ride(r1)
    with pytest.raises(ValueError, match="driver 101"):
        fleet.add_driver(Driver(101, "Someone Else"))
    with pytest.raises(ValueError, match="rider 201"):
        fleet.add_rider(Rider(201, "Someone Else"))
    assert fleet.drivers[101].name == "Aisha Khan"
    assert fleet.riders[201].name == "Nabiha S."
    assert len(sink.named("RideCreated")) == created == 2
