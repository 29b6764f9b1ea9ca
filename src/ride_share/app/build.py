# ride_share/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from ride_share.config.models import ScenarioModel
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import Fleet
from ride_share.io.recorder import JsonlSink, MemorySink, Recorder
from ride_share.io.run_logging import NoopLogging, RunLogging
from ride_share.runtime.registries import make_ride


@dataclass
class App:
    model: ScenarioModel
    fleet: Fleet
    rides: dict[str, Ride]  # scenario key -> ride
    recorder: Recorder
    events: MemorySink
    logging: RunLogging | NoopLogging


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Logging & recorder
    events = MemorySink()
    sinks = [events]
    if use_logging and model.log.events:
        sinks.append(JsonlSink())
    recorder = Recorder(*sinks)
    run_logging = (
        RunLogging(run_id=model.run_id, level=model.log.level) if use_logging else NoopLogging()
    )

    # 2) Registry & rides, in declaration order so ids follow the file
    fleet = Fleet(run_id=model.run_id, recorder=recorder)
    rides = {key: fleet.add_ride(make_ride(rc)) for key, rc in model.rides.items()}

    # 3) People
    for dc in model.drivers:
        fleet.add_driver(Driver(dc.id, dc.name, dc.rating))
    for rc in model.riders:
        fleet.add_rider(Rider(rc.id, rc.name))

    # 4) Assignments, drivers first
    for dc in model.drivers:
        for key in dc.rides:
            fleet.assign(dc.id, rides[key].id)
    for rc in model.riders:
        for key in rc.rides:
            fleet.request(rc.id, rides[key].id)

    return App(model, fleet, rides, recorder, events, run_logging)
