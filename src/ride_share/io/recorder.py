# ride_share/io/recorder.py
"""
Fan-out for the Fleet's bookkeeping events (ride created/assigned/requested,
assignments cleared). build() always attaches a MemorySink so a run can be
inspected afterwards; a JsonlSink on stderr is added when log.events is set.
"""
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=None):
        self.fp = fp or sys.stderr

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)

    def named(self, name: str) -> list:
        return [ev for ev in self.events if ev.name == name]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # a broken sink must not stop the run
                log.exception("sink %s failed on %s", type(s).__name__, type(ev).__name__)
