# domain/entities/rider.py
import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from ride_share.domain.entities.ride import Ride

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Rider:
    id: int
    name: str
    _rides: list[Ride] = field(default_factory=list, init=False, repr=False)

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    @property
    def requested_count(self) -> int:
        return len(self._rides)

    def request_ride(self, ride: Ride | None) -> None:
        if ride is None:
            log.debug("skipping empty ride reference", extra={"extra": {"rider_id": self.id}})
            return
        self._rides.append(ride)

    def report(self, fp: TextIO | None = None) -> int:
        fp = fp or sys.stdout
        print(
            f"Rider ID: {self.id} | Name: {self.name} | Ride history ({self.requested_count}):",
            file=fp,
        )
        for r in self._rides:
            print(r.describe(), file=fp)
        return self.requested_count
