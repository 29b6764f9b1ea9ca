# domain/entities/driver.py
import logging
import math
import sys
from dataclasses import dataclass, field
from typing import TextIO

from ride_share.domain.entities.ride import Ride
from ride_share.errors import InvalidDriverError

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Driver:
    id: int
    name: str
    rating: float = 5.0  # 0.0 - 5.0
    _rides: list[Ride] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        if not math.isfinite(self.rating) or not 0.0 <= self.rating <= 5.0:
            raise InvalidDriverError(f"rating must be within [0, 5], got {self.rating!r}")

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    @property
    def assigned_count(self) -> int:
        return len(self._rides)

    def add_ride(self, ride: Ride | None) -> None:
        if ride is None:
            log.debug("skipping empty ride reference", extra={"extra": {"driver_id": self.id}})
            return
        self._rides.append(ride)

    def clear_assigned_rides(self) -> None:
        self._rides.clear()

    def total_earnings(self) -> float:
        return sum(r.fare() for r in self._rides)

    def report(self, fp: TextIO | None = None) -> float:
        """Print the driver summary and every held ride; return total earnings."""
        fp = fp or sys.stdout
        print(f"Driver ID: {self.id} | Name: {self.name} | Rating: {self.rating:.2f}", file=fp)
        print(f"Assigned rides ({self.assigned_count}):", file=fp)
        total = 0.0
        for r in self._rides:
            print(r.describe(), file=fp)
            total += r.fare()
        print(f"Total earnings from assigned rides: ${total:.2f}", file=fp)
        return total
