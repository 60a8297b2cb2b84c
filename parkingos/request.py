"""Parking requests and their lifecycle states."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from enum import Enum

from .models import Vehicle

_request_ids = itertools.count(1001)


class RequestStatus(Enum):
    """States a parking request passes through."""

    REQUESTED = 0
    ALLOCATED = 1
    OCCUPIED = 2
    CANCELLED = 3
    RELEASED = 4


@dataclass
class ParkingRequest:
    """A vehicle's request for a slot, with a process-wide unique id."""

    vehicle: Vehicle
    request_id: int = field(default_factory=lambda: next(_request_ids), init=False)
    status: RequestStatus = field(default=RequestStatus.REQUESTED, init=False)
    request_time: int = field(default_factory=lambda: int(time.time()), init=False)

    def update_status(self, new_status: RequestStatus) -> None:
        """Move the request to a new state."""
        self.status = new_status

    def status_string(self) -> str:
        """Name of the current state."""
        return self.status.name