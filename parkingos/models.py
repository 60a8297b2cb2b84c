"""Physical parking layout: slots, areas, zones and the vehicles that use them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ParkingSlot:
    """A single parking space inside an area of a zone."""

    slot_num: int
    zone_num: int
    is_occupied: bool = False
    vehicle_id: str = ""

    def occupy(self, vehicle_id: str) -> None:
        """Mark the slot as taken by the given vehicle."""
        self.is_occupied = True
        self.vehicle_id = vehicle_id

    def free(self) -> None:
        """Release the slot."""
        self.is_occupied = False
        self.vehicle_id = ""


@dataclass
class ParkingArea:
    """A bounded group of slots belonging to one zone."""

    area_id: int
    zone_id: int
    capacity: int
    slots: list[ParkingSlot] = field(default_factory=list)

    def add_slot(self, slot_num: int) -> ParkingSlot | None:
        """Append a new slot; returns it, or None when the area is at capacity."""
        if len(self.slots) >= self.capacity:
            return None
        slot = ParkingSlot(slot_num, self.zone_id)
        self.slots.append(slot)
        return slot


@dataclass
class Zone:
    """A zone made of a bounded number of parking areas."""

    zone_id: int
    capacity: int
    areas: list[ParkingArea] = field(default_factory=list)

    def add_area(self, area_id: int, capacity_per_area: int) -> ParkingArea | None:
        """Append a new area; returns it, or None when the zone is at capacity."""
        if len(self.areas) >= self.capacity:
            return None
        area = ParkingArea(area_id, self.zone_id, capacity_per_area)
        self.areas.append(area)
        return area

    def is_full(self) -> bool:
        """True when the zone has no areas or no free slot."""
        if not self.areas:
            return True
        return all(slot.is_occupied for slot in self.iter_slots())

    def iter_slots(self) -> Iterator[ParkingSlot]:
        """Yield every slot of the zone, area by area, in insertion order."""
        for area in self.areas:
            yield from area.slots


@dataclass
class Vehicle:
    """A vehicle together with the zone it would like to park in."""

    vehicle_id: str
    preferred_zone_id: int