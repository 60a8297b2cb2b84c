"""Slot allocation: preferred zone first, then any other zone."""

from __future__ import annotations

from typing import Iterable

from .models import ParkingSlot, Vehicle, Zone


def _first_free_slot(zone: Zone) -> ParkingSlot | None:
    if zone.is_full():
        return None
    return next((slot for slot in zone.iter_slots() if not slot.is_occupied), None)


class AllocationEngine:
    """Chooses and occupies a slot for a vehicle."""

    def assign_slot(self, vehicle: Vehicle, zones: Iterable[Zone]) -> ParkingSlot | None:
        """Occupy the first free slot, preferring the vehicle's zone; None if all are full."""
        zones = list(zones)
        preferred = next(
            (zone for zone in zones if zone.zone_id == vehicle.preferred_zone_id), None
        )
        if preferred is not None:
            slot = _first_free_slot(preferred)
            if slot is not None:
                slot.occupy(vehicle.vehicle_id)
                return slot

        print("Preferred zone full... Searching elsewhere.")
        for zone in zones:
            if zone.zone_id == vehicle.preferred_zone_id:
                continue
            slot = _first_free_slot(zone)
            if slot is not None:
                slot.occupy(vehicle.vehicle_id)
                print(f"Re-routed to Zone {zone.zone_id}")
                return slot
        return None