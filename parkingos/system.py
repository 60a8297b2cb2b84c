"""The parking system: zones, allocation, removal, undo and an HTML dashboard."""

from __future__ import annotations

import html
from pathlib import Path

from .allocation import AllocationEngine
from .models import Zone
from .request import ParkingRequest, RequestStatus
from .rollback import ActionType, HistoryEntry, RollbackManager

_HEAD = (
    "<html><head><meta http-equiv='refresh' content='2'>"
    "<style>body{background:#0d1117;color:white;font-family:monospace;} "
    ".zone{border:1px solid #333;margin:10px;padding:10px;} "
    ".occ{color:red;} .free{color:green;}</style>"
    "</head><body><h1>PARKING OS</h1>"
)
_TAIL = "</body></html>"


class ParkingSystem:
    """Zones of two areas each, kept mirrored in an HTML dashboard file."""

    def __init__(
        self,
        num_zones: int,
        slots_per_zone: int,
        dashboard_path: str | Path = "dashboard.html",
    ) -> None:
        self.dashboard_path = Path(dashboard_path)
        self.engine = AllocationEngine()
        self.rollback = RollbackManager()
        self.zones: list[Zone] = []
        for zone_id in range(1, num_zones + 1):
            zone = Zone(zone_id, 2)
            zone.add_area(1, slots_per_zone)
            zone.add_area(2, slots_per_zone)
            for area in zone.areas:
                for slot_num in range(1, slots_per_zone + 1):
                    area.add_slot(slot_num)
            self.zones.append(zone)
        self.export_html()

    def park_vehicle(self, request: ParkingRequest) -> bool:
        """Try to park the request's vehicle; records the action for undo."""
        request.update_status(RequestStatus.REQUESTED)
        slot = self.engine.assign_slot(request.vehicle, self.zones)
        if slot is None:
            request.update_status(RequestStatus.CANCELLED)
            print("Failed to park.")
            return False

        request.update_status(RequestStatus.ALLOCATED)
        request.update_status(RequestStatus.OCCUPIED)
        self.rollback.push_operation(ActionType.PARK, request, slot)
        print(f"Success: {request.vehicle.vehicle_id} parked in Zone {slot.zone_num}")
        self.export_html()
        return True

    def remove_vehicle(self, zone_id: int, slot_num: int) -> bool:
        """Free the first occupied slot with this number in the zone."""
        for zone in self.zones:
            if zone.zone_id != zone_id:
                continue
            for slot in zone.iter_slots():
                if slot.slot_num == slot_num and slot.is_occupied:
                    slot.free()
                    print("Vehicle Removed.")
                    self.export_html()
                    return True
        return False

    def undo_last_action(self) -> HistoryEntry | None:
        """Revert the most recent recorded action; returns it, or None if none."""
        entry = self.rollback.pop_operation()
        if entry is None:
            print("Nothing to undo!")
            return None
        if entry.action_type is ActionType.PARK:
            print(f"UNDO: Removing {entry.slot.vehicle_id} from history.")
            entry.slot.free()
            entry.request.update_status(RequestStatus.CANCELLED)
        self.export_html()
        return entry

    def show_status(self) -> str:
        """Return a plain-text view of every zone."""
        lines = []
        for zone in self.zones:
            lines.append(f"Zone {zone.zone_id}")
            for area in zone.areas:
                cells = " ".join(
                    f"[{slot.vehicle_id}]" if slot.is_occupied else "[FREE]"
                    for slot in area.slots
                )
                lines.append(f"  Area {area.area_id}: {cells}")
        return "\n".join(lines)

    def render_html(self) -> str:
        """Build the dashboard page."""
        parts = [_HEAD]
        for zone in self.zones:
            parts.append(f"<div class='zone'><h3>Zone {zone.zone_id}</h3>")
            for area in zone.areas:
                parts.append(f"Area {area.area_id}: ")
                for slot in area.slots:
                    if slot.is_occupied:
                        parts.append(
                            f"<span class='occ'>[{html.escape(slot.vehicle_id)}] </span>"
                        )
                    else:
                        parts.append("<span class='free'>[FREE] </span>")
                parts.append("<br>")
            parts.append("</div>")
        parts.append(_TAIL)
        return "".join(parts)

    def export_html(self) -> Path:
        """Write the dashboard page to the dashboard path."""
        self.dashboard_path.write_text(self.render_html(), encoding="utf-8")
        return self.dashboard_path