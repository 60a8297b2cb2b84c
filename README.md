# parkingos

A small library for running a multi-zone parking facility in memory.

Each zone holds parking areas, and each area holds numbered slots. A vehicle
names a preferred zone. The allocation engine fills the first free slot there,
and if that zone is full it re-routes the vehicle to the first other zone that
still has room. Every successful park is recorded so it can be undone. The
state of the whole facility is kept mirrored in an auto-refreshing HTML
dashboard file.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from parkingos.models import Vehicle
from parkingos.request import ParkingRequest
from parkingos.system import ParkingSystem

# Three zones, each with two areas of four slots.
# The dashboard is written to "dashboard.html" unless another path is given.
system = ParkingSystem(3, 4, dashboard_path="dashboard.html")

request = ParkingRequest(Vehicle("TEST-CAR-1", 2))
if system.park_vehicle(request):
    print(request.status_string())   # OCCUPIED

# Free the first occupied slot numbered 1 in zone 2.
system.remove_vehicle(2, 1)

# Roll back the most recent park; returns the HistoryEntry, or None if the
# history is empty. The request becomes CANCELLED.
system.undo_last_action()

print(system.show_status())   # plain-text view of every zone
page = system.render_html()   # the dashboard page as a string
system.export_html()          # write it to system.dashboard_path
```

`ParkingSystem` writes the dashboard file when it is created and again after
every successful park, removal and undo. It also prints short progress
messages ("Success: ...", "Failed to park.", "Re-routed to Zone ...") to
standard output.

## Building blocks

- `parkingos.models`: `ParkingSlot` (`occupy`, `free`), `ParkingArea`
  (`add_slot`), `Zone` (`add_area`, `is_full`, `iter_slots`) and `Vehicle`.
  Areas and zones have a fixed capacity; `add_slot` and `add_area` return
  `None` once it is reached. A zone with no areas counts as full.
- `parkingos.request`: `ParkingRequest` with a unique, increasing
  `request_id` starting at 1001, its creation time in whole seconds, and a
  `RequestStatus` of `REQUESTED`, `ALLOCATED`, `OCCUPIED`, `CANCELLED` or
  `RELEASED`. `update_status` accepts any transition.
- `parkingos.allocation`: `AllocationEngine.assign_slot(vehicle, zones)`
  tries the preferred zone first, then every other zone in order, occupies
  the slot it finds and returns it, or returns `None`.
- `parkingos.rollback`: `RollbackManager`, a last-in-first-out history of
  `HistoryEntry` records tagged with an `ActionType` (`PARK` or `REMOVE`).
- `parkingos.system`: `ParkingSystem` ties these together.

## What it does not do

- There is no command-line program; the package is used from Python code.
- Nothing is persisted: the facility lives only in memory, and the dashboard
  file is output only, never read back.
- The dashboard is a static HTML file that asks the browser to reload it
  every two seconds; no web server is included.
- Only parks are recorded for undo. `remove_vehicle` is not recorded, and
  nothing in `ParkingSystem` sets a request to `RELEASED`.