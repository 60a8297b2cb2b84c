import pytest

from parkingos.models import ParkingArea, ParkingSlot, Vehicle, Zone


def test_slot_starts_free():
    slot = ParkingSlot(3, 1)
    assert slot.is_occupied is False
    assert slot.vehicle_id == ""


def test_slot_occupy_and_free_round_trip():
    slot = ParkingSlot(1, 2)
    slot.occupy("CAR-A")
    assert slot.is_occupied is True
    assert slot.vehicle_id == "CAR-A"
    slot.free()
    assert slot.is_occupied is False
    assert slot.vehicle_id == ""


def test_area_slots_inherit_zone():
    area = ParkingArea(1, 7, 3)
    for n in (1, 2, 3):
        area.add_slot(n)
    assert [s.slot_num for s in area.slots] == [1, 2, 3]
    assert all(s.zone_num == 7 for s in area.slots)


def test_area_ignores_slots_beyond_capacity():
    area = ParkingArea(1, 1, 2)
    assert area.add_slot(1) is not None
    assert area.add_slot(2) is not None
    assert area.add_slot(3) is None
    assert len(area.slots) == area.capacity


def test_zone_ignores_areas_beyond_capacity():
    zone = Zone(1, 1)
    first = zone.add_area(1, 4)
    assert first is not None and first.zone_id == 1
    assert zone.add_area(2, 4) is None
    assert len(zone.areas) == 1


def test_zone_without_areas_is_full():
    assert Zone(1, 2).is_full() is True


def test_zone_with_empty_areas_is_full():
    zone = Zone(1, 2)
    zone.add_area(1, 3)
    assert zone.is_full() is True


def _zone_with_slots(per_area):
    zone = Zone(5, 2)
    for area_id in (1, 2):
        area = zone.add_area(area_id, per_area)
        for n in range(1, per_area + 1):
            area.add_slot(n)
    return zone


def test_zone_full_only_when_every_slot_taken():
    zone = _zone_with_slots(2)
    slots = list(zone.iter_slots())
    for slot in slots[:-1]:
        slot.occupy("X")
        assert zone.is_full() is False
    slots[-1].occupy("X")
    assert zone.is_full() is True


def test_iter_slots_order_follows_areas():
    zone = _zone_with_slots(2)
    expected = zone.areas[0].slots + zone.areas[1].slots
    assert list(zone.iter_slots()) == expected


def test_vehicle_fields():
    vehicle = Vehicle("CAR-B", 2)
    assert vehicle.vehicle_id == "CAR-B"
    assert vehicle.preferred_zone_id == 2


@pytest.mark.parametrize("count", [0, 1, 4])
def test_area_accepts_up_to_capacity(count):
    area = ParkingArea(1, 1, count)
    for n in range(count + 2):
        area.add_slot(n)
    assert len(area.slots) == count