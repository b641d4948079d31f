import logging

from transit_station.vehicles.models import Vehicle


def test_book_and_cancel(bus, alice):
    assert alice.book_ride(bus)
    assert alice.booked_vehicle_ids == ["BUS101"]
    assert bus.is_booked("P100")

    assert alice.cancel_ride(bus)
    assert alice.booked_vehicle_ids == []
    assert bus.booked_count == 0


def test_book_without_vehicle(alice):
    assert not alice.book_ride(None)
    assert not alice.cancel_ride(None)
    assert alice.booked_vehicle_ids == []


def test_failed_booking_leaves_history_unchanged(bus, alice, bob, carol, caplog):
    caplog.set_level(logging.INFO)
    alice.book_ride(bus)
    bob.book_ride(bus)
    assert not carol.book_ride(bus)
    assert carol.booked_vehicle_ids == []
    assert "[Booked] Alice booked BUS101" in caplog.text
    assert "[Booking failed] Carol could not book BUS101" in caplog.text


def test_duplicate_booking_keeps_single_entry(bus, alice):
    assert alice.book_ride(bus)
    assert not alice.book_ride(bus)
    assert alice.booked_vehicle_ids == ["BUS101"]
    assert bus.booked_count == 1


def test_cancel_when_not_booked(bus, alice, bob, caplog):
    caplog.set_level(logging.INFO)
    alice.book_ride(bus)
    assert not bob.cancel_ride(bus)
    assert bus.booked_passenger_ids == ["P100"]
    assert "[Cancel failed] Bob not on BUS101" in caplog.text


def test_cancel_removes_first_matching_id_only(alice):
    first = Vehicle(id="BUS1", route="R1", capacity=5, speed=40.0)
    second = Vehicle(id="BUS2", route="R2", capacity=5, speed=40.0)
    alice.book_ride(first)
    alice.book_ride(second)
    alice.cancel_ride(first)
    assert alice.booked_vehicle_ids == ["BUS2"]


def test_cancel_and_rebook_full_vehicle(bus, alice, bob, carol):
    alice.book_ride(bus)
    bob.book_ride(bus)
    assert not carol.book_ride(bus)
    assert bus.booked_count == 2

    assert bob.cancel_ride(bus)
    assert bus.booked_count == 1

    assert carol.book_ride(bus)
    assert bus.booked_count == 2
    assert set(bus.booked_passenger_ids) == {"P100", "P102"}
    assert bob.booked_vehicle_ids == []


def test_display_info(bus, alice):
    assert alice.display_info() == "Passenger: Alice (ID: P100) | Booked: none"
    other = Vehicle(id="BUS202", route="C->D", capacity=3, speed=50.0)
    alice.book_ride(bus)
    alice.book_ride(other)
    assert alice.display_info() == "Passenger: Alice (ID: P100) | Booked: BUS101, BUS202"
