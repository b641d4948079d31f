import logging

import pytest

from transit_station.network.service import TransitNetwork
from transit_station.passengers.models import Passenger
from transit_station.stations.models import Station
from transit_station.vehicles.models import ExpressBus, Vehicle


def test_register_and_lookup(network, bus, station, alice):
    network.add_vehicle(bus)
    network.add_station(station)
    network.add_passenger(alice)
    assert network.get_vehicle("BUS101") is bus
    assert network.get_station("Downtown Bus Hub") is station
    assert network.get_passenger("P100") is alice


def test_duplicate_registration_rejected(network, bus):
    network.add_vehicle(bus)
    with pytest.raises(ValueError, match="already exists"):
        network.add_vehicle(Vehicle(id="BUS101", route="other", capacity=1, speed=10.0))


@pytest.mark.parametrize("lookup", ["get_vehicle", "get_station", "get_passenger"])
def test_unknown_identifier(network, lookup):
    with pytest.raises(ValueError, match="not found"):
        getattr(network, lookup)("missing")


def test_assigned_station_resolution(network, bus, station):
    network.add_vehicle(bus)
    network.add_station(station)
    assert network.get_assigned_station("BUS101") is None

    assert network.schedule_vehicle("Downtown Bus Hub", "BUS101", "08:10", False)
    assert network.get_assigned_station("BUS101") is station

    # removal leaves the back-reference in place
    assert network.unschedule_vehicle("Downtown Bus Hub", "BUS101")
    assert network.get_assigned_station("BUS101") is station

    network.release_station("Downtown Bus Hub")
    assert network.get_assigned_station("BUS101") is None


def test_booking_by_identifier(network, bus, alice, bob, carol):
    network.add_vehicle(bus)
    for passenger in (alice, bob, carol):
        network.add_passenger(passenger)

    assert network.book_ride("P100", "BUS101")
    assert network.book_ride("P101", "BUS101")
    assert not network.book_ride("P102", "BUS101")
    assert network.cancel_ride("P101", "BUS101")
    assert network.book_ride("P102", "BUS101")
    assert [p.name for p in network.get_booked_passengers("BUS101")] == ["Alice", "Carol"]


def test_close_releases_in_reverse_order(caplog):
    caplog.set_level(logging.INFO)
    with TransitNetwork() as network:
        network.add_station(Station(name="Downtown Bus Hub", location="12 Main St", station_type="bus"))
        network.add_station(Station(name="Central Train", location="1 Station Rd", station_type="train"))
        network.add_vehicle(Vehicle(id="BUS101", route="A->B", capacity=2, speed=45.0))
        network.add_vehicle(ExpressBus(id="EXP301", route="X->Y", capacity=4, speed=80.0, stops_count=3))
        network.add_passenger(Passenger(id="P100", name="Alice"))
        caplog.clear()

    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "[Passenger released] Alice (P100)",
        "[ExpressBus destroyed] EXP301",
        "[Vehicle destroyed] EXP301",
        "[Vehicle destroyed] BUS101",
        "[Station destroyed] Central Train",
        "[Station destroyed] Downtown Bus Hub",
    ]
    assert not network.stations and not network.vehicles and not network.passengers


def test_release_passenger_frees_seats(network):
    bus = network.add_vehicle(Vehicle(id="BUS1", route="R", capacity=1, speed=30.0))
    other = network.add_vehicle(Vehicle(id="BUS2", route="R", capacity=1, speed=30.0))
    a = network.add_passenger(Passenger(id="A", name="Ann"))
    b = network.add_passenger(Passenger(id="B", name="Ben"))
    a.book_ride(bus)
    a.book_ride(other)

    network.release_passenger("A")
    assert bus.booked_passenger_ids == []
    assert other.booked_passenger_ids == []
    assert a.booked_vehicle_ids == []
    assert b.book_ride(bus)
