"""
Console demonstration of the station management system.

Builds two stations, three vehicles and three passengers, then walks through
the schedule limit, capacity-checked bookings, cancellation, travel time
comparison and schedule removal, printing state after each step.
"""

import logging

from transit_station.config import settings, setup_logging
from transit_station.network.service import TransitNetwork
from transit_station.passengers.models import Passenger
from transit_station.stations.models import Station
from transit_station.stations.schemas import StationType
from transit_station.vehicles.models import ExpressBus, Vehicle

logger = logging.getLogger(__name__)


def _section(title: str) -> None:
    print(f"\n-- {title} --")


def run_demo(distance_km: float = None) -> TransitNetwork:
    """Exercise every operation once; returns the network before it is closed"""
    distance_km = settings.DEMO_DISTANCE_KM if distance_km is None else distance_km
    print("=== Public Transportation Station Management System Demo ===\n")

    network = TransitNetwork()
    bus_station = network.add_station(Station(name="Downtown Bus Hub", location="12 Main St", station_type=StationType.BUS))
    train_station = network.add_station(Station(name="Central Train", location="1 Station Rd", station_type=StationType.TRAIN))

    v1 = network.add_vehicle(Vehicle(id="BUS101", route="A->B", capacity=2, speed=45.0))
    v2 = network.add_vehicle(Vehicle(id="BUS202", route="C->D", capacity=3, speed=50.0))
    exp1 = network.add_vehicle(ExpressBus(id="EXP301", route="X->Y Express", capacity=4, speed=80.0, stops_count=3))

    _section(f"Scheduling tests (max {bus_station.max_schedules} per station)")
    for minute in range(10, 20):
        bus_station.add_schedule(v1, f"08:{minute:02d}", is_arrival=False)
    bus_station.add_schedule(v2, "11:30", is_arrival=True)

    _section("Display schedules at busStation")
    print(bus_station.display_info())

    _section("Booking tests (capacity checks)")
    alice = network.add_passenger(Passenger(id="P100", name="Alice"))
    bob = network.add_passenger(Passenger(id="P101", name="Bob"))
    carol = network.add_passenger(Passenger(id="P102", name="Carol"))

    alice.book_ride(v1)
    bob.book_ride(v1)
    carol.book_ride(v1)

    _section("Vehicle info after attempted bookings")
    print(v1.display_info())

    _section("Cancel and retry booking")
    bob.cancel_ride(v1)
    carol.book_ride(v1)
    print(v1.display_info())

    _section(f"Travel time comparison (distance {distance_km:.2f} km)")
    print(f"{v2.id} time (hrs): {v2.calculate_travel_time(distance_km):.2f}")
    print(f"{exp1.id} time (hrs): {exp1.calculate_travel_time(distance_km):.2f} (20% faster)")

    _section("Schedule express bus at trainStation")
    train_station.add_schedule(exp1, "09:45", is_arrival=True)
    print(train_station.display_info())

    _section("Remove schedule example")
    bus_station.remove_schedule_by_vehicle_id(v1.id)
    print(bus_station.display_info())

    _section("Passenger info")
    for passenger in (alice, bob, carol):
        print(passenger.display_info())

    return network


def main() -> int:
    setup_logging()
    with run_demo():
        print("\n=== Demo complete ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
