"""
In-memory registry of the entities making up one transit network.

Vehicles refer to passengers and stations by identifier only; the network is
where those identifiers are resolved. It also owns entity lifetime: releasing
an entity drops it from the registry and reports its destruction.
"""

import logging
from typing import Dict, List, Optional

from transit_station.passengers.models import Passenger
from transit_station.stations.models import Station
from transit_station.vehicles.models import Vehicle

logger = logging.getLogger(__name__)


class TransitNetwork:
    """Stations, vehicles and passengers keyed by identifier"""

    def __init__(self):
        self.stations: Dict[str, Station] = {}
        self.vehicles: Dict[str, Vehicle] = {}
        self.passengers: Dict[str, Passenger] = {}

    def __enter__(self) -> "TransitNetwork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Registration

    def add_station(self, station: Station) -> Station:
        if station.name in self.stations:
            raise ValueError(f"Station {station.name} already exists")
        self.stations[station.name] = station
        return station

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        if vehicle.id in self.vehicles:
            raise ValueError(f"Vehicle {vehicle.id} already exists")
        self.vehicles[vehicle.id] = vehicle
        return vehicle

    def add_passenger(self, passenger: Passenger) -> Passenger:
        if passenger.id in self.passengers:
            raise ValueError(f"Passenger {passenger.id} already exists")
        self.passengers[passenger.id] = passenger
        return passenger

    # Lookup

    def get_station(self, name: str) -> Station:
        station = self.stations.get(name)
        if station is None:
            raise ValueError(f"Station {name} not found")
        return station

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self.vehicles.get(vehicle_id)
        if vehicle is None:
            raise ValueError(f"Vehicle {vehicle_id} not found")
        return vehicle

    def get_passenger(self, passenger_id: str) -> Passenger:
        passenger = self.passengers.get(passenger_id)
        if passenger is None:
            raise ValueError(f"Passenger {passenger_id} not found")
        return passenger

    def get_assigned_station(self, vehicle_id: str) -> Optional[Station]:
        """Station the vehicle was last scheduled at, if still registered"""
        station_name = self.get_vehicle(vehicle_id).get_assigned_station()
        if station_name is None:
            return None
        return self.stations.get(station_name)

    def get_booked_passengers(self, vehicle_id: str) -> List[Passenger]:
        vehicle = self.get_vehicle(vehicle_id)
        return [
            self.passengers[passenger_id]
            for passenger_id in vehicle.booked_passenger_ids
            if passenger_id in self.passengers
        ]

    # Operations by identifier

    def schedule_vehicle(self, station_name: str, vehicle_id: str, time: str, is_arrival: bool) -> bool:
        station = self.get_station(station_name)
        vehicle = self.get_vehicle(vehicle_id)
        return station.add_schedule(vehicle, time, is_arrival)

    def unschedule_vehicle(self, station_name: str, vehicle_id: str) -> bool:
        return self.get_station(station_name).remove_schedule_by_vehicle_id(vehicle_id)

    def book_ride(self, passenger_id: str, vehicle_id: str) -> bool:
        passenger = self.get_passenger(passenger_id)
        return passenger.book_ride(self.get_vehicle(vehicle_id))

    def cancel_ride(self, passenger_id: str, vehicle_id: str) -> bool:
        passenger = self.get_passenger(passenger_id)
        return passenger.cancel_ride(self.get_vehicle(vehicle_id))

    # Lifetime

    def release_station(self, name: str) -> None:
        station = self.get_station(name)
        del self.stations[name]
        station.release()

    def release_vehicle(self, vehicle_id: str) -> None:
        vehicle = self.get_vehicle(vehicle_id)
        del self.vehicles[vehicle_id]
        vehicle.release()

    def release_passenger(self, passenger_id: str) -> None:
        """Cancel the passenger's bookings, then drop them from the network"""
        passenger = self.get_passenger(passenger_id)
        for vehicle in self.vehicles.values():
            if vehicle.is_booked(passenger_id):
                passenger.cancel_ride(vehicle)
        del self.passengers[passenger_id]
        passenger.release()

    def close(self) -> None:
        """Release every entity, newest first within each kind"""
        for passenger_id in reversed(list(self.passengers)):
            self.release_passenger(passenger_id)
        for vehicle_id in reversed(list(self.vehicles)):
            self.release_vehicle(vehicle_id)
        for name in reversed(list(self.stations)):
            self.release_station(name)
