"""
Vehicle entities.

A vehicle keeps the identifiers of the passengers booked on it and the
identifier of the station it was last scheduled at. Both are plain identifiers;
the owning network resolves them back to entities.
"""

import logging
from typing import TYPE_CHECKING, Any, ClassVar, List, Optional

from pydantic import BaseModel, Field

from transit_station.vehicles.schemas import VehicleType

if TYPE_CHECKING:
    from transit_station.passengers.models import Passenger

logger = logging.getLogger(__name__)

# Returned by calculate_travel_time when speed is not positive
TRAVEL_TIME_UNDEFINED = -1.0


class Vehicle(BaseModel):
    """Standard vehicle: travel time is distance over speed"""
    id: str
    route: str
    capacity: int = Field(..., gt=0)
    speed: float  # km/h
    on_time: bool = True
    booked_passenger_ids: List[str] = []
    assigned_station_id: Optional[str] = None

    vehicle_type: ClassVar[VehicleType] = VehicleType.STANDARD

    def model_post_init(self, context: Any) -> None:
        logger.info(f"[Vehicle created] {self.id} | route: {self.route} | capacity: {self.capacity}")

    @property
    def booked_count(self) -> int:
        return len(self.booked_passenger_ids)

    @property
    def is_full(self) -> bool:
        return self.booked_count >= self.capacity

    def is_booked(self, passenger_id: str) -> bool:
        return passenger_id in self.booked_passenger_ids

    def add_passenger(self, passenger: "Passenger") -> bool:
        """Book a passenger; rejects when full or already booked"""
        if self.is_full:
            logger.warning(f"[Vehicle full] {self.id} cannot accept passenger {passenger.name}")
            return False
        if self.is_booked(passenger.id):
            logger.warning(f"[Already booked] {passenger.name} already on {self.id}")
            return False
        self.booked_passenger_ids.append(passenger.id)
        return True

    def remove_passenger(self, passenger: "Passenger") -> bool:
        if not self.is_booked(passenger.id):
            return False
        self.booked_passenger_ids.remove(passenger.id)
        return True

    def calculate_travel_time(self, distance_km: float) -> float:
        """Hours needed to cover distance_km, or TRAVEL_TIME_UNDEFINED"""
        if self.speed <= 0:
            return TRAVEL_TIME_UNDEFINED
        return distance_km / self.speed

    def set_status(self, on_time: bool) -> None:
        self.on_time = on_time

    @property
    def status_label(self) -> str:
        return "On-time" if self.on_time else "Delayed"

    def set_assigned_station(self, station_id: Optional[str]) -> None:
        self.assigned_station_id = station_id

    def get_assigned_station(self) -> Optional[str]:
        return self.assigned_station_id

    def display_info(self) -> str:
        return (
            f"Vehicle ID: {self.id}"
            f" | Route: {self.route}"
            f" | Capacity: {self.capacity}"
            f" | Booked: {self.booked_count}"
            f" | Speed: {self.speed:g} km/h"
            f" | Status: {self.status_label}"
        )

    def release(self) -> None:
        """Report the end of this vehicle's lifetime"""
        logger.info(f"[Vehicle destroyed] {self.id}")


class ExpressBus(Vehicle):
    """Express variant: fewer stops, 20% less travel time"""
    stops_count: int = Field(0, ge=0)

    vehicle_type: ClassVar[VehicleType] = VehicleType.EXPRESS
    TIME_FACTOR: ClassVar[float] = 0.8

    def model_post_init(self, context: Any) -> None:
        super().model_post_init(context)
        logger.info(f"[ExpressBus created] {self.id} | stops: {self.stops_count}")

    def calculate_travel_time(self, distance_km: float) -> float:
        base_time = super().calculate_travel_time(distance_km)
        if base_time < 0:
            return TRAVEL_TIME_UNDEFINED
        return base_time * self.TIME_FACTOR

    def display_info(self) -> str:
        return f"Express {super().display_info()}\n   (stops: {self.stops_count})"

    def release(self) -> None:
        logger.info(f"[ExpressBus destroyed] {self.id}")
        super().release()


def build_vehicle(data) -> Vehicle:
    """Create a Vehicle or ExpressBus from a VehicleCreate request"""
    if data.vehicle_type == VehicleType.EXPRESS:
        return ExpressBus(
            id=data.id,
            route=data.route,
            capacity=data.capacity,
            speed=data.speed,
            stops_count=data.stops_count or 0
        )
    return Vehicle(id=data.id, route=data.route, capacity=data.capacity, speed=data.speed)
