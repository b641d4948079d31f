import logging
from typing import Any, List, Optional

from pydantic import BaseModel

from transit_station.vehicles.models import Vehicle

logger = logging.getLogger(__name__)


class Passenger(BaseModel):
    """Passenger with an ordered history of booked vehicle identifiers"""
    id: str
    name: str
    booked_vehicle_ids: List[str] = []

    def model_post_init(self, context: Any) -> None:
        logger.info(f"[Passenger created] {self.name} ({self.id})")

    def book_ride(self, vehicle: Optional[Vehicle]) -> bool:
        """Book a seat on vehicle; the vehicle enforces capacity and duplicates"""
        if vehicle is None:
            logger.warning(f"[Booking failed] {self.name} has no vehicle to book")
            return False
        if vehicle.add_passenger(self):
            self.booked_vehicle_ids.append(vehicle.id)
            logger.info(f"[Booked] {self.name} booked {vehicle.id}")
            return True
        logger.warning(f"[Booking failed] {self.name} could not book {vehicle.id}")
        return False

    def cancel_ride(self, vehicle: Optional[Vehicle]) -> bool:
        if vehicle is None:
            logger.warning(f"[Cancel failed] {self.name} has no vehicle to cancel")
            return False
        if vehicle.remove_passenger(self):
            if vehicle.id in self.booked_vehicle_ids:
                self.booked_vehicle_ids.remove(vehicle.id)
            logger.info(f"[Cancelled] {self.name} cancelled {vehicle.id}")
            return True
        logger.warning(f"[Cancel failed] {self.name} not on {vehicle.id}")
        return False

    def display_info(self) -> str:
        booked = ", ".join(self.booked_vehicle_ids) if self.booked_vehicle_ids else "none"
        return f"Passenger: {self.name} (ID: {self.id}) | Booked: {booked}"

    def release(self) -> None:
        logger.info(f"[Passenger released] {self.name} ({self.id})")
