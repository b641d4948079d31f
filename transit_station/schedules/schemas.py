from pydantic import BaseModel
from typing import Optional

from transit_station.vehicles.models import Vehicle

class Schedule(BaseModel):
    """Arrival or departure of a vehicle at a station"""
    vehicle: Optional[Vehicle] = None
    time: str  # "HH:MM" by convention, not validated
    is_arrival: bool

    class Config:
        frozen = True

    @property
    def vehicle_id(self) -> Optional[str]:
        return self.vehicle.id if self.vehicle is not None else None

    @property
    def direction_label(self) -> str:
        return "Arrival" if self.is_arrival else "Departure"

    def matches_vehicle(self, vehicle_id: str) -> bool:
        return self.vehicle is not None and self.vehicle.id == vehicle_id
