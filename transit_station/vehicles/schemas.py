from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum

class VehicleType(str, Enum):
    """Vehicle variant enumeration"""
    STANDARD = "standard"
    EXPRESS = "express"

class VehicleCreate(BaseModel):
    """Request body for registering a vehicle"""
    id: str = Field(..., min_length=1)
    route: str
    capacity: int = Field(..., gt=0)
    speed: float  # km/h
    vehicle_type: VehicleType = VehicleType.STANDARD
    stops_count: Optional[int] = Field(None, ge=0)  # express only

class VehicleStatusUpdate(BaseModel):
    on_time: bool

class VehicleInfo(BaseModel):
    """Vehicle state as exposed over the API"""
    id: str
    route: str
    vehicle_type: VehicleType
    capacity: int
    speed: float
    on_time: bool
    booked_count: int
    booked_passenger_ids: List[str] = []
    assigned_station_id: Optional[str] = None
    stops_count: Optional[int] = None

    class Config:
        from_attributes = True

class TravelTimeResponse(BaseModel):
    vehicle_id: str
    distance_km: float
    travel_time_hours: Optional[float] = None  # None when speed is not positive
