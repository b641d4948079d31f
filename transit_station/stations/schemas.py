from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum

class StationType(str, Enum):
    """Kind of service a station handles"""
    BUS = "bus"
    TRAIN = "train"

class StationCreate(BaseModel):
    name: str = Field(..., min_length=1)
    location: str
    station_type: StationType

class ScheduleCreate(BaseModel):
    """Request body for scheduling a registered vehicle"""
    vehicle_id: str
    time: str = Field(..., description="Time of day, HH:MM by convention")
    is_arrival: bool

class ScheduleEntry(BaseModel):
    position: int  # 1-based, insertion order
    direction: str
    vehicle_id: Optional[str] = None
    route: Optional[str] = None
    time: str

class StationInfo(BaseModel):
    name: str
    location: str
    station_type: StationType
    max_schedules: int
    schedules: List[ScheduleEntry] = []
