from pydantic import BaseModel, Field
from typing import List

class PassengerCreate(BaseModel):
    id: str = Field(..., min_length=1)
    name: str

class PassengerInfo(BaseModel):
    id: str
    name: str
    booked_vehicle_ids: List[str] = []

    class Config:
        from_attributes = True

class BookingResult(BaseModel):
    """Outcome of a booking or cancellation request"""
    passenger_id: str
    vehicle_id: str
    success: bool
    booked_count: int
    capacity: int
