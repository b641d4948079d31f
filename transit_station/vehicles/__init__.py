from .models import Vehicle, ExpressBus, TRAVEL_TIME_UNDEFINED, build_vehicle
from .schemas import VehicleType, VehicleCreate, VehicleInfo, VehicleStatusUpdate, TravelTimeResponse

__all__ = [
    "Vehicle",
    "ExpressBus",
    "TRAVEL_TIME_UNDEFINED",
    "build_vehicle",
    "VehicleType",
    "VehicleCreate",
    "VehicleInfo",
    "VehicleStatusUpdate",
    "TravelTimeResponse"
]
