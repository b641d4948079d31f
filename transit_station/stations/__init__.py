from .models import Station
from .schemas import StationType, StationCreate, ScheduleCreate, ScheduleEntry, StationInfo

__all__ = ["Station", "StationType", "StationCreate", "ScheduleCreate", "ScheduleEntry", "StationInfo"]
