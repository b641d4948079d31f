"""
Station entity.

A station owns an ordered list of schedules bounded by max_schedules. Adding a
schedule points the scheduled vehicle's assigned station at this station,
replacing any earlier assignment.
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from transit_station.config import settings
from transit_station.schedules.schemas import Schedule
from transit_station.stations.schemas import StationType
from transit_station.vehicles.models import Vehicle

logger = logging.getLogger(__name__)


class Station(BaseModel):
    name: str
    location: str
    station_type: StationType
    schedules: List[Schedule] = []
    max_schedules: int = Field(default_factory=lambda: settings.MAX_SCHEDULES_PER_STATION, gt=0)

    def model_post_init(self, context: Any) -> None:
        logger.info(f"[Station created] {self.name} ({self.station_type.value}) at {self.location}")

    @property
    def schedule_count(self) -> int:
        return len(self.schedules)

    @property
    def is_full(self) -> bool:
        return self.schedule_count >= self.max_schedules

    def add_schedule(self, vehicle: Optional[Vehicle], time: str, is_arrival: bool) -> bool:
        """Append a schedule unless the station is at its limit"""
        if self.is_full:
            logger.warning(f"[Schedule limit reached] Station {self.name} cannot accept more schedules.")
            return False

        schedule = Schedule(vehicle=vehicle, time=time, is_arrival=is_arrival)
        self.schedules.append(schedule)
        if vehicle is not None:
            vehicle.set_assigned_station(self.name)

        logger.info(
            f"[Schedule added] {schedule.direction_label}"
            f" | Vehicle: {schedule.vehicle_id or 'null'}"
            f" | Time: {time} at station {self.name}"
        )
        return True

    def remove_schedule_by_vehicle_id(self, vehicle_id: str) -> bool:
        """Remove the first schedule for vehicle_id"""
        for index, schedule in enumerate(self.schedules):
            if schedule.matches_vehicle(vehicle_id):
                break
        else:
            logger.warning(f"[Remove schedule] Vehicle {vehicle_id} not found at {self.name}")
            return False

        del self.schedules[index]
        if settings.CLEAR_ASSIGNMENT_ON_REMOVAL and schedule.vehicle.get_assigned_station() == self.name:
            schedule.vehicle.set_assigned_station(None)

        logger.info(f"[Schedule removed] Vehicle {vehicle_id} removed from {self.name}")
        return True

    def get_schedules_for_vehicle(self, vehicle_id: str) -> List[Schedule]:
        return [s for s in self.schedules if s.matches_vehicle(vehicle_id)]

    def display_info(self) -> str:
        lines = [f"Station: {self.name} | Location: {self.location} | Type: {self.station_type.value}"]
        if not self.schedules:
            lines.append("  No schedules.")
            return "\n".join(lines)

        for position, schedule in enumerate(self.schedules, start=1):
            route = schedule.vehicle.route if schedule.vehicle is not None else "N/A"
            lines.append(
                f"  [{position}] {schedule.direction_label:<9} "
                f"| Vehicle: {schedule.vehicle_id or 'null'}"
                f" | Route: {route}"
                f" | Time: {schedule.time}"
            )
        return "\n".join(lines)

    def release(self) -> None:
        logger.info(f"[Station destroyed] {self.name}")
