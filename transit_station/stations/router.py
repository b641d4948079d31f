from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from transit_station.network.dependencies import get_network
from transit_station.network.service import TransitNetwork
from transit_station.schedules.schemas import Schedule
from transit_station.stations.models import Station
from transit_station.stations.schemas import (
    StationCreate, StationInfo, ScheduleCreate, ScheduleEntry
)

router = APIRouter()

def schedule_to_entry(position: int, schedule: Schedule) -> ScheduleEntry:
    return ScheduleEntry(
        position=position,
        direction=schedule.direction_label.lower(),
        vehicle_id=schedule.vehicle_id,
        route=schedule.vehicle.route if schedule.vehicle is not None else None,
        time=schedule.time
    )

def station_to_info(station: Station) -> StationInfo:
    entries = [
        schedule_to_entry(position, schedule)
        for position, schedule in enumerate(station.schedules, start=1)
    ]
    return StationInfo(
        name=station.name,
        location=station.location,
        station_type=station.station_type,
        max_schedules=station.max_schedules,
        schedules=entries
    )

def _get_station_or_404(network: TransitNetwork, name: str) -> Station:
    try:
        return network.get_station(name)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.get("/", response_model=List[StationInfo])
def list_stations(network: TransitNetwork = Depends(get_network)):
    """List stations with their schedules"""
    return [station_to_info(s) for s in network.stations.values()]

@router.post("/", response_model=StationInfo, status_code=status.HTTP_201_CREATED)
def create_station(data: StationCreate, network: TransitNetwork = Depends(get_network)):
    if data.name in network.stations:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Station {data.name} already exists"
        )
    station = network.add_station(Station(
        name=data.name,
        location=data.location,
        station_type=data.station_type
    ))
    return station_to_info(station)

@router.get("/{name}", response_model=StationInfo)
def get_station(name: str, network: TransitNetwork = Depends(get_network)):
    return station_to_info(_get_station_or_404(network, name))

@router.post("/{name}/schedules", response_model=StationInfo, status_code=status.HTTP_201_CREATED)
def add_schedule(name: str, data: ScheduleCreate, network: TransitNetwork = Depends(get_network)):
    """Schedule a registered vehicle at the station"""
    station = _get_station_or_404(network, name)
    try:
        vehicle = network.get_vehicle(data.vehicle_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if not station.add_schedule(vehicle, data.time, data.is_arrival):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Station {name} cannot accept more than {station.max_schedules} schedules"
        )
    return station_to_info(station)

@router.delete("/{name}/schedules/{vehicle_id}", response_model=StationInfo)
def remove_schedule(name: str, vehicle_id: str, network: TransitNetwork = Depends(get_network)):
    """Remove the first schedule for a vehicle"""
    station = _get_station_or_404(network, name)
    if not station.remove_schedule_by_vehicle_id(vehicle_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No schedule for vehicle {vehicle_id} at {name}"
        )
    return station_to_info(station)

@router.get("/{name}/schedules/{vehicle_id}", response_model=List[ScheduleEntry])
def get_vehicle_schedules(name: str, vehicle_id: str, network: TransitNetwork = Depends(get_network)):
    """Schedules for one vehicle at the station, keeping their station positions"""
    station = _get_station_or_404(network, name)
    positions = {id(schedule): position for position, schedule in enumerate(station.schedules, start=1)}
    return [
        schedule_to_entry(positions[id(schedule)], schedule)
        for schedule in station.get_schedules_for_vehicle(vehicle_id)
    ]
