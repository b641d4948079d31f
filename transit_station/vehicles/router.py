from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List

from transit_station.network.dependencies import get_network
from transit_station.network.service import TransitNetwork
from transit_station.passengers.router import passenger_to_info
from transit_station.passengers.schemas import PassengerInfo
from transit_station.stations.router import station_to_info
from transit_station.stations.schemas import StationInfo
from transit_station.vehicles.models import Vehicle, TRAVEL_TIME_UNDEFINED, build_vehicle
from transit_station.vehicles.schemas import (
    VehicleCreate, VehicleInfo, VehicleStatusUpdate, TravelTimeResponse
)

router = APIRouter()

def vehicle_to_info(vehicle: Vehicle) -> VehicleInfo:
    return VehicleInfo(
        id=vehicle.id,
        route=vehicle.route,
        vehicle_type=vehicle.vehicle_type,
        capacity=vehicle.capacity,
        speed=vehicle.speed,
        on_time=vehicle.on_time,
        booked_count=vehicle.booked_count,
        booked_passenger_ids=list(vehicle.booked_passenger_ids),
        assigned_station_id=vehicle.get_assigned_station(),
        stops_count=getattr(vehicle, "stops_count", None)
    )

def _get_vehicle_or_404(network: TransitNetwork, vehicle_id: str) -> Vehicle:
    try:
        return network.get_vehicle(vehicle_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.get("/", response_model=List[VehicleInfo])
def list_vehicles(network: TransitNetwork = Depends(get_network)):
    """List registered vehicles"""
    return [vehicle_to_info(v) for v in network.vehicles.values()]

@router.post("/", response_model=VehicleInfo, status_code=status.HTTP_201_CREATED)
def create_vehicle(data: VehicleCreate, network: TransitNetwork = Depends(get_network)):
    """Register a standard or express vehicle"""
    if data.id in network.vehicles:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Vehicle {data.id} already exists"
        )
    vehicle = network.add_vehicle(build_vehicle(data))
    return vehicle_to_info(vehicle)

@router.get("/{vehicle_id}", response_model=VehicleInfo)
def get_vehicle(vehicle_id: str, network: TransitNetwork = Depends(get_network)):
    return vehicle_to_info(_get_vehicle_or_404(network, vehicle_id))

@router.get("/{vehicle_id}/travel-time", response_model=TravelTimeResponse)
def get_travel_time(
    vehicle_id: str,
    distance_km: float = Query(..., ge=0, description="Distance in kilometers"),
    network: TransitNetwork = Depends(get_network)
):
    """Travel time in hours; null when the vehicle's speed is not positive"""
    vehicle = _get_vehicle_or_404(network, vehicle_id)
    hours = vehicle.calculate_travel_time(distance_km)
    return TravelTimeResponse(
        vehicle_id=vehicle.id,
        distance_km=distance_km,
        travel_time_hours=None if hours == TRAVEL_TIME_UNDEFINED else hours
    )

@router.patch("/{vehicle_id}/status", response_model=VehicleInfo)
def update_vehicle_status(
    vehicle_id: str,
    update: VehicleStatusUpdate,
    network: TransitNetwork = Depends(get_network)
):
    vehicle = _get_vehicle_or_404(network, vehicle_id)
    vehicle.set_status(update.on_time)
    return vehicle_to_info(vehicle)

@router.get("/{vehicle_id}/assigned-station", response_model=StationInfo)
def get_assigned_station(vehicle_id: str, network: TransitNetwork = Depends(get_network)):
    """Station the vehicle was most recently scheduled at"""
    _get_vehicle_or_404(network, vehicle_id)
    station = network.get_assigned_station(vehicle_id)
    if station is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Vehicle {vehicle_id} is not assigned to a station"
        )
    return station_to_info(station)

@router.get("/{vehicle_id}/passengers", response_model=List[PassengerInfo])
def get_booked_passengers(vehicle_id: str, network: TransitNetwork = Depends(get_network)):
    """Registered passengers booked on the vehicle, in booking order"""
    _get_vehicle_or_404(network, vehicle_id)
    return [passenger_to_info(p) for p in network.get_booked_passengers(vehicle_id)]
