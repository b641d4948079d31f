from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from transit_station.network.dependencies import get_network
from transit_station.network.service import TransitNetwork
from transit_station.passengers.models import Passenger
from transit_station.passengers.schemas import PassengerCreate, PassengerInfo, BookingResult
from transit_station.vehicles.models import Vehicle

router = APIRouter()

def passenger_to_info(passenger: Passenger) -> PassengerInfo:
    return PassengerInfo(
        id=passenger.id,
        name=passenger.name,
        booked_vehicle_ids=list(passenger.booked_vehicle_ids)
    )

def _lookup_or_404(network: TransitNetwork, passenger_id: str, vehicle_id: str = None):
    try:
        passenger = network.get_passenger(passenger_id)
        vehicle = network.get_vehicle(vehicle_id) if vehicle_id is not None else None
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return passenger, vehicle

def _booking_result(passenger: Passenger, vehicle: Vehicle, success: bool) -> BookingResult:
    return BookingResult(
        passenger_id=passenger.id,
        vehicle_id=vehicle.id,
        success=success,
        booked_count=vehicle.booked_count,
        capacity=vehicle.capacity
    )

@router.get("/", response_model=List[PassengerInfo])
def list_passengers(network: TransitNetwork = Depends(get_network)):
    return [passenger_to_info(p) for p in network.passengers.values()]

@router.post("/", response_model=PassengerInfo, status_code=status.HTTP_201_CREATED)
def create_passenger(data: PassengerCreate, network: TransitNetwork = Depends(get_network)):
    if data.id in network.passengers:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Passenger {data.id} already exists"
        )
    passenger = network.add_passenger(Passenger(id=data.id, name=data.name))
    return passenger_to_info(passenger)

@router.get("/{passenger_id}", response_model=PassengerInfo)
def get_passenger(passenger_id: str, network: TransitNetwork = Depends(get_network)):
    passenger, _ = _lookup_or_404(network, passenger_id)
    return passenger_to_info(passenger)

@router.post("/{passenger_id}/bookings/{vehicle_id}", response_model=BookingResult)
def book_ride(passenger_id: str, vehicle_id: str, network: TransitNetwork = Depends(get_network)):
    """Book a seat; 409 when the vehicle is full or already booked"""
    passenger, vehicle = _lookup_or_404(network, passenger_id, vehicle_id)
    if not passenger.book_ride(vehicle):
        reason = "is full" if vehicle.is_full else f"already carries {passenger.id}"
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Vehicle {vehicle.id} {reason}"
        )
    return _booking_result(passenger, vehicle, True)

@router.delete("/{passenger_id}/bookings/{vehicle_id}", response_model=BookingResult)
def cancel_ride(passenger_id: str, vehicle_id: str, network: TransitNetwork = Depends(get_network)):
    passenger, vehicle = _lookup_or_404(network, passenger_id, vehicle_id)
    if not passenger.cancel_ride(vehicle):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Passenger {passenger.id} is not booked on {vehicle.id}"
        )
    return _booking_result(passenger, vehicle, True)
