from .models import Passenger
from .schemas import PassengerCreate, PassengerInfo, BookingResult

__all__ = ["Passenger", "PassengerCreate", "PassengerInfo", "BookingResult"]
