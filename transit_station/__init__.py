"""
Public Transportation Station Management System

In-memory model of a small transit domain: vehicles (standard and express),
stations with a bounded list of arrival/departure schedules, and passengers
booking rides.

Key Components:
- vehicles: Vehicle and ExpressBus entities with capacity-checked bookings
- passengers: Passenger entity and its booking history
- schedules: immutable Schedule values owned by stations
- stations: Station entity enforcing the schedule limit
- network: TransitNetwork registry tying identifiers to entities
- main.py: FastAPI application over a single network
- demo.py: console demonstration routine
"""

__version__ = "1.0.0"
