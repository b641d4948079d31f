import pytest
from fastapi.testclient import TestClient

from transit_station.main import app
from transit_station.network.dependencies import get_network
from transit_station.network.service import TransitNetwork
from transit_station.passengers.models import Passenger
from transit_station.stations.models import Station
from transit_station.vehicles.models import ExpressBus, Vehicle


@pytest.fixture
def bus():
    return Vehicle(id="BUS101", route="A->B", capacity=2, speed=45.0)


@pytest.fixture
def express():
    return ExpressBus(id="EXP301", route="X->Y Express", capacity=4, speed=80.0, stops_count=3)


@pytest.fixture
def station():
    return Station(name="Downtown Bus Hub", location="12 Main St", station_type="bus")


@pytest.fixture
def alice():
    return Passenger(id="P100", name="Alice")


@pytest.fixture
def bob():
    return Passenger(id="P101", name="Bob")


@pytest.fixture
def carol():
    return Passenger(id="P102", name="Carol")


@pytest.fixture
def network():
    return TransitNetwork()


@pytest.fixture
def client(network):
    app.dependency_overrides[get_network] = lambda: network
    yield TestClient(app)
    app.dependency_overrides.clear()
