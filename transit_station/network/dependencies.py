from transit_station.network.service import TransitNetwork

# Network served by the API process
network = TransitNetwork()

def get_network() -> TransitNetwork:
    """Network shared by all API requests"""
    return network
