from .service import TransitNetwork
from .dependencies import get_network

__all__ = ["TransitNetwork", "get_network"]
