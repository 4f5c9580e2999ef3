from geoapi.api.pois import router as pois_router
from geoapi.api.zones import router as zones_router

__all__ = [
    "pois_router",
    "zones_router",
]
