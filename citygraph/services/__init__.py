"""Services layer - Application services wiring ports to the graph core."""

from .nearby_service import NearbyCitiesService

__all__ = ["NearbyCitiesService"]
