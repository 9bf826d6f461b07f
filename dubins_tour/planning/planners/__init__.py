# dubins_tour/planning/planners/__init__.py

from .base import TourPlannerBase
from .nearest_neighbor import NearestNeighborPlanner, build_tour



__all__ = [
    "TourPlannerBase",
    "NearestNeighborPlanner",
    "build_tour",
]
