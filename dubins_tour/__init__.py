# dubins_tour/__init__.py

from .types import Configuration, Node, TourResult
from .errors import InvalidInputError, NotFoundError, GraphLoadError
from .planning.distances import DubinsDistance, EuclideanDistance, dubins_distance
from .planning.candidate_set import CandidateSet
from .planning.planners import NearestNeighborPlanner, build_tour

__all__ = [
    "Configuration",
    "Node",
    "TourResult",
    "InvalidInputError",
    "NotFoundError",
    "GraphLoadError",
    "DubinsDistance",
    "EuclideanDistance",
    "dubins_distance",
    "CandidateSet",
    "NearestNeighborPlanner",
    "build_tour",
]
