# dubins_tour/planning/distances/__init__.py

from .base import DistanceOracle
from .euclidean import EuclideanDistance
from .dubins import DubinsDistance, dubins_distance


__all__ = [
    "DistanceOracle",
    "EuclideanDistance",
    "DubinsDistance",
    "dubins_distance",
]
