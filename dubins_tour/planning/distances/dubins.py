# dubins_tour/planning/distances/dubins.py
import math

from dubins_tour.types import Configuration
from dubins_tour.errors import InvalidInputError
from dubins_tour.planning.dubins_path import shortest_path
from .base import DistanceOracle


def dubins_distance(start: Configuration, goal: Configuration, turning_radius: float) -> float:
    """最短 Dubins 路径长度 (函数形式)"""
    return shortest_path(start, goal, turning_radius).length()


class DubinsDistance(DistanceOracle):
    """
    Dubins 曲线距离 (只能前进、最小转弯半径受限)
    在 LSL/LSR/RSL/RSR/RLR/LRL 六种路径中取最短。非对称。
    """
    def __init__(self, turning_radius: float):
        # [关键] 半径在这里注入，并在构造时校验，cost() 本身不会失败
        if not (math.isfinite(turning_radius) and turning_radius > 0.0):
            raise InvalidInputError(f"Turning radius must be a positive finite number, got {turning_radius}")
        self.radius = turning_radius

    def cost(self, start: Configuration, goal: Configuration) -> float:
        return dubins_distance(start, goal, self.radius)

    def path(self, start: Configuration, goal: Configuration):
        """返回完整的 DubinsPath，用于采样/可视化"""
        return shortest_path(start, goal, self.radius)
