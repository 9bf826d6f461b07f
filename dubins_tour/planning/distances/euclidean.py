# dubins_tour/planning/distances/euclidean.py
import math
from dubins_tour.types import Configuration
from .base import DistanceOracle

class EuclideanDistance(DistanceOracle):
    """
    欧氏距离 (忽略航向)
    适用于：
    1. 质点模型，或对转弯半径不敏感的粗略估计
    2. 只比较平面直线距离的最近邻构造
    对称，且是 Dubins 距离的下界。
    """
    def cost(self, start: Configuration, goal: Configuration) -> float:
        return math.hypot(start.x - goal.x, start.y - goal.y)
