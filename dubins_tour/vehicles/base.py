# dubins_tour/vehicles/base.py
from abc import ABC, abstractmethod
from .config import VehicleConfig
import math
from dubins_tour.types import Configuration



class VehicleBase(ABC):
    """
    车辆接口基类
    """
    def __init__(self, config: VehicleConfig):
        self.config = config


    @abstractmethod
    def kinematic_propagate(self, start: Configuration, control: tuple, dt: float) -> Configuration:
        """核心物理推演，留给子类实现"""
        pass

    @staticmethod
    def normalize_angle(angle: float) -> float:
        """工具函数：归一化到 [-π, π)"""
        return (angle + math.pi) % (2 * math.pi) - math.pi
