# [入口] 负责暴露类，让外部调用更简洁

# dubins_tour/vehicles/__init__.py

from .base import VehicleBase
from .config import VehicleConfig, DubinsVehicleConfig
from .dubins_car import DubinsCar

# 定义对外暴露的列表
__all__ = ["VehicleBase", "VehicleConfig", "DubinsVehicleConfig", "DubinsCar"]
