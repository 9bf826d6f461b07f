# [配置] 该模块独有的配置数据类
from dataclasses import dataclass, field
from typing import Optional
import math

from dubins_tour.errors import InvalidInputError

@dataclass
class VehicleConfig:
    """所有车辆通用的配置"""
    velocity: float = 1.0   # [m/s] 恒定前进速度

@dataclass
class DubinsVehicleConfig(VehicleConfig):
    """
    Dubins 车辆配置 (只能前进，转弯半径有下界)
    可以直接给出最小转弯半径；不给时按自行车模型由轴距和最大转向角推出：
        R = wheelbase / tan(max_steer)
    """
    turning_radius: Optional[float] = None  # [m] 最小转弯半径

    # --- 自行车模型参数 (仅在未给出 turning_radius 时使用) ---
    wheelbase: float = 2.5       # [m] 轴距
    max_steer_deg: float = 35.0  # [deg] 最大转向角

    # --- 派生属性 (自动计算，外部只读) ---
    max_steer: float = field(init=False)
    max_curvature: float = field(init=False)

    def __post_init__(self):
        self.max_steer = math.radians(self.max_steer_deg)

        if self.turning_radius is None:
            if not (0.0 < self.max_steer < math.pi / 2) or self.wheelbase <= 0.0:
                raise InvalidInputError(
                    f"Cannot derive a turning radius from wheelbase={self.wheelbase}, "
                    f"max_steer_deg={self.max_steer_deg}")
            self.turning_radius = self.wheelbase / math.tan(self.max_steer)

        if not (math.isfinite(self.turning_radius) and self.turning_radius > 0.0):
            raise InvalidInputError(f"Turning radius must be a positive finite number, got {self.turning_radius}")

        self.max_curvature = 1.0 / self.turning_radius
