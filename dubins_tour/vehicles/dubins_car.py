# dubins_tour/vehicles/dubins_car.py
import math
from typing import List

from .base import VehicleBase
from .config import DubinsVehicleConfig
from dubins_tour.types import Configuration
from dubins_tour.planning.dubins_path import DubinsPath

# 路径段字母 -> 转向方向 (+1 左转, -1 右转, 0 直行)
_TURN_DIRECTION = {"L": 1, "S": 0, "R": -1}


class DubinsCar(VehicleBase):
    def __init__(self, config: DubinsVehicleConfig):
        super().__init__(config)
        self.config: DubinsVehicleConfig = config

    @property
    def turning_radius(self) -> float:
        return self.config.turning_radius

    def kinematic_propagate(self, start_state: Configuration, control: tuple, dt: float) -> Configuration:
        """
        control = (v, turn)，turn ∈ [-1, 1] 是相对最大曲率的比例。
        精确积分 (圆弧/直线)，没有欧拉误差。
        """
        v, turn = control
        turn = max(min(turn, 1.0), -1.0)

        ds = v * dt
        kappa = turn * self.config.max_curvature
        theta = start_state.theta_rad

        if abs(kappa) < 1e-12:
            new_x = start_state.x + ds * math.cos(theta)
            new_y = start_state.y + ds * math.sin(theta)
            new_theta = theta
        else:
            new_theta = theta + kappa * ds
            new_x = start_state.x + (math.sin(new_theta) - math.sin(theta)) / kappa
            new_y = start_state.y - (math.cos(new_theta) - math.cos(theta)) / kappa

        return Configuration(new_x, new_y, self.normalize_angle(new_theta))

    def follow(self, path: DubinsPath, dt: float = 0.05) -> List[Configuration]:
        """
        按 DubinsPath 的三段控制量推演整条轨迹。
        用于验证解析解确实能到达目标位姿。
        """
        v = self.config.velocity
        trajectory = [path.start]
        current = path.start

        for i, kind in enumerate(path.path_type.segments):
            seg_len = path.segment_length(i)
            if seg_len <= 0.0:
                continue
            seg_time = seg_len / v
            steps = max(int(math.ceil(seg_time / dt)), 1)
            step_dt = seg_time / steps
            for _ in range(steps):
                current = self.kinematic_propagate(current, (v, _TURN_DIRECTION[kind]), step_dt)
                trajectory.append(current)

        return trajectory
