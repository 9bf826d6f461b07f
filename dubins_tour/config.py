# dubins_tour/config.py
# [关键] 全局配置定义
from dataclasses import dataclass, field
from typing import Optional

from dubins_tour.types import Configuration
from dubins_tour.planning.distances import DistanceOracle, DubinsDistance, EuclideanDistance


@dataclass
class TourConfig:
    turning_radius: float = 1.0
    start: Configuration = field(default_factory=lambda: Configuration(0.0, 0.0, 0.0))
    end: Optional[Configuration] = None   # None 表示回到起点位姿
    distance: str = "dubins"              # 'dubins' | 'euclidean'
    debug_mode: bool = False
    log_dir: str = "logs/tour_debug"
    sample_step: float = 0.1              # 画图时 Dubins 路径的采样步长 [m]

    @property
    def end_config(self) -> Configuration:
        # Configuration 是不可变值，直接复用起点即等价于拷贝
        return self.start if self.end is None else self.end

    def make_oracle(self) -> DistanceOracle:
        if self.distance == "dubins":
            return DubinsDistance(self.turning_radius)
        if self.distance == "euclidean":
            return EuclideanDistance()
        raise ValueError(f"Unknown distance oracle: {self.distance}")
