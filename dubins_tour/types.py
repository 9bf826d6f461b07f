# dubins_tour/types.py
import math
from dataclasses import dataclass
from typing import List, Optional, Union

NodeId = Union[int, str]

TWO_PI = 2.0 * math.pi


def mod2pi(angle: float) -> float:
    """把角度归一化到 [0, 2π)"""
    r = angle - TWO_PI * math.floor(angle / TWO_PI)
    # 极小的负数 (如 -1e-17) 相减后会舍入成恰好 2π
    if r >= TWO_PI:
        return 0.0
    return r


@dataclass(frozen=True)
class Configuration:
    """
    统一的位姿定义 (Oriented Pose)
    创建后不可修改；构造 Tour 时的 "当前位姿" 总是一个新值。
    """
    x: float             # [m]
    y: float             # [m]
    theta_rad: float     # [rad] 航向角

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.theta_rad)

    def same_pose(self, other: "Configuration") -> bool:
        """位置相同且航向 (归一化后) 相同"""
        return (self.x == other.x and self.y == other.y
                and mod2pi(self.theta_rad) == mod2pi(other.theta_rad))


@dataclass(frozen=True)
class Node:
    """图中的一个待访问节点：稳定 id + 一个 Configuration"""
    node_id: NodeId
    config: Configuration
    label: Optional[str] = None

    # 方便访问 x, y, theta
    @property
    def x(self): return self.config.x

    @property
    def y(self): return self.config.y

    @property
    def theta_rad(self): return self.config.theta_rad


@dataclass
class TourResult:
    """
    Tour 构造结果
    leg_costs 与 tour 一一对应 (第 i 段是到 tour[i] 的代价)，
    closing_cost 是最后回到终点位姿的那一段。
    """
    tour: List[Node]
    total_cost: float
    leg_costs: List[float]
    closing_cost: float

    @property
    def node_ids(self) -> List[NodeId]:
        return [node.node_id for node in self.tour]

    def __len__(self):
        return len(self.tour)
