# dubins_tour/planning/dubins_path.py
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from dubins_tour.types import Configuration, mod2pi
from dubins_tour.errors import InvalidInputError

# p^2 在理论上为 0 时，浮点计算可能得到 -1e-16，视为可行
_FEASIBILITY_TOL = 1e-10


class DubinsPathType(Enum):
    """
    六种 Dubins 路径 (Word)。
    顺序即比较顺序：长度完全相同时，靠前的类型胜出。
    """
    LSL = ("L", "S", "L")
    LSR = ("L", "S", "R")
    RSL = ("R", "S", "L")
    RSR = ("R", "S", "R")
    RLR = ("R", "L", "R")
    LRL = ("L", "R", "L")

    @property
    def segments(self) -> Tuple[str, str, str]:
        return self.value


@dataclass(frozen=True)
class _Normalized:
    """
    Problem reduced to the canonical frame: start at the origin, goal on the
    positive x axis, distances divided by the turning radius.
    """
    alpha: float
    beta: float
    d: float
    sa: float
    sb: float
    ca: float
    cb: float
    c_ab: float


@dataclass(frozen=True)
class DubinsPath:
    """
    一条确定的 Dubins 路径
    params 是三段的归一化长度 (弧段为转角 [rad]，直线段为 长度/半径)。
    """
    start: Configuration
    turning_radius: float
    path_type: DubinsPathType
    params: Tuple[float, float, float]

    def length(self) -> float:
        return sum(self.params) * self.turning_radius

    def segment_length(self, i: int) -> float:
        return self.params[i] * self.turning_radius

    def segment_length_normalized(self, i: int) -> float:
        return self.params[i]

    def sample(self, t: float) -> Configuration:
        """
        Pose reached after travelling arc length t along the path.

        Raises:
            InvalidInputError: t outside [0, length].
        """
        total = self.length()
        if t < 0.0 or t > total:
            raise InvalidInputError(f"Sample distance {t} is outside [0, {total}]")

        # 在归一化坐标系里推进 (原点出发，半径为 1)
        tprime = t / self.turning_radius
        qi = (0.0, 0.0, self.start.theta_rad)
        p1, p2 = self.params[0], self.params[1]
        kinds = self.path_type.segments

        q1 = _segment(p1, qi, kinds[0])
        q2 = _segment(p2, q1, kinds[1])
        if tprime < p1:
            q = _segment(tprime, qi, kinds[0])
        elif tprime < p1 + p2:
            q = _segment(tprime - p1, q1, kinds[1])
        else:
            q = _segment(tprime - p1 - p2, q2, kinds[2])

        return Configuration(
            q[0] * self.turning_radius + self.start.x,
            q[1] * self.turning_radius + self.start.y,
            mod2pi(q[2]),
        )

    def sample_many(self, step: float) -> List[Configuration]:
        """按固定弧长步进采样整条路径，末尾总是包含终点"""
        if step <= 0.0:
            raise InvalidInputError(f"Sample step must be positive, got {step}")
        total = self.length()
        samples = []
        t = 0.0
        while t < total:
            samples.append(self.sample(t))
            t += step
        samples.append(self.endpoint())
        return samples

    def endpoint(self) -> Configuration:
        return self.sample(self.length())


def _segment(t: float, qi: Tuple[float, float, float], kind: str) -> Tuple[float, float, float]:
    """单位半径下，沿一段 L / S / R 前进 t"""
    x, y, th = qi
    if kind == "L":
        return (x + math.sin(th + t) - math.sin(th),
                y - math.cos(th + t) + math.cos(th),
                th + t)
    if kind == "R":
        return (x - math.sin(th - t) + math.sin(th),
                y + math.cos(th - t) - math.cos(th),
                th - t)
    return (x + math.cos(th) * t, y + math.sin(th) * t, th)


def _normalize(start: Configuration, goal: Configuration, turning_radius: float) -> _Normalized:
    dx = goal.x - start.x
    dy = goal.y - start.y
    d = math.hypot(dx, dy) / turning_radius

    theta = mod2pi(math.atan2(dy, dx)) if d > 0 else 0.0
    alpha = mod2pi(start.theta_rad - theta)
    beta = mod2pi(goal.theta_rad - theta)

    return _Normalized(
        alpha=alpha, beta=beta, d=d,
        sa=math.sin(alpha), sb=math.sin(beta),
        ca=math.cos(alpha), cb=math.cos(beta),
        c_ab=math.cos(alpha - beta),
    )


def _sqrt_feasible(p_sq: float) -> Optional[float]:
    if p_sq < -_FEASIBILITY_TOL:
        return None
    return math.sqrt(max(p_sq, 0.0))


def _lsl(n: _Normalized) -> Optional[Tuple[float, float, float]]:
    tmp0 = n.d + n.sa - n.sb
    p = _sqrt_feasible(2.0 + n.d * n.d - 2.0 * n.c_ab + 2.0 * n.d * (n.sa - n.sb))
    if p is None:
        return None
    tmp1 = math.atan2(n.cb - n.ca, tmp0)
    return mod2pi(tmp1 - n.alpha), p, mod2pi(n.beta - tmp1)


def _rsr(n: _Normalized) -> Optional[Tuple[float, float, float]]:
    tmp0 = n.d - n.sa + n.sb
    p = _sqrt_feasible(2.0 + n.d * n.d - 2.0 * n.c_ab + 2.0 * n.d * (n.sb - n.sa))
    if p is None:
        return None
    tmp1 = math.atan2(n.ca - n.cb, tmp0)
    return mod2pi(n.alpha - tmp1), p, mod2pi(tmp1 - n.beta)


def _lsr(n: _Normalized) -> Optional[Tuple[float, float, float]]:
    p = _sqrt_feasible(-2.0 + n.d * n.d + 2.0 * n.c_ab + 2.0 * n.d * (n.sa + n.sb))
    if p is None:
        return None
    tmp0 = math.atan2(-n.ca - n.cb, n.d + n.sa + n.sb) - math.atan2(-2.0, p)
    return mod2pi(tmp0 - n.alpha), p, mod2pi(tmp0 - n.beta)


def _rsl(n: _Normalized) -> Optional[Tuple[float, float, float]]:
    p = _sqrt_feasible(-2.0 + n.d * n.d + 2.0 * n.c_ab - 2.0 * n.d * (n.sa + n.sb))
    if p is None:
        return None
    tmp0 = math.atan2(n.ca + n.cb, n.d - n.sa - n.sb) - math.atan2(2.0, p)
    return mod2pi(n.alpha - tmp0), p, mod2pi(n.beta - tmp0)


def _rlr(n: _Normalized) -> Optional[Tuple[float, float, float]]:
    tmp0 = (6.0 - n.d * n.d + 2.0 * n.c_ab + 2.0 * n.d * (n.sa - n.sb)) / 8.0
    if abs(tmp0) > 1.0:
        return None
    phi = math.acos(tmp0)
    p = mod2pi(2.0 * math.pi - phi)
    t = mod2pi(n.alpha - math.atan2(n.ca - n.cb, n.d - n.sa + n.sb) + p / 2.0)
    return t, p, mod2pi(n.alpha - n.beta - t + p)


def _lrl(n: _Normalized) -> Optional[Tuple[float, float, float]]:
    tmp0 = (6.0 - n.d * n.d + 2.0 * n.c_ab + 2.0 * n.d * (n.sb - n.sa)) / 8.0
    if abs(tmp0) > 1.0:
        return None
    phi = math.acos(tmp0)
    p = mod2pi(2.0 * math.pi - phi)
    t = mod2pi(-n.alpha - math.atan2(n.ca - n.cb, n.d + n.sa - n.sb) + p / 2.0)
    return t, p, mod2pi(n.beta - n.alpha - t + p)


_SOLVERS = {
    DubinsPathType.LSL: _lsl,
    DubinsPathType.LSR: _lsr,
    DubinsPathType.RSL: _rsl,
    DubinsPathType.RSR: _rsr,
    DubinsPathType.RLR: _rlr,
    DubinsPathType.LRL: _lrl,
}


def _check_radius(turning_radius: float):
    if not (math.isfinite(turning_radius) and turning_radius > 0.0):
        raise InvalidInputError(f"Turning radius must be a positive finite number, got {turning_radius}")


def path_of_type(start: Configuration,
                 goal: Configuration,
                 turning_radius: float,
                 path_type: DubinsPathType) -> Optional[DubinsPath]:
    """指定类型的 Dubins 路径；该类型在当前几何下不可行时返回 None"""
    _check_radius(turning_radius)
    params = _SOLVERS[path_type](_normalize(start, goal, turning_radius))
    if params is None:
        return None
    return DubinsPath(start, turning_radius, path_type, params)


def all_paths(start: Configuration,
              goal: Configuration,
              turning_radius: float) -> Dict[DubinsPathType, DubinsPath]:
    """所有可行的路径类型，按 DubinsPathType 的声明顺序"""
    _check_radius(turning_radius)
    n = _normalize(start, goal, turning_radius)
    paths = {}
    for path_type, solver in _SOLVERS.items():
        params = solver(n)
        if params is not None:
            paths[path_type] = DubinsPath(start, turning_radius, path_type, params)
    return paths


def shortest_path(start: Configuration,
                  goal: Configuration,
                  turning_radius: float) -> DubinsPath:
    """
    Shortest Dubins path from start to goal.

    The six words are evaluated in declaration order and compared with a plain
    `<`, so on an exact tie the earlier word is kept. Identical poses yield a
    zero-length path.
    """
    _check_radius(turning_radius)
    if start.same_pose(goal):
        return DubinsPath(start, turning_radius, DubinsPathType.LSL, (0.0, 0.0, 0.0))

    best = None
    best_cost = math.inf
    for path in all_paths(start, goal, turning_radius).values():
        cost = sum(path.params)
        if cost < best_cost:
            best_cost = cost
            best = path

    # 至少 CSC 中总有一种可行，这里不会是 None
    return best
