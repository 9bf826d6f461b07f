# 绘图逻辑 (Matplotlib)
import math
from typing import Optional

import matplotlib.pyplot as plt

from dubins_tour.types import Configuration, TourResult
from dubins_tour.planning.distances import DubinsDistance


class TourPlotter:
    """
    画出节点 (带航向箭头) 和 Tour 的每一段路径。
    Dubins 距离时按真实曲线采样；否则画直线。
    """
    def __init__(self, turning_radius: Optional[float] = None, sample_step: float = 0.1):
        self.oracle = DubinsDistance(turning_radius) if turning_radius is not None else None
        self.sample_step = sample_step
        self.fig, self.ax = plt.subplots(figsize=(8, 8))

    def draw(self, result: TourResult, start: Configuration, end: Configuration, title: str = ""):
        # 1. 按访问顺序串起所有位姿
        poses = [start] + [node.config for node in result.tour] + [end]

        # 2. 每一段路径
        for a, b in zip(poses[:-1], poses[1:]):
            xs, ys = self._leg_points(a, b)
            self.ax.plot(xs, ys, 'b-', linewidth=1.5, alpha=0.8)

        # 3. 节点和航向
        arrow_len = self._arrow_length(poses)
        for order, node in enumerate(result.tour, start=1):
            self._draw_pose(node.config, arrow_len, color='black')
            self.ax.annotate(f"{node.node_id} ({order})", (node.x, node.y),
                             textcoords="offset points", xytext=(4, 4), fontsize=8)

        self._draw_pose(start, arrow_len, color='green')
        self.ax.plot(start.x, start.y, 'go', markersize=8, label='Start')
        self.ax.plot(end.x, end.y, 'rx', markersize=8, label='End')

        self.ax.set_title(title or f"Tour cost {result.total_cost:.3f}")
        self.ax.set_xlabel("X [m]")
        self.ax.set_ylabel("Y [m]")
        self.ax.legend()
        self.ax.grid(True, linestyle=':', alpha=0.3)
        # 确保比例尺一致，圆弧才是圆的
        self.ax.set_aspect('equal')
        return self.ax

    def save(self, path: str, dpi: int = 150):
        self.fig.tight_layout()
        self.fig.savefig(path, dpi=dpi)

    def close(self):
        plt.close(self.fig)

    def show(self):
        plt.show()

    def _leg_points(self, a: Configuration, b: Configuration):
        if self.oracle is None:
            return [a.x, b.x], [a.y, b.y]
        samples = self.oracle.path(a, b).sample_many(self.sample_step)
        return [s.x for s in samples], [s.y for s in samples]

    def _draw_pose(self, config: Configuration, length: float, color: str):
        dx = length * math.cos(config.theta_rad)
        dy = length * math.sin(config.theta_rad)
        self.ax.arrow(config.x, config.y, dx, dy, head_width=length * 0.3,
                      length_includes_head=True, color=color)

    @staticmethod
    def _arrow_length(poses) -> float:
        xs = [p.x for p in poses]
        ys = [p.y for p in poses]
        span = max(max(xs) - min(xs), max(ys) - min(ys))
        return max(span * 0.04, 0.2)
