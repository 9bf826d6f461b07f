# dubins_tour/planning/planners/nearest_neighbor.py
import math
from typing import List, Optional, Sequence

from dubins_tour.types import Configuration, Node, TourResult
from dubins_tour.errors import InvalidInputError
from dubins_tour.planning.planners.base import TourPlannerBase
from dubins_tour.planning.candidate_set import CandidateSet
from dubins_tour.planning.distances import DistanceOracle, DubinsDistance
from dubins_tour.planning.interfaces import IPlannerObserver
from dubins_tour.visualization.observers import EfficientObserver


class NearestNeighborPlanner(TourPlannerBase):
    """
    最近邻 ATSP 构造启发式。

    工作流程：
    1. 用全部节点初始化 CandidateSet，当前位姿 = start。
    2. 每轮扫描所有剩余节点，用 DistanceOracle 计算 当前位姿 -> 节点 的代价。
    3. 选代价严格最小的节点 (平局时取扫描顺序中第一个，即输入顺序靠前者)。
    4. 加入 Tour，累加代价，从集合中删除，当前位姿更新为该节点的位姿。
    5. 集合为空后，加上回到 end 的代价。

    贪心构造，不保证全局最优；复杂度 O(n^2) 次代价计算。
    """

    def __init__(self, distance_oracle: DistanceOracle):
        self.oracle = distance_oracle

    def plan(self,
             nodes: Sequence[Node],
             start: Configuration,
             end: Configuration,
             debugger: Optional[IPlannerObserver] = None) -> TourResult:

        # 1. 初始化观察者
        if debugger is None:
            debugger = EfficientObserver()

        nodes = list(nodes)
        self._validate(nodes, start, end)
        candidates = CandidateSet(nodes)
        debugger.set_problem_info({'num_nodes': len(candidates), 'start': start, 'end': end})
        debugger.log(f"Start solving over {len(candidates)} nodes", level='INFO',
                     payload={'oracle': type(self.oracle).__name__})
        for node in nodes:
            debugger.log(f"Node {node.node_id}: {node.config}", level='DEBUG')

        # 2. 主循环
        current = start
        total_cost = 0.0
        tour: List[Node] = []
        leg_costs: List[float] = []

        while not candidates.is_empty():
            best_node, best_cost = self._find_nearest(candidates, current)

            tour.append(best_node)
            leg_costs.append(best_cost)
            total_cost += best_cost
            candidates.remove(best_node)

            # --- [Vis] 记录本轮选择 ---
            debugger.record_selection(best_node, best_cost)
            debugger.record_leg(current, best_node.config, best_cost)

            current = best_node.config

        # 3. 回到终点位姿
        closing_cost = self.oracle.cost(current, end)
        total_cost += closing_cost
        debugger.record_leg(current, end, closing_cost)
        debugger.log(f"Finished solving with cost {total_cost}", level='INFO',
                     payload={'closing_cost': closing_cost})

        return TourResult(tour=tour, total_cost=total_cost,
                          leg_costs=leg_costs, closing_cost=closing_cost)

    def _find_nearest(self, candidates: CandidateSet, current: Configuration):
        """扫描一轮剩余节点，返回 (代价最小的节点, 代价)"""
        best_node = None
        best_cost = math.inf
        for node in candidates.for_each_remaining():
            cost = self.oracle.cost(current, node.config)
            # 严格小于：平局保留先扫描到的节点
            if cost < best_cost:
                best_cost = cost
                best_node = node
        return best_node, best_cost

    def _validate(self, nodes: Sequence[Node], start: Configuration, end: Configuration):
        if not start.is_finite() or not end.is_finite():
            raise InvalidInputError("Start and end configurations must be finite")
        for node in nodes:
            if not node.config.is_finite():
                raise InvalidInputError(f"Node {node.node_id!r} has a non-finite configuration")


def build_tour(nodes: Sequence[Node],
               start: Configuration,
               end: Configuration,
               turning_radius: float,
               debugger: Optional[IPlannerObserver] = None) -> TourResult:
    """用 Dubins 距离构造最近邻 Tour 的便捷入口"""
    planner = NearestNeighborPlanner(DubinsDistance(turning_radius))
    return planner.plan(nodes, start, end, debugger)
