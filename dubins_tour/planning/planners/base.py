# dubins_tour/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from dubins_tour.types import Configuration, Node, TourResult
from dubins_tour.planning.interfaces import IPlannerObserver

class TourPlannerBase(ABC):
    """
    所有 Tour 构造器的抽象基类
    """

    @abstractmethod
    def plan(self,
             nodes: Sequence[Node],
             start: Configuration,
             end: Configuration,
             debugger: Optional[IPlannerObserver] = None) -> TourResult:
        """
        构造一条从 start 出发、访问每个节点恰好一次、回到 end 的 Tour
        :param nodes: 待访问节点 (任何带 node_id 和 config 的对象)
        :param start: 出发位姿
        :param end: 结束位姿
        :param debugger: 观察者钩子 (用于日志/可视化)
        :return: TourResult
        """
        pass
