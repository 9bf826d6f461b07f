# dubins_tour/planning/distances/base.py
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from dubins_tour.types import Configuration


class DistanceOracle(ABC):
    """
    距离预言机 (Strategy Interface)
    给定两个位姿，返回有向的行驶代价。依赖的参数 (如转弯半径) 在构造时注入，
    Planner 不需要知道它们的存在。
    """
    @abstractmethod
    def cost(self, start: Configuration, goal: Configuration) -> float:
        """
        :param start: 出发位姿
        :param goal: 到达位姿
        :return: 代价 (必须 >= 0)，一般情况下 cost(a, b) != cost(b, a)
        """
        pass

    def matrix(self, configs: Sequence[Configuration]) -> np.ndarray:
        """完整的 ATSP 代价矩阵，M[i, j] = cost(configs[i], configs[j])，对角线为 0"""
        n = len(configs)
        m = np.zeros((n, n), dtype=float)
        for i, a in enumerate(configs):
            for j, b in enumerate(configs):
                if i != j:
                    m[i, j] = self.cost(a, b)
        return m
