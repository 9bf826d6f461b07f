from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class IPlannerObserver(ABC):
    """
    规划器观察者接口
    用于解耦 Tour 构造算法与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录每一步的选择，用于可视化和对比
    3. Debug: 详细日志写入文件，用于问题排查
    """

    @abstractmethod
    def record_selection(self, node: Any, cost: float):
        """记录本轮被选中的下一个节点及其代价"""
        pass

    @abstractmethod
    def record_leg(self, start: Any, end: Any, cost: float):
        """记录 Tour 的一段 (位姿 -> 位姿)"""
        pass

    @abstractmethod
    def set_problem_info(self, problem_info: Any):
        """设置问题信息 (节点集合、半径等)"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据
        """
        pass
