import logging
import time
import os
from typing import Any, List, Tuple, Dict, Optional
from dubins_tour.planning.interfaces import IPlannerObserver

class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def record_selection(self, node: Any, cost: float): pass
    def record_leg(self, start: Any, end: Any, cost: float): pass
    def set_problem_info(self, problem_info: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录每一轮的选择和每一段路径。
    这些信息主要用于算法的比较和可视化 (Replay)。
    """
    def __init__(self):
        # 存储格式: List[Tuple[node, cost]]
        self.selections: List[Tuple[Any, float]] = []
        # 存储格式: List[Tuple[start, end, cost]]
        self.legs: List[Tuple[Any, Any, float]] = []
        self.problem_info = None

    def record_selection(self, node: Any, cost: float):
        self.selections.append((node, cost))

    def record_leg(self, start: Any, end: Any, cost: float):
        self.legs.append((start, end, cost))

    def set_problem_info(self, problem_info: Any):
        self.problem_info = problem_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只关心结果和可视化，控制台保持安静
        pass


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于详细分析一次求解为什么效果不好。
    将详细日志写入文件，同时保留实验数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/tour_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"tour_debug_{timestamp}.log")

        # 以文件名区分 Logger，同一秒内不同目录也不会共用 Handler
        self.logger = logging.getLogger(f"TourDebug_{timestamp}_{abs(hash(self.log_file))}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_selection(self, node: Any, cost: float):
        self.viz_observer.record_selection(node, cost)
        self.logger.debug(f"Selected: {getattr(node, 'node_id', node)} cost={cost:.6f}")

    def record_leg(self, start: Any, end: Any, cost: float):
        self.viz_observer.record_leg(start, end, cost)

    def set_problem_info(self, problem_info: Any):
        self.viz_observer.set_problem_info(problem_info)
        self.logger.info(f"Problem Info set: {problem_info}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # 代理属性，与 ExperimentObserver 兼容
    @property
    def selections(self): return self.viz_observer.selections
    @property
    def legs(self): return self.viz_observer.legs
    @property
    def problem_info(self): return self.viz_observer.problem_info
