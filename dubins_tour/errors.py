# dubins_tour/errors.py


class InvalidInputError(ValueError):
    """
    调用方给出的输入不合法：
    空节点集合、非正转弯半径、非有限的坐标/航向、重复的节点 id。
    """


class NotFoundError(LookupError):
    """CandidateSet 内部一致性错误：删除了一个不存在的节点"""


class GraphLoadError(IOError):
    """图文件无法读取或格式不符"""
