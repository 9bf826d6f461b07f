# dubins_tour/planning/candidate_set.py
from typing import Dict, Iterable, Iterator

from dubins_tour.types import Node, NodeId
from dubins_tour.errors import InvalidInputError, NotFoundError


class CandidateSet:
    """
    尚未访问的节点集合 (只减不增)。
    以 node_id 为键，保持插入顺序，所以每次扫描的顺序都是输入顺序，
    这也是最近邻选择时打破平局的依据。
    """
    def __init__(self, nodes: Iterable[Node] = None):
        self._remaining: Dict[NodeId, Node] = {}
        if nodes is not None:
            self.initialize(nodes)

    def initialize(self, nodes: Iterable[Node]):
        remaining: Dict[NodeId, Node] = {}
        for node in nodes:
            if node.node_id in remaining:
                raise InvalidInputError(f"Duplicate node id: {node.node_id!r}")
            remaining[node.node_id] = node
        if not remaining:
            raise InvalidInputError("Cannot build a tour over an empty node set")
        self._remaining = remaining

    def is_empty(self) -> bool:
        return not self._remaining

    def remove(self, node: Node):
        if node.node_id not in self._remaining:
            raise NotFoundError(f"Node {node.node_id!r} is not in the candidate set")
        del self._remaining[node.node_id]

    def for_each_remaining(self) -> Iterator[Node]:
        # 先拍快照：扫描过程中即使集合被修改，本次扫描也不受影响
        return iter(list(self._remaining.values()))

    def __len__(self):
        return len(self._remaining)

    def __contains__(self, node: Node) -> bool:
        return node.node_id in self._remaining
