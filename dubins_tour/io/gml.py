# dubins_tour/io/gml.py
"""
图文件读写 (GML)

节点格式 (与 OGDF 导出的 GML 一致)：
    node [ id 3 label "3" heading 1.57 graphics [ x 10.0 y 0.0 ] ]
heading 单位为弧度，可省略 (默认 0)。
"""
import os
from typing import List, Sequence

import networkx as nx
import numpy as np

from dubins_tour.types import Configuration, Node, TourResult
from dubins_tour.errors import GraphLoadError
from dubins_tour.planning.distances import DistanceOracle


def load_nodes(path: str) -> List[Node]:
    """读取 GML，返回按文件顺序排列的节点列表"""
    if not os.path.isfile(path):
        raise GraphLoadError(f"Could not open {path}")
    try:
        graph = nx.read_gml(path, label='id')
    except nx.NetworkXError as e:
        raise GraphLoadError(f"Could not open {path}") from e

    nodes = []
    for node_id, attrs in graph.nodes(data=True):
        graphics = attrs.get('graphics', {})
        try:
            x = float(graphics.get('x', attrs.get('x')))
            y = float(graphics.get('y', attrs.get('y')))
        except (TypeError, ValueError) as e:
            raise GraphLoadError(f"Could not open {path}: node {node_id!r} has no usable position") from e
        heading = float(attrs.get('heading', 0.0))
        label = attrs.get('label')
        nodes.append(Node(node_id, Configuration(x, y, heading),
                          label=str(label) if label is not None else None))
    return nodes


def format_tour(result: TourResult) -> str:
    """"<id> -> <id> -> ... -> <id>" """
    return " -> ".join(str(node_id) for node_id in result.node_ids)


def write_tour_gml(result: TourResult, path: str):
    """把 Tour 写回 GML：一条有向路径，边上带 cost"""
    graph = nx.DiGraph()
    for order, node in enumerate(result.tour):
        graph.add_node(str(node.node_id),
                       order=order,
                       heading=float(node.theta_rad),
                       graphics={'x': float(node.x), 'y': float(node.y)})
    for (a, b), cost in zip(zip(result.tour[:-1], result.tour[1:]), result.leg_costs[1:]):
        graph.add_edge(str(a.node_id), str(b.node_id), cost=float(cost))
    graph.graph['total_cost'] = float(result.total_cost)
    nx.write_gml(graph, path)


def write_cost_matrix(oracle: DistanceOracle, nodes: Sequence[Node], path: str):
    """写出完整 ATSP 代价矩阵 (CSV)，行列顺序与 nodes 一致"""
    matrix = oracle.matrix([node.config for node in nodes])
    header = ",".join(str(node.node_id) for node in nodes)
    np.savetxt(path, matrix, delimiter=",", header=header, comments="")
    return matrix
