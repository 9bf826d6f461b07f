# tests/planning/test_distances.py
import sys
import os
import math
import random
import numpy as np
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from dubins_tour.types import Configuration, mod2pi
from dubins_tour.errors import InvalidInputError
from dubins_tour.planning.distances import DubinsDistance, EuclideanDistance, dubins_distance


# --- 独立的几何参考实现 (切线法，只算 CSC 四种) ---
# 当两点距离 > 7R 时 CCC 不可行，CSC 的最小值就是 Dubins 距离

def _left_center(q, r):
    return q.x - r * math.sin(q.theta_rad), q.y + r * math.cos(q.theta_rad)

def _right_center(q, r):
    return q.x + r * math.sin(q.theta_rad), q.y - r * math.cos(q.theta_rad)

def reference_csc_length(a, b, r):
    candidates = []

    # LSL
    c1, c2 = _left_center(a, r), _left_center(b, r)
    vx, vy = c2[0] - c1[0], c2[1] - c1[1]
    phi = math.atan2(vy, vx)
    candidates.append(r * mod2pi(phi - a.theta_rad) + math.hypot(vx, vy) + r * mod2pi(b.theta_rad - phi))

    # RSR
    c1, c2 = _right_center(a, r), _right_center(b, r)
    vx, vy = c2[0] - c1[0], c2[1] - c1[1]
    phi = math.atan2(vy, vx)
    candidates.append(r * mod2pi(a.theta_rad - phi) + math.hypot(vx, vy) + r * mod2pi(phi - b.theta_rad))

    # LSR
    c1, c2 = _left_center(a, r), _right_center(b, r)
    vx, vy = c2[0] - c1[0], c2[1] - c1[1]
    dist = math.hypot(vx, vy)
    if dist >= 2 * r:
        straight = math.sqrt(dist * dist - 4 * r * r)
        phi = math.atan2(vy, vx) + math.atan2(2 * r, straight)
        candidates.append(r * mod2pi(phi - a.theta_rad) + straight + r * mod2pi(phi - b.theta_rad))

    # RSL
    c1, c2 = _right_center(a, r), _left_center(b, r)
    vx, vy = c2[0] - c1[0], c2[1] - c1[1]
    dist = math.hypot(vx, vy)
    if dist >= 2 * r:
        straight = math.sqrt(dist * dist - 4 * r * r)
        phi = math.atan2(vy, vx) - math.atan2(2 * r, straight)
        candidates.append(r * mod2pi(a.theta_rad - phi) + straight + r * mod2pi(b.theta_rad - phi))

    return min(candidates)


def far_random_pairs(count, seed, radius):
    rng = random.Random(seed)
    pairs = []
    while len(pairs) < count:
        a = Configuration(rng.uniform(-30, 30), rng.uniform(-30, 30), rng.uniform(0, 2 * math.pi))
        b = Configuration(rng.uniform(-30, 30), rng.uniform(-30, 30), rng.uniform(0, 2 * math.pi))
        if math.hypot(a.x - b.x, a.y - b.y) > 7 * radius:
            pairs.append((a, b))
    return pairs


@pytest.mark.parametrize("radius", [0.5, 1.0, 2.0])
def test_dubins_matches_geometric_reference(radius):
    oracle = DubinsDistance(radius)
    for a, b in far_random_pairs(40, seed=3, radius=radius):
        assert oracle.cost(a, b) == pytest.approx(reference_csc_length(a, b, radius), abs=1e-6)


def test_function_and_object_forms_agree():
    a, b = Configuration(0, 0, 0.2), Configuration(5, -3, 4.0)
    assert dubins_distance(a, b, 1.3) == DubinsDistance(1.3).cost(a, b)


def test_euclidean_ignores_heading_and_is_symmetric():
    oracle = EuclideanDistance()
    a, b = Configuration(0, 0, 0), Configuration(3, 4, 2.0)
    assert oracle.cost(a, b) == pytest.approx(5.0)
    assert oracle.cost(b, a) == oracle.cost(a, b)


def test_non_negative_and_zero_only_for_identical_pose():
    rng = random.Random(5)
    oracle = DubinsDistance(1.0)
    for _ in range(100):
        a = Configuration(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(0, 2 * math.pi))
        b = Configuration(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(0, 2 * math.pi))
        assert oracle.cost(a, b) > 0.0
        assert oracle.cost(a, a) == 0.0


@pytest.mark.parametrize("heading", [1e-12, -1e-12])
def test_same_position_tiny_heading_change_costs_more_than_zero(heading):
    a = Configuration(0, 0, 0)
    b = Configuration(0, 0, heading)
    assert not a.same_pose(b)
    assert DubinsDistance(1.0).cost(a, b) > 0.0
    assert DubinsDistance(1.0).cost(b, a) > 0.0


def test_asymmetry_witness():
    oracle = DubinsDistance(1.0)
    a = Configuration(0, 0, 0)
    b = Configuration(-5, 0, 0)
    # b -> a 正好直行；a -> b 需要掉头
    assert oracle.cost(b, a) == pytest.approx(5.0)
    assert oracle.cost(a, b) > oracle.cost(b, a)


def test_never_shorter_than_euclidean():
    rng = random.Random(9)
    euclid = EuclideanDistance()
    for radius in (0.1, 1.0, 5.0):
        oracle = DubinsDistance(radius)
        for _ in range(50):
            a = Configuration(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(0, 2 * math.pi))
            b = Configuration(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(0, 2 * math.pi))
            assert oracle.cost(a, b) >= euclid.cost(a, b) - 1e-9


@pytest.mark.parametrize("start, goal", [
    (Configuration(0, 0, 0), Configuration(10, 0, 0)),        # 直行，代价不随半径变化
    (Configuration(0, 0, 0), Configuration(0, 0, math.pi)),   # 原地掉头，代价与半径成正比
    (Configuration(0, 0, 0), Configuration(0, 2, math.pi)),
])
def test_cost_non_decreasing_in_radius(start, goal):
    costs = [DubinsDistance(r).cost(start, goal) for r in (0.25, 0.5, 1.0)]
    assert costs[0] <= costs[1] + 1e-9
    assert costs[1] <= costs[2] + 1e-9


def test_matrix():
    configs = [Configuration(0, 0, 0), Configuration(5, 0, math.pi / 2), Configuration(-3, 4, math.pi)]
    oracle = DubinsDistance(1.0)
    m = oracle.matrix(configs)
    assert m.shape == (3, 3)
    assert np.all(np.diag(m) == 0.0)
    for i, a in enumerate(configs):
        for j, b in enumerate(configs):
            if i != j:
                assert m[i, j] == oracle.cost(a, b)
    # 非对称
    assert not np.allclose(m, m.T)


@pytest.mark.parametrize("radius", [0.0, -2.0, float('nan')])
def test_invalid_radius(radius):
    with pytest.raises(InvalidInputError):
        DubinsDistance(radius)
