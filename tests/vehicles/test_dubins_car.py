import sys
import os
import math
import pytest

# --- 路径设置 (确保能导入 dubins_tour) ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from dubins_tour.types import Configuration, mod2pi
from dubins_tour.errors import InvalidInputError
from dubins_tour.vehicles import DubinsCar, DubinsVehicleConfig
from dubins_tour.planning.dubins_path import shortest_path, all_paths


def test_radius_from_bicycle_model():
    config = DubinsVehicleConfig(wheelbase=2.5, max_steer_deg=35.0)
    assert config.turning_radius == pytest.approx(2.5 / math.tan(math.radians(35.0)))
    assert config.max_curvature == pytest.approx(1.0 / config.turning_radius)


def test_explicit_radius_wins():
    config = DubinsVehicleConfig(turning_radius=4.0, wheelbase=2.5, max_steer_deg=35.0)
    assert config.turning_radius == 4.0


@pytest.mark.parametrize("kwargs", [
    {'turning_radius': 0.0},
    {'turning_radius': -1.0},
    {'max_steer_deg': 0.0},
    {'max_steer_deg': 90.0},
    {'wheelbase': -1.0},
])
def test_invalid_config(kwargs):
    with pytest.raises(InvalidInputError):
        DubinsVehicleConfig(**kwargs)


def test_full_left_turn_returns_home():
    car = DubinsCar(DubinsVehicleConfig(turning_radius=2.0))
    state = Configuration(0.0, 0.0, 0.0)
    # 周长 2πR，速度 1，整圈
    end = car.kinematic_propagate(state, (1.0, 1.0), 2 * math.pi * 2.0)
    assert (end.x, end.y) == pytest.approx((0.0, 0.0), abs=1e-9)


def test_straight_propagation():
    car = DubinsCar(DubinsVehicleConfig(turning_radius=1.0))
    end = car.kinematic_propagate(Configuration(1.0, 1.0, math.pi / 2), (2.0, 0.0), 1.5)
    assert (end.x, end.y) == pytest.approx((1.0, 4.0))


@pytest.mark.parametrize("goal", [
    Configuration(10.0, 5.0, 1.0),
    Configuration(-4.0, 3.0, math.pi),
    Configuration(1.0, 1.0, 4.0),
])
def test_follow_reaches_goal(goal):
    radius = 1.5
    car = DubinsCar(DubinsVehicleConfig(turning_radius=radius))
    start = Configuration(0.0, 0.0, 0.3)
    for path in [shortest_path(start, goal, radius)] + list(all_paths(start, goal, radius).values()):
        trajectory = car.follow(path, dt=0.05)
        end = trajectory[-1]
        assert (end.x, end.y) == pytest.approx((goal.x, goal.y), abs=1e-6)
        d = mod2pi(end.theta_rad - goal.theta_rad)
        assert min(d, 2 * math.pi - d) < 1e-6
