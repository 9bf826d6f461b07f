import sys
import os
import time
import math
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dubins_tour.types import Configuration, Node
from dubins_tour.planning.planners import NearestNeighborPlanner
from dubins_tour.planning.distances import DubinsDistance, EuclideanDistance
from dubins_tour.visualization.observers import ExperimentObserver
from experiments.benchmark_config import BenchmarkConfig as cfg


def random_nodes(n, rng):
    """在工作区内随机生成 n 个带航向的节点"""
    xs = rng.uniform(-cfg.AREA_WIDTH / 2, cfg.AREA_WIDTH / 2, n)
    ys = rng.uniform(-cfg.AREA_HEIGHT / 2, cfg.AREA_HEIGHT / 2, n)
    ths = rng.uniform(0.0, 2 * math.pi, n)
    return [Node(i, Configuration(float(x), float(y), float(th))) for i, (x, y, th) in enumerate(zip(xs, ys, ths))]


def tour_dubins_length(result, radius):
    """把一条 Tour 放到 Dubins 车上重新计价 (含回到终点的一段)"""
    oracle = DubinsDistance(radius)
    poses = [cfg.START_CONFIG] + [node.config for node in result.tour] + [cfg.END_CONFIG]
    return sum(oracle.cost(a, b) for a, b in zip(poses[:-1], poses[1:]))


def run_experiment():
    results = []

    print(f"{'Nodes':<8} | {'Radius':<8} | {'Oracle':<10} | {'Time(ms)':<10} | {'Len(m)':<10}")
    print("-" * 60)

    for n in cfg.NODE_COUNTS:
        for radius in cfg.TURNING_RADII:
            stats = {
                'Euclidean': {'time': [], 'length': []},
                'Dubins': {'time': [], 'length': []},
            }

            for i in range(cfg.NUM_TRIALS):
                # 同一个 seed，保证两种距离在同一组节点上比较
                rng = np.random.default_rng(cfg.RANDOM_SEED_BASE + n * 100 + i)
                nodes = random_nodes(n, rng)

                for name, oracle in (('Euclidean', EuclideanDistance()), ('Dubins', DubinsDistance(radius))):
                    planner = NearestNeighborPlanner(oracle)
                    observer = ExperimentObserver()

                    t0 = time.perf_counter()
                    result = planner.plan(nodes, cfg.START_CONFIG, cfg.END_CONFIG, debugger=observer)
                    t1 = time.perf_counter()

                    # 无论用哪种距离构造，最终都按 Dubins 车真实行驶距离计价
                    stats[name]['time'].append((t1 - t0) * 1000)
                    stats[name]['length'].append(tour_dubins_length(result, radius))

            for name, s_data in stats.items():
                avg_time = np.mean(s_data['time'])
                avg_len = np.mean(s_data['length'])
                std_len = np.std(s_data['length'])
                print(f"{n:<8} | {radius:<8.2f} | {name:<10} | {avg_time:<10.2f} | {avg_len:<10.2f}")

                results.append({
                    'Nodes': n,
                    'Radius': radius,
                    'Oracle': name,
                    'TimeMean': avg_time,
                    'LengthMean': avg_len,
                    'LengthStd': std_len,
                })

    return pd.DataFrame(results)


def plot_comparisons(df):
    """每个问题规模一张图：Dubins 行驶长度随转弯半径的变化"""
    counts = df['Nodes'].unique()
    fig, axes = plt.subplots(1, len(counts), figsize=(6 * len(counts), 5))
    axes = np.atleast_1d(axes)

    for ax, n in zip(axes, counts):
        for name, style in (('Euclidean', 's--'), ('Dubins', 'o-')):
            data = df[(df['Nodes'] == n) & (df['Oracle'] == name)]
            ax.errorbar(data['Radius'], data['LengthMean'], yerr=data['LengthStd'],
                        fmt=style, capsize=4, label=name)
        ax.set_xlabel('Turning Radius (m)')
        ax.set_ylabel('Dubins Tour Length (m)')
        ax.set_title(f'{n} nodes')
        ax.grid(True, linestyle=':', alpha=0.6)
        ax.legend()

    plt.suptitle("Nearest Neighbor: Euclidean vs Dubins Oracle", fontsize=14)
    plt.tight_layout()

    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    output_path = os.path.join(cfg.LOG_DIR, "oracle_comparison.png")
    print(f"\nSaving plot to {output_path}...")
    plt.savefig(output_path, dpi=150)
    plt.show()


if __name__ == "__main__":
    print("=== 最近邻 Tour：欧氏距离 vs Dubins 距离 ===")
    df_results = run_experiment()
    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    df_results.to_csv(os.path.join(cfg.LOG_DIR, "oracle_comparison.csv"), index=False)
    print("\n实验完成，正在绘图...")
    plot_comparisons(df_results)
