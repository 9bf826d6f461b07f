# dubins_tour/cli.py
import sys
import argparse

from dubins_tour.config import TourConfig
from dubins_tour.errors import GraphLoadError, InvalidInputError
from dubins_tour.io import load_nodes, format_tour, write_tour_gml, write_cost_matrix
from dubins_tour.planning.planners import NearestNeighborPlanner
from dubins_tour.vehicles import DubinsVehicleConfig
from dubins_tour.visualization.observers import EfficientObserver, DebugObserver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dubins-tour",
        description="Nearest-neighbor tour over oriented points for a Dubins vehicle")
    parser.add_argument("graph", type=str, help="Input GML graph")
    parser.add_argument("--radius", type=float, default=None, help="Minimum turning radius [m]")
    parser.add_argument("--wheelbase", type=float, default=2.5, help="Wheelbase [m], used when --radius is not given")
    parser.add_argument("--max-steer-deg", type=float, default=35.0, help="Max steering angle [deg], used when --radius is not given")
    parser.add_argument("--distance", type=str, default="dubins", choices=["dubins", "euclidean"], help="Distance oracle")
    parser.add_argument("--plot", type=str, default=None, help="Save a plot of the tour to this file")
    parser.add_argument("--show", action="store_true", help="Show plot")
    parser.add_argument("--matrix", type=str, default=None, help="Write the full ATSP cost matrix (CSV)")
    parser.add_argument("--output", type=str, default=None, help="Write the tour as GML")
    parser.add_argument("--debug", action="store_true", help="Write a debug log")
    parser.add_argument("--log-dir", type=str, default="logs/tour_debug", help="Debug log directory")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        vehicle_config = DubinsVehicleConfig(
            turning_radius=args.radius,
            wheelbase=args.wheelbase,
            max_steer_deg=args.max_steer_deg,
        )
        cfg = TourConfig(
            turning_radius=vehicle_config.turning_radius,
            distance=args.distance,
            debug_mode=args.debug,
            log_dir=args.log_dir,
        )
        nodes = load_nodes(args.graph)
    except GraphLoadError as e:
        print(str(e), file=sys.stderr)
        return 1
    except InvalidInputError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    observer = DebugObserver(log_dir=cfg.log_dir) if cfg.debug_mode else EfficientObserver()
    try:
        return _run(args, cfg, nodes, observer)
    finally:
        if isinstance(observer, DebugObserver):
            observer.close()


def _run(args, cfg: TourConfig, nodes, observer) -> int:
    if cfg.debug_mode:
        observer.log(f"Opened {args.graph}. Found {len(nodes)} nodes.")

    oracle = cfg.make_oracle()
    planner = NearestNeighborPlanner(oracle)
    try:
        result = planner.plan(nodes, cfg.start, cfg.end_config, debugger=observer)
    except InvalidInputError as e:
        observer.log(str(e), level='ERROR')
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    print(f"Solved {len(nodes)} point tour with cost {result.total_cost}.")
    print(f"Tour: {format_tour(result)}.")

    if args.matrix:
        write_cost_matrix(oracle, nodes, args.matrix)
        print(f"Cost matrix saved to: {args.matrix}")
    if args.output:
        write_tour_gml(result, args.output)
        print(f"Tour saved to: {args.output}")
    if args.plot or args.show:
        # 延迟导入：不画图时不加载 matplotlib
        from dubins_tour.visualization.plotter import TourPlotter
        radius = cfg.turning_radius if cfg.distance == "dubins" else None
        plotter = TourPlotter(turning_radius=radius, sample_step=cfg.sample_step)
        plotter.draw(result, cfg.start, cfg.end_config)
        if args.plot:
            plotter.save(args.plot)
            print(f"Visualization saved to: {args.plot}")
        if args.show:
            plotter.show()
        plotter.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
