# dubins_tour/io/__init__.py

from .gml import load_nodes, format_tour, write_tour_gml, write_cost_matrix

__all__ = ["load_nodes", "format_tour", "write_tour_gml", "write_cost_matrix"]
