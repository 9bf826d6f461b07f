# tests/test_cli.py
import sys
import os
import glob
import pytest
import matplotlib
matplotlib.use("Agg")

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dubins_tour import cli
from dubins_tour.cli import main
from dubins_tour.errors import InvalidInputError

GRAPH_GML = """graph [
  directed 1
  node [ id 1 label "1" graphics [ x 10.0 y 0.0 ] ]
  node [ id 2 label "2" graphics [ x 0.0 y 10.0 ] ]
  node [ id 3 label "3" graphics [ x -10.0 y 0.0 ] ]
]
"""


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.gml"
    path.write_text(GRAPH_GML)
    return str(path)


def test_solve_prints_tour(graph_file, capsys):
    assert main([graph_file, "--radius", "1.0"]) == 0
    out = capsys.readouterr().out
    assert "Solved 3 point tour with cost" in out
    assert "Tour: 1 -> 2 -> 3." in out


def test_euclidean_distance(graph_file, capsys):
    assert main([graph_file, "--distance", "euclidean"]) == 0
    out = capsys.readouterr().out
    # 原点 -> (10,0) -> (0,10) -> (-10,0) -> 原点
    assert "Tour: 1 -> 2 -> 3." in out


def test_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.gml")
    assert main([missing]) == 1
    assert f"Could not open {missing}" in capsys.readouterr().err


def test_invalid_radius(graph_file, capsys):
    assert main([graph_file, "--radius", "0"]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_wrong_argument_count():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code != 0


def test_outputs(graph_file, tmp_path):
    plot = str(tmp_path / "tour.png")
    matrix = str(tmp_path / "matrix.csv")
    output = str(tmp_path / "tour.gml")
    assert main([graph_file, "--radius", "1.0", "--plot", plot, "--matrix", matrix, "--output", output]) == 0
    assert os.path.getsize(plot) > 0
    assert os.path.getsize(matrix) > 0
    assert os.path.getsize(output) > 0


def test_debug_log(graph_file, tmp_path):
    log_dir = str(tmp_path / "logs")
    assert main([graph_file, "--radius", "1.0", "--debug", "--log-dir", log_dir]) == 0
    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1
    with open(log_files[0], encoding='utf-8') as f:
        assert "Found 3 nodes" in f.read()


def test_malformed_file_reports_could_not_open(tmp_path, capsys):
    path = tmp_path / "bad.gml"
    path.write_text("graph [ node [ id 1 ")
    assert main([str(path)]) == 1
    assert f"Could not open {path}" in capsys.readouterr().err


def test_debug_log_closed_when_planning_fails(graph_file, tmp_path, monkeypatch, capsys):
    closed = []
    original_close = cli.DebugObserver.close

    def tracking_close(self):
        closed.append(self.log_file)
        original_close(self)

    def failing_plan(self, nodes, start, end, debugger=None):
        raise InvalidInputError("Node 2 has a non-finite configuration")

    monkeypatch.setattr(cli.DebugObserver, "close", tracking_close)
    monkeypatch.setattr(cli.NearestNeighborPlanner, "plan", failing_plan)

    log_dir = str(tmp_path / "logs")
    assert main([graph_file, "--debug", "--log-dir", log_dir]) == 1
    assert "Invalid input" in capsys.readouterr().err
    assert len(closed) == 1
    with open(closed[0], encoding='utf-8') as f:
        assert "non-finite configuration" in f.read()
