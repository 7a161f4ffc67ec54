import json
from pathlib import Path

import pytest

from schedgraph import cli

EXAMPLES = Path(__file__).resolve().parents[2] / "examples"
DIAMOND = EXAMPLES / "diamond.json"
WORKFLOW = EXAMPLES / "release_workflow.yaml"


def _run_json(capsys, argv):
    cli.main(argv)
    return json.loads(capsys.readouterr().out)


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: schedgraph" in capsys.readouterr().out


def test_unknown_command_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["explode", str(DIAMOND)])
    assert exc_info.value.code == 2


class TestInspect:
    def test_acyclic(self, capsys) -> None:
        cli.main(["inspect", str(DIAMOND)])
        out = capsys.readouterr().out
        assert "GraphRecord(vertices=4, edges=4" in out
        assert "Graph: 4 vertices, 4 edges, directed" in out
        assert "SCC Result: 4 components" in out
        assert "=== Condensation Statistics ===" in out
        assert "Graph is acyclic" in out

    def test_cyclic_with_metrics(self, capsys) -> None:
        cli.main(["inspect", str(WORKFLOW), "--metrics"])
        out = capsys.readouterr().out
        assert "Cyclic clusters: [[2, 1, 0]]" in out
        assert "=== Metrics Summary ===" in out
        assert "scc_found: 6" in out


class TestOrder:
    def test_json(self, capsys) -> None:
        payload = _run_json(capsys, ["order", str(WORKFLOW), "--json"])
        assert payload["vertex_order"] == [5, 2, 1, 0, 3, 4, 6, 7]
        assert payload["component_order"] == [0, 1, 2, 3, 4, 5]
        assert payload["components"][1] == [2, 1, 0]

    def test_text(self, capsys) -> None:
        cli.main(["order", str(DIAMOND)])
        out = capsys.readouterr().out
        assert "=== SCC + Topological Order Summary ===" in out
        assert "SCCs found: 4" in out


class TestPaths:
    def test_shortest_uses_record_source(self, capsys) -> None:
        payload = _run_json(capsys, ["paths", str(DIAMOND), "--json"])
        assert payload["source"] == 0
        assert payload["mode"] == "minimize"
        assert payload["condensed"] is False
        assert [v["distance"] for v in payload["vertices"]] == [0.0, 5.0, 3.0, 7.0]
        assert payload["vertices"][3]["path"] == [0, 1, 3]
        assert "critical_path" not in payload

    def test_longest_text(self, capsys) -> None:
        cli.main(["paths", str(DIAMOND), "--mode", "longest", "--source", "0"])
        out = capsys.readouterr().out
        assert "=== Longest Path Result (source: 0) ===" in out
        assert "Vertex 3: distance = 7.00, path = [0, 1, 3]" in out
        assert "Critical path: [0, 1, 3] (length: 7.00)" in out

    def test_unreachable_is_null_in_json(self, capsys) -> None:
        payload = _run_json(capsys, ["paths", str(DIAMOND), "-s", "3", "--json"])
        assert payload["vertices"][0] == {"vertex": 0, "distance": None, "path": None}

    def test_cyclic_graph_uses_condensation(self, capsys) -> None:
        payload = _run_json(
            capsys, ["paths", str(WORKFLOW), "--mode", "longest", "--json"]
        )
        assert payload["condensed"] is True
        assert payload["source"] == 1
        assert payload["critical_path"] == [1, 2, 3, 4, 5]
        assert payload["critical_path_length"] == 90.0

    def test_invalid_source(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["paths", str(DIAMOND), "--source", "9"])
        assert exc_info.value.code == 1
        assert "Invalid source vertex: 9" in capsys.readouterr().out

    def test_missing_source(self, tmp_path, capsys) -> None:
        graph = tmp_path / "nosource.json"
        graph.write_text('{"n": 2, "edges": [{"u": 0, "v": 1}]}')
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["paths", str(graph)])
        assert exc_info.value.code == 1
        assert "No source vertex" in capsys.readouterr().out

    def test_metrics(self, capsys) -> None:
        cli.main(["paths", str(DIAMOND), "--metrics"])
        out = capsys.readouterr().out
        assert "edge_relaxations: 4" in out


class TestCritical:
    def test_text(self, capsys) -> None:
        cli.main(["critical", str(DIAMOND)])
        assert capsys.readouterr().out == "Critical path: [0, 1, 3] (length: 7.00)\n"

    def test_cyclic_json(self, capsys) -> None:
        payload = _run_json(capsys, ["critical", str(WORKFLOW), "--json"])
        assert payload == {
            "source": 1,
            "critical_path": [1, 2, 3, 4, 5],
            "critical_path_length": 90.0,
            "condensed": True,
            "critical_path_members": [[0, 1, 2], [3], [4], [6], [7]],
        }

    def test_cyclic_text_labels_components(self, capsys) -> None:
        cli.main(["critical", str(WORKFLOW)])
        assert capsys.readouterr().out == (
            "(vertices are SCC components)\n"
            "Critical path: [1, 2, 3, 4, 5] (length: 90.00)\n"
            "Component members: [[0, 1, 2], [3], [4], [6], [7]]\n"
        )

    def test_empty_graph(self, tmp_path, capsys) -> None:
        graph = tmp_path / "empty.yaml"
        graph.write_text("n: 0\n")
        cli.main(["critical", str(graph)])
        assert capsys.readouterr().out == "Graph is empty\n"

    def test_metrics(self, capsys) -> None:
        cli.main(["critical", str(DIAMOND), "--metrics"])
        assert "=== DAG Path Metrics ===" in capsys.readouterr().out


class TestErrors:
    def test_missing_file(self, tmp_path, capsys) -> None:
        missing = tmp_path / "missing.json"
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["inspect", str(missing)])
        assert exc_info.value.code == 1
        assert "ERROR: Graph file not found" in capsys.readouterr().out

    def test_schema_violation(self, tmp_path, capsys) -> None:
        graph = tmp_path / "bad.json"
        graph.write_text('{"n": 2, "edges": [{"u": 0}]}')
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["order", str(graph)])
        assert exc_info.value.code == 1
        assert "ValidationError" in capsys.readouterr().out

    def test_edge_out_of_range(self, tmp_path, capsys) -> None:
        graph = tmp_path / "range.yaml"
        graph.write_text("n: 2\nedges:\n  - {u: 0, v: 5}\n")
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["critical", str(graph)])
        assert exc_info.value.code == 1
        assert "Invalid edge #0 (0 -> 5)" in capsys.readouterr().out

    def test_malformed_yaml(self, tmp_path, capsys) -> None:
        graph = tmp_path / "broken.yaml"
        graph.write_text("n: [1, 2\n")
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["inspect", str(graph)])
        assert exc_info.value.code == 1
        assert "ERROR: Failed to analyze graph" in capsys.readouterr().out


class TestLoggingFlags:
    def test_verbose_sets_debug(self, capsys) -> None:
        import logging

        cli.main(["--verbose", "critical", str(DIAMOND)])
        assert logging.getLogger("schedgraph").level == logging.DEBUG
        cli.main(["--quiet", "critical", str(DIAMOND)])
        assert logging.getLogger("schedgraph").level == logging.WARNING
        cli.main(["critical", str(DIAMOND)])
        assert logging.getLogger("schedgraph").level == logging.INFO
