"""Tests for run_kruskal and metrics.py"""

import json

import pytest

from kruskal_mst import run_kruskal
from metrics import Metrics
from mst_errors import InvalidGraphError


class TestRunKruskal:
    def test_writes_results(self, tmp_path, square_graph):
        out_dir = tmp_path / "kruskal"
        result = run_kruskal(square_graph, str(out_dir))

        assert result['total_weight'] == 7
        assert result['components'] == 1
        assert len(result['mst_edges']) == 3
        assert result['metrics']['edges_examined'] == 4
        assert result['metrics']['edges_accepted'] == 3
        assert result['metrics']['edges_rejected'] == 1

        mst_text = (out_dir / 'mst_kruskal.txt').read_text()
        assert "Total MST Weight: 7.000000" in mst_text
        assert "Number of Edges: 3" in mst_text

        log = [json.loads(line) for line in (out_dir / 'step_log.jsonl').read_text().splitlines()]
        assert [entry['accepted'] for entry in log] == [True, True, False, True]
        assert log[0] == {"step": 1, "u": log[0]['u'], "v": log[0]['v'], "weight": 1,
                          "accepted": True, "components": 3, "mst_size": 1}
        assert {log[0]['u'], log[0]['v']} == {"A", "B"}

        metrics_text = (out_dir / 'metrics.txt').read_text()
        assert "edges_examined: 4" in metrics_text
        assert "total_time:" in metrics_text

    def test_disconnected_graph(self, tmp_path, two_triangles):
        result = run_kruskal(two_triangles, str(tmp_path))
        assert result['components'] == 2
        assert len(result['mst_edges']) == 4

    def test_invalid_graph_propagates(self, tmp_path, make_graph):
        with pytest.raises(InvalidGraphError):
            run_kruskal(make_graph([(1, 2, 1.0)], directed=True), str(tmp_path))

    def test_invalid_graph_creates_no_output(self, tmp_path, make_graph, capsys):
        out_dir = tmp_path / "kruskal"
        with pytest.raises(InvalidGraphError):
            run_kruskal(make_graph([(1, 2, 1.0), (2, 3, -1)]), str(out_dir))
        assert not out_dir.exists()
        assert "[kruskal] Starting" not in capsys.readouterr().out


class TestMetrics:
    def test_summary(self):
        m = Metrics()
        m.start()
        for accepted in (True, False, True):
            m.start_step()
            m.end_step(accepted)
        m.stop()
        summary = m.summary()
        assert summary['edges_examined'] == 3
        assert summary['edges_accepted'] == 2
        assert summary['edges_rejected'] == 1
        assert summary['total_time'] >= 0
        assert summary['avg_step_time'] >= 0

    def test_empty_summary(self):
        summary = Metrics().summary()
        assert summary['total_time'] is None
        assert summary['avg_step_time'] is None
