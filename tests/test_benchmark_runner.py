"""Tests for benchmark_runner.py"""

import json

from benchmark_runner import RESULTS_FILE, main, run_experiment


def test_run_experiment():
    result = run_experiment(30, repeats=2, seed=1)
    assert result['nodes'] == 30
    assert result['mst_edges'] == 29
    assert 0 <= result['best_time'] <= result['mean_time']


def test_main_writes_results_and_chart(tmp_path):
    results = main(["--sizes", "10", "20", "--repeats", "1", "--out", str(tmp_path)])
    assert [r['nodes'] for r in results] == [10, 20]
    assert json.loads((tmp_path / RESULTS_FILE).read_text()) == results
    assert (tmp_path / "time_vs_n.png").exists()
