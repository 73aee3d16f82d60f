# qsim/tests/test_bench.py
import csv
import os

import pytest

from qsim import bench

def read_rows(tmp_path, name):
    with open(os.path.join(str(tmp_path), f"{name}.csv")) as f:
        return list(csv.DictReader(f))

@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(bench, "DATA_DIR", str(tmp_path))
    return tmp_path

def test_random_circuit_is_seeded():
    a = bench.random_circuit(4, 12, seed=3)
    b = bench.random_circuit(4, 12, seed=3)
    assert [(g.name, g.targets) for g in a] == [(g.name, g.targets) for g in b]
    assert len(a) == 12

def test_random_circuit_small_n_stays_in_range():
    for n in (1, 2):
        c = bench.random_circuit(n, 30, seed=0)
        assert all(g.arity <= n for g in c)

def test_arity_experiment(data_dir, capsys):
    bench.main(["arity", "--n", "4", "--backends", "serial", "--repeats", "2"])
    rows = read_rows(data_dir, "arity")
    assert [int(r["arity"]) for r in rows] == [1, 2, 3]
    assert all(float(r["wall_ms"]) >= 0 for r in rows)
    assert "✓" in capsys.readouterr().out

def test_arity_skips_gates_wider_than_register(data_dir):
    bench.main(["arity", "--n", "2", "--backends", "serial", "--repeats", "1"])
    assert [int(r["arity"]) for r in read_rows(data_dir, "arity")] == [1, 2]

def test_qubits_experiment_backends_agree(data_dir):
    bench.main(["qubits", "--ns", "3,5", "--depth", "8", "--backends", "serial,numba"])
    rows = read_rows(data_dir, "qubits")
    assert [(int(r["qubits"]), r["backend"]) for r in rows] == [
        (3, "serial"), (3, "numba"), (5, "serial"), (5, "numba")]
    assert all(float(r["max_diff"]) < 1e-10 for r in rows)

def test_threads_experiment(data_dir):
    pytest.importorskip("numba")
    bench.main(["threads", "--n", "6", "--depth", "10", "--threads", "1"])
    rows = read_rows(data_dir, "threads")
    assert len(rows) == 1
    assert rows[0]["backend"] == "numba"
    assert int(rows[0]["threads"]) == 1
