# qsim/bench.py
#
# python -m qsim.bench {arity,qubits,threads} -> data/<experiment>.csv
import argparse
import csv
import os
import time

import numpy as np

from . import gates as G
from .circuit import Circuit
from .simulator import Simulator
from .state import State

DATA_DIR = os.path.join(os.getcwd(), "data")

FIELDS = ["experiment", "backend", "threads", "qubits", "arity", "gates", "wall_ms", "max_diff"]

# one representative gate per supported arity
ARITY_GATES = {1: lambda n: G.h(n - 1),
               2: lambda n: G.cnot(0, n - 1),
               3: lambda n: G.toffoli(0, n // 2, n - 1)}


def _write_csv(name, rows):
    path = os.path.join(DATA_DIR, f"{name}.csv")
    os.makedirs(DATA_DIR, exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(rows)
    return path

def _row(experiment, backend, **kw):
    row = dict.fromkeys(FIELDS, "")
    row.update(experiment=experiment, backend=backend, **kw)
    return row

def random_circuit(n, depth, seed=0):
    """`depth` gates drawn from H, RY, CNOT and (for n >= 3) Toffoli on random qubits."""
    rng = np.random.default_rng(seed)
    kinds = 4 if n >= 3 else 3
    c = Circuit.empty(n)
    for _ in range(depth):
        kind = int(rng.integers(0, kinds))
        q = [int(v) for v in rng.permutation(n)[:3]]
        if kind == 0:
            c.h(q[0])
        elif kind == 1:
            c.ry(q[0], float(rng.uniform(0, np.pi)))
        elif kind == 2 and n >= 2:
            c.cnot(q[0], q[1])
        elif kind == 3:
            c.toffoli(q[0], q[1], q[2])
        else:
            c.x(q[0])
    return c

def _time_gate(n, gate, backend, repeats):
    st = State.zero(n)
    st.apply(gate, backend=backend)  # JIT warmup
    t0 = time.perf_counter()
    for _ in range(repeats):
        st.apply(gate, backend=backend)
    return (time.perf_counter() - t0) * 1e3 / repeats

def _time_run(sim, circ):
    sim.run(Circuit.empty(circ.n).h(0))  # JIT warmup
    t0 = time.perf_counter()
    st = sim.run(circ)
    return st, (time.perf_counter() - t0) * 1e3

# ---------------------------------------------------------------------
# experiments; each returns its rows

def bench_arity(n, backends, repeats=5):
    """Per-gate cost of a k-qubit gate, k = 1, 2, 3; expected to grow as 2^k."""
    rows = []
    for k, make in ARITY_GATES.items():
        if k > n:
            continue
        for be in backends:
            wall = _time_gate(n, make(n), be, repeats)
            rows.append(_row("arity", be, qubits=n, arity=k, gates=1, wall_ms=f"{wall:.4f}"))
            print(f"  k={k}  {be:<6}  {wall:.3f} ms/gate")
    return rows

def bench_qubits(ns, depth, backends):
    """Random circuit per n on every backend; max_diff is measured against the first backend."""
    rows = []
    for n in ns:
        circ = random_circuit(n, depth, seed=42)
        ref = None
        for be in backends:
            st, wall = _time_run(Simulator(backend=be), circ)
            if ref is None:
                ref = st.as_numpy()
            diff = float(np.max(np.abs(st.as_numpy() - ref)))
            rows.append(_row("qubits", be, qubits=n, gates=len(circ),
                             wall_ms=f"{wall:.3f}", max_diff=f"{diff:.3g}"))
            print(f"  n={n}  {be:<6}  {wall:.2f} ms  max_diff={diff:.1e}")
    return rows

def bench_threads(n, depth, threads_list):
    import numba
    pool = numba.config.NUMBA_NUM_THREADS
    circ = random_circuit(n, depth, seed=123)
    rows = []
    t1 = None
    for t in threads_list:
        tt = min(int(t), pool)
        _, wall = _time_run(Simulator(backend="numba", num_threads=tt), circ)
        t1 = t1 or wall
        rows.append(_row("threads", "numba", threads=tt, qubits=n, gates=len(circ),
                         wall_ms=f"{wall:.3f}"))
        print(f"  t={tt}  {wall:.2f} ms  speedup={t1 / wall:.2f}×")
    return rows

# ---------------------------------------------------------------------
def _ints(s):
    return [int(x) for x in s.split(",")]

def main(argv=None):
    p = argparse.ArgumentParser(description="qsim benchmarks → data/<experiment>.csv")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_arity = sub.add_parser("arity", help="cost of 1-, 2- and 3-qubit gates")
    p_arity.add_argument("--n", type=int, default=16)
    p_arity.add_argument("--backends", type=str, default="serial,numba")
    p_arity.add_argument("--repeats", type=int, default=5)

    p_qubits = sub.add_parser("qubits", help="random circuits over growing n")
    p_qubits.add_argument("--ns", type=str, default="8,12,16")
    p_qubits.add_argument("--depth", type=int, default=100)
    p_qubits.add_argument("--backends", type=str, default="serial,numba")

    p_threads = sub.add_parser("threads", help="numba thread scaling")
    p_threads.add_argument("--n", type=int, default=18)
    p_threads.add_argument("--depth", type=int, default=100)
    p_threads.add_argument("--threads", type=str, default="1,2,4,8")

    args = p.parse_args(argv)

    if args.cmd == "arity":
        rows = bench_arity(args.n, args.backends.split(","), args.repeats)
    elif args.cmd == "qubits":
        rows = bench_qubits(_ints(args.ns), args.depth, args.backends.split(","))
    else:
        rows = bench_threads(args.n, args.depth, _ints(args.threads))
    print(f"✓ {_write_csv(args.cmd, rows)}")

if __name__ == "__main__":
    main()
