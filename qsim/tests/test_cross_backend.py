# qsim/tests/test_cross_backend.py
import numpy as np
from qsim import Circuit, State
from qsim import gates as G

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def test_serial_vs_numba_small():
    # 3-qubit mixed circuit
    c = Circuit.empty(3).h(0).x(1).cnot(1,2).h(2).cnot(0,1).x(2).s(1).toffoli(2,1,0)
    st_s = c.run(backend="serial")
    st_n = c.run(backend="numba", num_threads=1)
    assert max_abs_diff(st_s.as_numpy(), st_n.as_numpy()) < 1e-12

def test_random_circuits_match():
    rng = np.random.default_rng(123)
    n = 5
    for depth in (5, 10, 20):
        c = Circuit.empty(n)
        for _ in range(depth):
            g = rng.integers(0, 4)  # 0:H,1:RY,2:CNOT,3:TOFFOLI
            q = [int(v) for v in rng.permutation(n)[:3]]
            if g == 0:
                c.h(q[0])
            elif g == 1:
                c.ry(q[0], float(rng.uniform(0, np.pi)))
            elif g == 2:
                c.cnot(q[0], q[1])
            else:
                c.toffoli(q[0], q[1], q[2])
        s = c.run(backend="serial")
        t = c.run(backend="numba")
        assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-12, rtol=0)

def test_numba_random_two_qubit_unitary():
    rng = np.random.default_rng(9)
    A = rng.normal(size=(4, 4)) + 1j*rng.normal(size=(4, 4))
    U, _ = np.linalg.qr(A)
    g = G.unitary(U, 3, 1)
    v = rng.normal(size=16) + 1j*rng.normal(size=16)
    v /= np.linalg.norm(v)
    a = State.from_amplitudes(4, v).apply(g, backend="serial")
    b = State.from_amplitudes(4, v).apply(g, backend="numba")
    assert np.allclose(a.as_numpy(), b.as_numpy(), atol=1e-12, rtol=0)

def test_numba_single_qubit_every_position():
    v = np.arange(1, 17, dtype=complex)
    v /= np.linalg.norm(v)
    for q in range(4):
        a = State.from_amplitudes(4, v).apply(G.rx(0.9, q), backend="serial")
        b = State.from_amplitudes(4, v).apply(G.rx(0.9, q), backend="numba")
        assert np.allclose(a.as_numpy(), b.as_numpy(), atol=1e-12, rtol=0)
