# qsim/tests/test_gates.py
import numpy as np
import pytest

from qsim import Gate, InvalidGateError, QubitIndexError, is_unitary
from qsim import gates as G

ALL = [
    G.h(0), G.x(0), G.y(0), G.z(0), G.s(0), G.t(0),
    G.phase(0.3, 0), G.rx(0.7, 0), G.ry(-1.1, 0), G.rz(2.5, 0),
    G.cnot(0, 1), G.cz(0, 1), G.swap(0, 1), G.toffoli(0, 1, 2),
]

@pytest.mark.parametrize("gate", ALL, ids=lambda g: g.name)
def test_library_gates_are_unitary(gate):
    m = gate.matrix
    assert np.allclose(m @ m.conj().T, np.eye(m.shape[0]), atol=1e-9, rtol=0)
    assert m.shape == (1 << gate.arity,) * 2

def test_known_matrices():
    s = np.sqrt(0.5)
    assert np.allclose(G.H(), [[s, s], [s, -s]])
    assert np.allclose(G.Y(), [[0, -1j], [1j, 0]])
    assert np.allclose(G.S(), [[1, 0], [0, 1j]])
    assert np.allclose(G.CNOT() @ [0, 0, 1, 0], [0, 0, 0, 1])

def test_non_unitary_matrix_rejected():
    with pytest.raises(InvalidGateError):
        G.unitary([[1, 1], [0, 1]], 0)
    with pytest.raises(InvalidGateError):
        Gate("half", 0.5*np.eye(2), (0,))

def test_wrong_matrix_shape_rejected():
    with pytest.raises(InvalidGateError):
        G.unitary(np.eye(4), 0)
    with pytest.raises(InvalidGateError):
        G.unitary([[1, 0]], 0)

def test_unsupported_arity():
    with pytest.raises(InvalidGateError):
        G.h(0, 1)
    with pytest.raises(InvalidGateError):
        G.cnot(0)
    with pytest.raises(InvalidGateError):
        G.x()
    with pytest.raises(InvalidGateError):
        G.unitary(np.eye(16), 0, 1, 2, 3)

def test_duplicate_and_negative_targets():
    with pytest.raises(QubitIndexError):
        G.cnot(1, 1)
    with pytest.raises(QubitIndexError):
        G.h(-1)

def test_gate_is_immutable():
    g = G.h(0)
    with pytest.raises(ValueError):
        g.matrix[0, 0] = 0
    with pytest.raises(AttributeError):
        g.targets = (1,)

def test_gate_copies_input_matrix():
    m = np.eye(2, dtype=complex)
    g = G.unitary(m, 0)
    m[0, 0] = 5
    assert g.matrix[0, 0] == 1

def test_on_rebinds_targets():
    g = G.cnot(0, 1).on(2, 0)
    assert g.targets == (2, 0)
    assert g.name == "CNOT"

def test_on_each():
    gs = G.on_each(G.h, range(3))
    assert [g.targets for g in gs] == [(0,), (1,), (2,)]

def test_is_unitary():
    assert is_unitary(G.SWAP())
    assert not is_unitary(np.array([[1, 0], [0, 2]], dtype=complex))
