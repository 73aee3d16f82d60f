# qsim/gates.py
#
# Raw matrices (upper case) and constructors that bind them to qubits.
# Every constructor goes through Gate, so every gate is unitary-checked.
from typing import Callable, Iterable, List, Sequence

import numpy as np

from .amplitude import DTYPE
from .errors import InvalidGateError
from .gate import Gate

def H() -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=DTYPE)

def X() -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=DTYPE)

def Y() -> np.ndarray:
    return np.array([[0, -1j],
                     [1j, 0]], dtype=DTYPE)

def Z() -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=DTYPE)

def PHASE(theta: float) -> np.ndarray:
    return np.array([[1, 0],
                     [0, np.exp(1j*theta)]], dtype=DTYPE)

def S() -> np.ndarray:
    # exact i rather than exp(i*pi/2) so S^4 is bit-exact identity
    return np.array([[1, 0],
                     [0, 1j]], dtype=DTYPE)

def T() -> np.ndarray:
    return PHASE(np.pi / 4)

def RX(theta: float) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=DTYPE)

def RY(theta: float) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return np.array([[c, -s],
                     [s, c]], dtype=DTYPE)

def RZ(theta: float) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=DTYPE)

def CNOT() -> np.ndarray:
    # order 00,01,10,11 with the control as the high bit; swap |10> <-> |11>
    mat = np.eye(4, dtype=DTYPE)
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return mat

def CZ() -> np.ndarray:
    return np.diag(np.array([1, 1, 1, -1], dtype=DTYPE))

def SWAP() -> np.ndarray:
    mat = np.eye(4, dtype=DTYPE)
    mat[1,1] = 0; mat[2,2] = 0
    mat[1,2] = 1; mat[2,1] = 1
    return mat

def TOFFOLI() -> np.ndarray:
    mat = np.eye(8, dtype=DTYPE)
    mat[6,6] = 0; mat[7,7] = 0
    mat[6,7] = 1; mat[7,6] = 1
    return mat

# ---------------------------------------------------------------------

def _bind(name: str, matrix: np.ndarray, qubits: Sequence[int], arity: int) -> Gate:
    if len(qubits) != arity:
        raise InvalidGateError(f"{name} acts on {arity} qubit(s), got {len(qubits)}")
    return Gate(name, matrix, tuple(qubits))

def h(*qubits: int) -> Gate: return _bind("H", H(), qubits, 1)
def x(*qubits: int) -> Gate: return _bind("X", X(), qubits, 1)
def y(*qubits: int) -> Gate: return _bind("Y", Y(), qubits, 1)
def z(*qubits: int) -> Gate: return _bind("Z", Z(), qubits, 1)
def s(*qubits: int) -> Gate: return _bind("S", S(), qubits, 1)
def t(*qubits: int) -> Gate: return _bind("T", T(), qubits, 1)

def phase(theta: float, *qubits: int) -> Gate:
    return _bind("P", PHASE(theta), qubits, 1)

def rx(theta: float, *qubits: int) -> Gate: return _bind("RX", RX(theta), qubits, 1)
def ry(theta: float, *qubits: int) -> Gate: return _bind("RY", RY(theta), qubits, 1)
def rz(theta: float, *qubits: int) -> Gate: return _bind("RZ", RZ(theta), qubits, 1)

def cnot(*qubits: int) -> Gate:
    """cnot(control, target)"""
    return _bind("CNOT", CNOT(), qubits, 2)

def cz(*qubits: int) -> Gate: return _bind("CZ", CZ(), qubits, 2)
def swap(*qubits: int) -> Gate: return _bind("SWAP", SWAP(), qubits, 2)

def toffoli(*qubits: int) -> Gate:
    """toffoli(control1, control2, target)"""
    return _bind("TOFFOLI", TOFFOLI(), qubits, 3)

def unitary(matrix, *qubits: int, name: str = "U") -> Gate:
    """Arbitrary unitary; arity is taken from the number of qubits."""
    return Gate(name, matrix, tuple(qubits))

def on_each(factory: Callable[..., Gate], qubits: Iterable[int]) -> List[Gate]:
    """One single-qubit gate per qubit, e.g. on_each(h, range(n))."""
    return [factory(q) for q in qubits]
