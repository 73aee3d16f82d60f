# qsim/gate.py
import operator
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .amplitude import ATOL, DTYPE
from .errors import InvalidGateError, QubitIndexError

SUPPORTED_ARITIES = (1, 2, 3)


def is_unitary(m: np.ndarray, atol: float = ATOL) -> bool:
    eye = np.eye(m.shape[0], dtype=m.dtype)
    return bool(np.allclose(m @ m.conj().T, eye, rtol=0.0, atol=atol))


@dataclass(frozen=True, eq=False)
class Gate:
    """
    A unitary bound to target qubits. targets[0] is the most significant
    bit of the matrix's row/column index, so for CNOT bound to (c, t) the
    control is targets[0].

    Validated once here; the matrix is stored read-only.
    """
    name: str
    matrix: np.ndarray
    targets: Tuple[int, ...]

    def __post_init__(self):
        try:
            targets = tuple(operator.index(q) for q in self.targets)
        except TypeError as e:
            raise QubitIndexError(f"{self.name}: qubit indices must be integers") from e
        k = len(targets)
        if k not in SUPPORTED_ARITIES:
            raise InvalidGateError(
                f"{self.name}: unsupported arity {k} (supported: {SUPPORTED_ARITIES})")
        if len(set(targets)) != k:
            raise QubitIndexError(f"{self.name}: duplicate target qubits {targets}")
        if min(targets) < 0:
            raise QubitIndexError(f"{self.name}: negative target qubit in {targets}")

        m = np.array(self.matrix, dtype=DTYPE)
        d = 1 << k
        if m.shape != (d, d):
            raise InvalidGateError(
                f"{self.name}: a {k}-qubit gate needs a {d}x{d} matrix, got shape {m.shape}")
        if not is_unitary(m):
            raise InvalidGateError(f"{self.name}: matrix is not unitary")
        m.setflags(write=False)

        object.__setattr__(self, "matrix", m)
        object.__setattr__(self, "targets", targets)

    @property
    def arity(self) -> int:
        return len(self.targets)

    def on(self, *targets: int) -> "Gate":
        """Same operator bound to other qubits."""
        return Gate(self.name, self.matrix, targets)

    def __repr__(self):
        return f"Gate({self.name}, targets={self.targets})"
