# qsim/state.py
import logging
from dataclasses import dataclass

import numpy as np

from .amplitude import ATOL, DTYPE, as_amplitudes
from .errors import DimensionError, NormalizationError, QubitIndexError

logger = logging.getLogger(__name__)


@dataclass
class State:
    n: int
    psi: np.ndarray  # shape (2**n,), complex128; qubit 0 is the MSB of an index

    def __post_init__(self):
        if self.n < 1:
            raise DimensionError(f"need at least one qubit, got n={self.n}")
        # always contiguous complex128; the kernels write into it in place
        self.psi = np.ascontiguousarray(self.psi, dtype=DTYPE)
        if self.psi.shape != (1 << self.n,):
            raise DimensionError(
                f"{self.n} qubits need {1 << self.n} amplitudes, got shape {self.psi.shape}")

    @staticmethod
    def zero(n: int) -> "State":
        return State.basis(n, 0)

    @staticmethod
    def basis(n: int, index: int) -> "State":
        N = 1 << n
        if not 0 <= index < N:
            raise DimensionError(f"basis index {index} out of range for {n} qubits")
        psi = np.zeros(N, dtype=DTYPE)
        psi[index] = 1.0 + 0.0j
        return State(n=n, psi=psi)

    @staticmethod
    def from_amplitudes(n: int, amplitudes, tol: float = ATOL) -> "State":
        """
        Build an n-qubit state from caller-supplied amplitudes (copied).
        Raises DimensionError on a length mismatch and NormalizationError
        if the squared magnitudes do not sum to 1 within `tol`.
        """
        st = State(n, as_amplitudes(amplitudes))
        st.check_normalized(tol=tol)
        return st

    @property
    def dtype(self):
        return self.psi.dtype

    @property
    def dim(self) -> int:
        return self.psi.shape[0]

    def __len__(self) -> int:
        return self.dim

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol: float = ATOL):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise NormalizationError(f"Normalization failed: ||psi||^2={n2}")

    def probabilities(self) -> np.ndarray:
        """|amplitude|^2 per basis index; a fresh array each call."""
        return self.psi.real ** 2 + self.psi.imag ** 2

    def apply(self, gate, backend: str = "serial") -> "State":
        """Apply `gate` in place and return self."""
        from .backends import get_backend

        for q in gate.targets:
            if not 0 <= q < self.n:
                raise QubitIndexError(f"qubit {q} out of range for {self.n} qubits")
        logger.debug("apply %s on %s (n=%d, backend=%s)", gate.name, gate.targets, self.n, backend)
        get_backend(backend)(self, gate)
        return self

    def copy(self) -> "State":
        return State(self.n, self.psi.copy())

    def as_numpy(self) -> np.ndarray:
        return self.psi
