# qsim/bloch.py
#
# Per-qubit Bloch-sphere data for an external renderer. Read-only.
from typing import Tuple

import numpy as np

from .errors import QubitIndexError
from .state import State

def reduced_density_matrix(state: State, qubit: int) -> np.ndarray:
    """2x2 density matrix of `qubit`, tracing out every other qubit."""
    if not 0 <= qubit < state.n:
        raise QubitIndexError(f"qubit {qubit} out of range for {state.n} qubits")
    # C-order reshape puts qubit q on axis q, since qubit 0 is the MSB
    t = state.psi.reshape((2,) * state.n)
    a = np.moveaxis(t, qubit, 0).reshape(2, -1)
    return a @ a.conj().T

def bloch_vector(state: State, qubit: int) -> Tuple[float, float, float]:
    rho = reduced_density_matrix(state, qubit)
    x = 2.0 * rho[0, 1].real
    y = 2.0 * rho[1, 0].imag
    z = (rho[0, 0] - rho[1, 1]).real
    return float(x), float(y), float(z)

def bloch_angles(state: State, qubit: int) -> Tuple[float, float]:
    """
    (theta, phi) of the Bloch vector. For an entangled qubit the vector
    is shorter than 1; only its direction is reported. A zero vector
    gives (0, 0).
    """
    x, y, z = bloch_vector(state, qubit)
    r = np.sqrt(x*x + y*y + z*z)
    if r < 1e-12:
        return 0.0, 0.0
    theta = float(np.arccos(np.clip(z / r, -1.0, 1.0)))
    phi = float(np.arctan2(y, x))
    return theta, phi
