"""
qsim: pure-state quantum circuit simulation on a flat complex128 amplitude
array.

    from qsim import Circuit, measure
    import numpy as np

    st = Circuit.empty(2).h(0).cnot(0, 1).run()
    outcome = measure(st, np.random.default_rng(7))

Qubit 0 is the most significant bit of a basis index.
"""

__version__ = "0.2.0"

from .amplitude import ATOL, DTYPE, amplitude, as_amplitudes, mag2  # noqa: E402
from .errors import (  # noqa: E402
    DimensionError,
    InvalidGateError,
    NormalizationError,
    QSimError,
    QubitIndexError,
)
from .state import State  # noqa: E402
from .gate import Gate, is_unitary  # noqa: E402
from . import gates  # noqa: E402
from .circuit import Circuit  # noqa: E402
from .config import SimulatorConfig  # noqa: E402
from .simulator import Simulator  # noqa: E402
from .measurement import Outcome, measure, sample_counts  # noqa: E402
from .bloch import bloch_angles, bloch_vector, reduced_density_matrix  # noqa: E402

__all__ = [
    "__version__",
    "ATOL", "DTYPE", "amplitude", "as_amplitudes", "mag2",
    "QSimError", "DimensionError", "QubitIndexError", "InvalidGateError", "NormalizationError",
    "State", "Gate", "is_unitary", "gates",
    "Circuit", "SimulatorConfig", "Simulator",
    "Outcome", "measure", "sample_counts",
    "reduced_density_matrix", "bloch_vector", "bloch_angles",
]
