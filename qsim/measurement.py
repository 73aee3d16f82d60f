# qsim/measurement.py
import logging
from collections import Counter
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .amplitude import ATOL
from .errors import NormalizationError, QubitIndexError
from .indexing import subindex
from .state import State

logger = logging.getLogger(__name__)


class Outcome(NamedTuple):
    basis_index: int    # sub-outcome over the measured qubits for partial measurement
    probability: float  # probability of that outcome before collapse


def _check_qubits(n: int, qubits: Sequence[int]) -> Tuple[int, ...]:
    qs = tuple(int(q) for q in qubits)
    if not qs:
        raise QubitIndexError("no qubits to measure")
    if len(set(qs)) != len(qs):
        raise QubitIndexError(f"duplicate qubits in {qs}")
    for q in qs:
        if not 0 <= q < n:
            raise QubitIndexError(f"qubit {q} out of range for {n} qubits")
    return qs

def _distribution(state: State, qubits, atol: float):
    """
    (probabilities over outcomes, per-index outcome keys or None, measured
    qubits as a tuple).
    """
    probs = state.probabilities()
    total = float(probs.sum())
    if abs(total - 1.0) > atol:
        raise NormalizationError(f"probabilities sum to {total}, expected 1")
    if qubits is None:
        return probs, None, tuple(range(state.n))
    qs = _check_qubits(state.n, qubits)
    keys = subindex(state.n, qs)
    return np.bincount(keys, weights=probs, minlength=1 << len(qs)), keys, qs

def _draw(probs: np.ndarray, u) -> np.ndarray:
    """Inverse CDF: first index whose cumulative probability exceeds u."""
    cdf = np.cumsum(probs)
    i = np.searchsorted(cdf, u, side="right")
    # u can land above cdf[-1] by rounding; take the last reachable outcome
    last = np.flatnonzero(probs)[-1]
    return np.minimum(i, last)

def measure(state: State, rng, qubits: Optional[Sequence[int]] = None,
            atol: float = ATOL) -> Outcome:
    """
    Born-rule measurement that collapses `state` in place.

    rng supplies the uniform draw (anything with .random(), normally a
    numpy Generator), so a fixed seed reproduces a measurement sequence.
    With qubits=None every qubit is measured and the state becomes the
    sampled basis state exactly. Otherwise only the listed qubits are
    measured: amplitudes that disagree with the observed bits are zeroed
    and the rest renormalized.
    """
    probs, keys, qs = _distribution(state, qubits, atol)
    i = int(_draw(probs, rng.random()))
    p = float(probs[i])

    psi = state.psi
    if keys is None:
        psi[:] = 0
        psi[i] = 1.0 + 0.0j
    else:
        psi[keys != i] = 0
        psi /= np.sqrt(p)
    logger.debug("measure %s -> %d (p=%.6g)", "all" if keys is None else qs, i, p)
    return Outcome(i, p)

def sample_counts(state: State, shots: int, rng,
                  qubits: Optional[Sequence[int]] = None,
                  atol: float = ATOL) -> Dict[str, int]:
    """
    Bitstring -> count over `shots` draws, without collapsing the state.
    Bitstrings list the measured qubits left to right (qubit 0 first by
    default). rng must be a numpy Generator.
    """
    if shots < 1:
        raise ValueError("shots must be >= 1")
    probs, _, qs = _distribution(state, qubits, atol)
    width = len(qs)
    outcomes = _draw(probs, rng.random(shots))
    counts = Counter(format(int(i), f"0{width}b") for i in outcomes)
    return dict(counts)
