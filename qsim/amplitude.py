# qsim/amplitude.py
import numpy as np

from .errors import DimensionError

# All amplitudes are double precision; tolerances below assume it.
DTYPE = np.complex128
ATOL = 1e-9


def amplitude(re: float, im: float = 0.0) -> np.complex128:
    return DTYPE(complex(re, im))

def mag2(a) -> float:
    """|a|^2 without the square root of abs()."""
    return float(a.real * a.real + a.imag * a.imag)

def as_amplitudes(values) -> np.ndarray:
    """
    Copy `values` into a fresh 1-D complex128 array.
    Accepts complex sequences/ndarrays or a sequence of (re, im) pairs.
    """
    arr = np.asarray(values)
    if arr.ndim == 2 and arr.shape[1] == 2 and not np.iscomplexobj(arr):
        arr = arr[:, 0] + 1j * arr[:, 1]
    if arr.ndim != 1:
        raise DimensionError(f"amplitudes must be 1-D, got shape {arr.shape}")
    return np.array(arr, dtype=DTYPE)
