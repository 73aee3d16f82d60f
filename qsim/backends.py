# qsim/backends.py
from typing import Callable

BACKENDS = ("serial", "numba")

def get_backend(name: str) -> Callable:
    """Return the apply_gate(state, gate) function of backend `name`."""
    if name == "serial":
        from .apply_serial import apply_gate
        return apply_gate
    if name == "numba":
        try:
            from .apply_numba import apply_gate
        except ImportError as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
        return apply_gate
    raise ValueError(f"Unknown backend: {name}")

def set_threads(backend: str, num_threads: int):
    if backend == "numba":
        from .apply_numba import set_threads as _set
        _set(int(num_threads))
