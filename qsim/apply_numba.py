# qsim/apply_numba.py
import numpy as np
from numba import njit, prange, set_num_threads, get_num_threads

from .gate import Gate
from .indexing import bit_positions, free_bits, group_offsets
from .state import State

# ---------- low-level kernels (Numba JIT) ----------
# Groups never overlap, so each prange iteration owns its amplitudes.
# No fastmath: floating-point order stays fixed, so reruns are bit-identical.

@njit(parallel=True)
def _single_qubit_kernel(psi, U2, p):
    N = psi.shape[0]
    step = 1 << p
    for gi in prange(N >> 1):
        g = np.int64(gi)  # prange may hand out unsigned indices
        # insert a 0 at bit p of g
        i0 = ((g >> p) << (p + 1)) | (g & (step - 1))
        i1 = i0 | step
        a0 = psi[i0]
        a1 = psi[i1]
        psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
        psi[i1] = U2[1,0]*a0 + U2[1,1]*a1

@njit(parallel=True)
def _group_kernel(psi, U, offsets, free):
    d = offsets.shape[0]
    ngroups = psi.shape[0] // d
    nfree = free.shape[0]
    for gi in prange(ngroups):
        g = np.int64(gi)
        # scatter the bits of g into the non-target positions
        base = 0
        for b in range(nfree):
            if (g >> b) & 1:
                base |= 1 << free[b]
        amps = np.empty(d, dtype=psi.dtype)
        for j in range(d):
            amps[j] = psi[base + offsets[j]]
        for r in range(d):
            acc = 0j
            for c in range(d):
                acc += U[r, c] * amps[c]
            psi[base + offsets[r]] = acc

# ---------- user-facing apply helpers ----------

def set_threads(n: int):
    set_num_threads(n)

def get_threads() -> int:
    return get_num_threads()

def apply_gate(state: State, gate: Gate):
    U = np.array(gate.matrix)  # writable copy for the JIT
    if gate.arity == 1:
        (p,) = bit_positions(state.n, gate.targets)
        _single_qubit_kernel(state.psi, U, p)
    else:
        _group_kernel(state.psi, U,
                      group_offsets(state.n, gate.targets),
                      free_bits(state.n, gate.targets))
