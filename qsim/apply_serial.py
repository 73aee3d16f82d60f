# qsim/apply_serial.py
from .gate import Gate
from .indexing import group_bases, group_offsets
from .state import State

def apply_gate(state: State, gate: Gate):
    """
    Apply a k-qubit gate in place without building the 2^n x 2^n operator.

    Basis indices are split into 2^(n-k) groups that differ only in the
    target bits. Row g of `idx` holds one group's 2^k indices in matrix
    order, so each row is gathered, multiplied by U and scattered back.
    Cost is O(2^n * 2^k).
    """
    psi = state.psi
    U = gate.matrix
    assert U.shape == (1 << gate.arity,) * 2
    offsets = group_offsets(state.n, gate.targets)
    bases = group_bases(state.n, gate.targets)
    # target bits are clear in every base, so + is the same as |
    idx = bases[:, None] + offsets[None, :]
    # (U a)^T = a^T U^T, applied to all groups at once
    psi[idx] = psi[idx] @ U.T
