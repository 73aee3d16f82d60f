# qsim/indexing.py
#
# Basis-index arithmetic. Qubit 0 is the most significant bit, so for n
# qubits qubit q sits at bit position n-1-q.
from typing import List, Sequence

import numpy as np


def bit_positions(n: int, qubits: Sequence[int]) -> List[int]:
    return [n - 1 - q for q in qubits]

def target_mask(n: int, targets: Sequence[int]) -> int:
    mask = 0
    for p in bit_positions(n, targets):
        mask |= 1 << p
    return mask

def group_offsets(n: int, targets: Sequence[int]) -> np.ndarray:
    """
    offsets[j] is the index offset (from a group's base) of the amplitude
    that row/column j of a gate matrix bound to `targets` addresses.
    targets[0] is the most significant bit of j.
    """
    k = len(targets)
    pos = bit_positions(n, targets)
    offs = np.zeros(1 << k, dtype=np.int64)
    for j in range(1 << k):
        for b, p in enumerate(pos):
            if (j >> (k - 1 - b)) & 1:
                offs[j] |= 1 << p
    return offs

def group_bases(n: int, targets: Sequence[int]) -> np.ndarray:
    """Indices with every target bit cleared: one per group, ascending."""
    mask = target_mask(n, targets)
    idx = np.arange(1 << n, dtype=np.int64)
    return idx[(idx & mask) == 0]

def free_bits(n: int, targets: Sequence[int]) -> np.ndarray:
    """Bit positions not touched by `targets`, ascending."""
    used = set(bit_positions(n, targets))
    return np.array([p for p in range(n) if p not in used], dtype=np.int64)

def subindex(n: int, qubits: Sequence[int]) -> np.ndarray:
    """
    For every basis index, the integer formed by the bits of `qubits`
    (qubits[0] most significant).
    """
    idx = np.arange(1 << n, dtype=np.int64)
    keys = np.zeros(1 << n, dtype=np.int64)
    for q in qubits:
        keys = (keys << 1) | ((idx >> (n - 1 - q)) & 1)
    return keys
