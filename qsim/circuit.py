# qsim/circuit.py
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from . import gates as G
from .errors import DimensionError, QubitIndexError
from .gate import Gate
from .state import State

@dataclass
class Circuit:
    """
    Append-only gate program over n qubits. Gates run in append order;
    nothing is reordered or fused.
    """
    n: int
    ops: List[Gate] = field(default_factory=list)

    def __post_init__(self):
        if self.n < 1:
            raise DimensionError(f"need at least one qubit, got n={self.n}")
        ops, self.ops = list(self.ops), []
        self.extend(ops)

    @staticmethod
    def empty(n: int) -> "Circuit":
        return Circuit(n, [])

    def add_gate(self, gate: Gate) -> "Circuit":
        for q in gate.targets:
            if not 0 <= q < self.n:
                raise QubitIndexError(
                    f"{gate.name}: qubit {q} out of range for a {self.n}-qubit circuit")
        self.ops.append(gate)
        return self

    def extend(self, gates: Iterable[Gate]) -> "Circuit":
        for g in gates:
            self.add_gate(g)
        return self

    def h(self, k: int): return self.add_gate(G.h(k))
    def x(self, k: int): return self.add_gate(G.x(k))
    def y(self, k: int): return self.add_gate(G.y(k))
    def z(self, k: int): return self.add_gate(G.z(k))
    def s(self, k: int): return self.add_gate(G.s(k))
    def t(self, k: int): return self.add_gate(G.t(k))
    def phase(self, k: int, theta: float): return self.add_gate(G.phase(theta, k))
    def rx(self, k: int, theta: float): return self.add_gate(G.rx(theta, k))
    def ry(self, k: int, theta: float): return self.add_gate(G.ry(theta, k))
    def rz(self, k: int, theta: float): return self.add_gate(G.rz(theta, k))
    def cnot(self, c: int, t: int): return self.add_gate(G.cnot(c, t))
    def cz(self, c: int, t: int): return self.add_gate(G.cz(c, t))
    def swap(self, a: int, b: int): return self.add_gate(G.swap(a, b))
    def toffoli(self, c1: int, c2: int, t: int): return self.add_gate(G.toffoli(c1, c2, t))

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Gate]:
        return iter(self.ops)

    def run(self, initial=None, **config) -> State:
        """Shortcut for Simulator(**config).run(self, initial)."""
        from .simulator import Simulator
        return Simulator(**config).run(self, initial)

    def __repr__(self) -> str:  # pragma: no cover
        lines = [f"Circuit(n={self.n})"]
        for i, g in enumerate(self.ops):
            lines.append(f"  {i}: {g.name}{g.targets}")
        return "\n".join(lines)
