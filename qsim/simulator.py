# qsim/simulator.py
import logging
from dataclasses import replace
from typing import Optional

from .amplitude import as_amplitudes
from .backends import get_backend, set_threads
from .circuit import Circuit
from .config import SimulatorConfig
from .errors import DimensionError
from .state import State

logger = logging.getLogger(__name__)


class Simulator:
    """
    Evolves a state under a circuit, one gate at a time in append order.

    The caller's initial state is copied; the run owns its copy and hands
    it back at the end. Same circuit and same input give the same bits.
    """

    def __init__(self, config: Optional[SimulatorConfig] = None, **overrides):
        config = config or SimulatorConfig()
        if overrides:
            config = replace(config, **overrides)
        self.config = config
        self._apply = get_backend(config.backend)
        if config.num_threads is not None:
            set_threads(config.backend, config.num_threads)

    def run(self, circuit: Circuit, initial_state=None) -> State:
        st = self._prepare(circuit.n, initial_state)
        logger.debug("run: %d gates on %d qubits (backend=%s)",
                     len(circuit), circuit.n, self.config.backend)
        for gate in circuit:
            self._apply(st, gate)
        if self.config.check_norm:
            st.check_normalized(tol=self.config.atol)
        return st

    def _prepare(self, n: int, initial_state) -> State:
        if initial_state is None:
            return State.zero(n)
        if isinstance(initial_state, State):
            if initial_state.n != n:
                raise DimensionError(
                    f"circuit has {n} qubits but the initial state has {initial_state.n}")
            st = initial_state.copy()
            st.check_normalized(tol=self.config.atol)
            return st
        psi = as_amplitudes(initial_state)
        if psi.shape[0] != 1 << n:
            raise DimensionError(
                f"circuit has {n} qubits, expected {1 << n} amplitudes, got {psi.shape[0]}")
        return State.from_amplitudes(n, psi, tol=self.config.atol)
