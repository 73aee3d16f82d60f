# qsim/config.py
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .amplitude import ATOL

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class SimulatorConfig:
    backend: str = "serial"
    num_threads: Optional[int] = None   # numba pool size; None keeps numba's default
    check_norm: bool = True             # verify ||psi||^2 == 1 after a run
    atol: float = ATOL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SimulatorConfig":
        """
        Defaults overridden by QSIM_BACKEND, QSIM_NUM_THREADS,
        QSIM_CHECK_NORM and QSIM_ATOL when set.
        """
        env = os.environ if environ is None else environ
        kw = {}
        if env.get("QSIM_BACKEND"):
            kw["backend"] = env["QSIM_BACKEND"]
        if env.get("QSIM_NUM_THREADS"):
            kw["num_threads"] = int(env["QSIM_NUM_THREADS"])
        if env.get("QSIM_CHECK_NORM"):
            flag = env["QSIM_CHECK_NORM"].strip().lower()
            if flag not in _TRUE | _FALSE:
                raise ValueError(f"QSIM_CHECK_NORM: expected a boolean, got {flag!r}")
            kw["check_norm"] = flag in _TRUE
        if env.get("QSIM_ATOL"):
            kw["atol"] = float(env["QSIM_ATOL"])
        return cls(**kw)
