"""
Hipervolumen respecto a un punto de referencia fijo (pymoo ``HV``).
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from pymoo.indicators.hv import HV

from ..core.errors import ConfigurationError
from .base import QualityIndicator, as_objective_matrix


class HypervolumeIndicator(QualityIndicator):
    name = "HV"
    maximize = True

    def __init__(self, ref_point: Sequence[float]) -> None:
        ref = np.asarray(ref_point, dtype=float).ravel()
        if ref.size == 0:
            raise ConfigurationError("Hypervolume requires a non-empty reference point")
        self.ref_point = ref
        self.ref_point.setflags(write=False)
        self._hv = HV(ref_point=ref)

    def evaluate(self, F: Any) -> float:
        F = as_objective_matrix(F)
        if F.shape[0] == 0:
            return 0.0
        # solo cuentan los puntos que dominan estrictamente la referencia
        F = F[np.all(F < self.ref_point, axis=1)]
        if F.shape[0] == 0:
            return 0.0
        return float(self._hv.do(F))

    def __repr__(self) -> str:
        return f"HypervolumeIndicator(ref_point={self.ref_point.tolist()})"
