"""
Indicador epsilon aditivo.

``I(A, B)`` es el menor desplazamiento que hay que restar a ``A`` para que
domine debilmente a ``B``. Un conjunto vacio (por ejemplo el archivo antes
de la primera insercion) se sustituye por el punto ancla, igual que en R2.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from ..core.errors import ConfigurationError, InvalidSnapshot
from .base import QualityIndicator, as_objective_matrix


def additive_epsilon(A: Any, B: Any) -> float:
    A = as_objective_matrix(A)
    B = as_objective_matrix(B)
    if A.shape[0] == 0 or B.shape[0] == 0:
        raise InvalidSnapshot("Additive epsilon needs two non-empty solution sets")
    # (|A|, |B|, m) -> max sobre objetivos, min sobre A, max sobre B
    shift = (A[:, None, :] - B[None, :, :]).max(axis=2)
    return float(shift.min(axis=0).max())


class AdditiveEpsilonIndicator(QualityIndicator):
    name = "AE"
    maximize = False

    def __init__(
        self,
        reference_set: Optional[Any] = None,
        anchor: Optional[Sequence[float]] = None,
    ) -> None:
        self.reference_set = None
        if reference_set is not None:
            self.reference_set = np.array(as_objective_matrix(reference_set), dtype=float)
            self.reference_set.setflags(write=False)
        self.anchor: Optional[np.ndarray] = None
        if anchor is not None:
            self.anchor = np.array(anchor, dtype=float).reshape(1, -1)
            self.anchor.setflags(write=False)

    def _or_anchor(self, F: Any, other: np.ndarray) -> np.ndarray:
        F = as_objective_matrix(F)
        if F.shape[0] > 0:
            return F
        if self.anchor is not None:
            return self.anchor
        # sin ancla: el peor punto del otro conjunto hace de conjunto vacio
        return other.max(axis=0, keepdims=True)

    def evaluate(self, F: Any) -> float:
        if self.reference_set is None:
            raise ConfigurationError("Unary additive epsilon requires a reference set")
        return additive_epsilon(F, self.reference_set)

    def improvement(self, before: Any, after: Any) -> float:
        before = as_objective_matrix(before)
        after = as_objective_matrix(after)
        if before.shape[0] == 0 and after.shape[0] == 0:
            return 0.0
        if before.shape[0] == 0:
            before = self._or_anchor(before, after)
        elif after.shape[0] == 0:
            after = self._or_anchor(after, before)
        return additive_epsilon(before, after) - additive_epsilon(after, before)

    def binary(self, a: Any, b: Any) -> float:
        return max(0.0, additive_epsilon(a, b))

    def __repr__(self) -> str:
        anchor = None if self.anchor is None else self.anchor.ravel().tolist()
        return f"AdditiveEpsilonIndicator(anchor={anchor})"
