"""
Indicador R2 unario con vectores de referencia de pymoo.

R2(A) = media sobre los pesos ``w`` de ``min_a max_j w_j |z*_j - a_j|``.
Valores menores son mejores. El punto ancla (el punto de referencia del
hipervolumen) solo sustituye al conjunto vacio para que su valor sea finito;
nunca se mezcla con conjuntos no vacios.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence

import numpy as np
from pymoo.util.ref_dirs import get_reference_directions

from ..core.errors import ConfigurationError
from .base import QualityIndicator, as_objective_matrix


def reference_vectors(n_obj: int, count: int, seed: int = 1) -> np.ndarray:
    """
    Genera exactamente ``count`` vectores de direccion en el simplex.

    Usa Das-Dennis cuando existe un numero de particiones que produce
    ``count`` vectores (50 para 2 objetivos, 91 para 3) y la construccion por
    energia de Riesz en otro caso.
    """
    if n_obj < 1:
        raise ConfigurationError(f"Number of objectives must be positive, got {n_obj}")
    if count < 1:
        raise ConfigurationError(f"Number of reference vectors must be positive, got {count}")
    if n_obj == 1:
        return np.ones((count, 1), dtype=float)
    partitions = 0
    while True:
        n_dirs = math.comb(partitions + n_obj - 1, n_obj - 1)
        if n_dirs == count:
            return get_reference_directions("das-dennis", n_obj, n_partitions=partitions)
        if n_dirs > count:
            break
        partitions += 1
    return get_reference_directions("energy", n_obj, count, seed=seed)


class R2Indicator(QualityIndicator):
    name = "R2"
    maximize = False

    def __init__(
        self,
        n_obj: int,
        num_vectors: int,
        ideal_point: Optional[Sequence[float]] = None,
        anchor: Optional[Sequence[float]] = None,
    ) -> None:
        self.n_obj = int(n_obj)
        self.num_vectors = int(num_vectors)
        self.weights = np.asarray(reference_vectors(self.n_obj, self.num_vectors), dtype=float)
        if ideal_point is None:
            ideal = np.zeros(self.n_obj, dtype=float)
        else:
            ideal = np.asarray(ideal_point, dtype=float).ravel()
        if ideal.shape[0] != self.n_obj:
            raise ConfigurationError(
                f"Ideal point must have {self.n_obj} components, got {ideal.shape[0]}"
            )
        self.ideal_point = ideal
        self.anchor: Optional[np.ndarray] = None
        if anchor is not None:
            self.anchor = np.asarray(anchor, dtype=float).reshape(1, -1)
            if self.anchor.shape[1] != self.n_obj:
                raise ConfigurationError(
                    f"Anchor point must have {self.n_obj} components, got {self.anchor.shape[1]}"
                )
        for arr in (self.weights, self.ideal_point, self.anchor):
            if arr is not None:
                arr.setflags(write=False)

    def evaluate(self, F: Any) -> float:
        F = as_objective_matrix(F)
        if F.shape[0] == 0:
            if self.anchor is None:
                return float("inf")
            F = self.anchor
        diff = np.abs(F - self.ideal_point)
        # utilidad de cada solucion para cada vector: (k, n)
        utility = (self.weights[:, None, :] * diff[None, :, :]).max(axis=2)
        return float(utility.min(axis=1).mean())

    def __repr__(self) -> str:
        return (
            f"R2Indicator(n_obj={self.n_obj}, num_vectors={self.num_vectors}, "
            f"ideal_point={self.ideal_point.tolist()})"
        )
