"""
Interfaz comun para indicadores de calidad sobre conjuntos de soluciones.

Un indicador es una funcion pura: recibe una matriz de objetivos ``F`` de
forma ``(n, m)`` y devuelve un escalar. Las familias de credito que solo
difieren en el indicador comparten implementacion a traves de
``improvement`` y ``binary``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


def as_objective_matrix(F: Any) -> np.ndarray:
    """Convierte ``F`` en una matriz 2D de floats (una fila por solucion)."""
    arr = np.asarray(F, dtype=float)
    if arr.ndim == 1:
        if arr.size == 0:
            return arr.reshape(0, 0)
        return arr.reshape(1, -1)
    return arr


class QualityIndicator(ABC):
    name: str = "indicator"
    maximize: bool = True

    @abstractmethod
    def evaluate(self, F: Any) -> float:
        """Valor del indicador para el conjunto ``F``."""

    def improvement(self, before: Any, after: Any) -> float:
        """
        Mejora del conjunto ``after`` respecto a ``before``.

        Positivo significa que ``after`` es mejor segun el indicador,
        independientemente de si este se maximiza o se minimiza.
        """
        value_before = self.evaluate(before)
        value_after = self.evaluate(after)
        if self.maximize:
            return float(value_after - value_before)
        return float(value_before - value_after)

    def binary(self, a: Any, b: Any) -> float:
        """
        Cuanto peor es ``a`` que ``b`` (siempre >= 0).

        Vale 0 cuando ``a`` domina debilmente a ``b``.
        """
        A = as_objective_matrix(a)
        B = as_objective_matrix(b)
        return max(0.0, self.improvement(A, np.vstack([A, B])))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
