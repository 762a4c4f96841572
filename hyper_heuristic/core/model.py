"""
Entidades basicas compartidas: heuristicas candidatas y soluciones.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np


class Heuristic:
    """
    Identidad opaca de un operador de busqueda.

    La igualdad y el hash son por identidad: dos instancias distintas nunca
    son iguales aunque envuelvan el mismo operador, por lo que sirven como
    claves del repositorio sin riesgo de aliasing.
    """

    __slots__ = ("name", "operator")

    def __init__(self, name: str, operator: Any = None) -> None:
        self.name = str(name)
        self.operator = operator

    def __repr__(self) -> str:
        return f"Heuristic({self.name!r})"

    def __str__(self) -> str:
        return self.name


class Solution:
    """
    Solucion minima con la convencion de pymoo: ``F`` objetivos, ``X`` variables.

    ``heuristic`` identifica la heuristica que la creo y solo lo usan las
    definiciones de contribucion de poblacion.
    """

    __slots__ = ("F", "X", "heuristic")

    def __init__(self, F: Any, X: Any = None, heuristic: Optional[Heuristic] = None) -> None:
        objectives = np.array(F, dtype=float).ravel()
        objectives.setflags(write=False)
        self.F = objectives
        self.X = X
        self.heuristic = heuristic

    def __repr__(self) -> str:
        return f"Solution(F={self.F.tolist()})"
