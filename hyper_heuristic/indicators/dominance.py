"""
Dominancia de Pareto, frente no dominado y escalarizacion de Tchebycheff
apoyados en pymoo.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Tuple

import numpy as np
from pymoo.decomposition.tchebicheff import Tchebicheff
from pymoo.util.dominator import Dominator
from pymoo.util.nds.non_dominated_sorting import NonDominatedSorting

from ..core.errors import InvalidSnapshot

_NDS = NonDominatedSorting()
_TCHEBYCHEFF = Tchebicheff()


def objectives(solution: Any) -> np.ndarray:
    """Vector de objetivos de una solucion (convencion ``F`` de pymoo)."""
    F = getattr(solution, "F", None)
    if F is None:
        raise InvalidSnapshot(f"Solution {solution!r} has no objective values (F)")
    arr = np.asarray(F, dtype=float).ravel()
    if arr.size == 0:
        raise InvalidSnapshot(f"Solution {solution!r} has an empty objective vector")
    return arr


def objective_matrix(solutions: Iterable[Any]) -> np.ndarray:
    rows = [objectives(s) for s in solutions]
    if not rows:
        return np.empty((0, 0), dtype=float)
    return np.vstack(rows)


def compare(a: Any, b: Any) -> int:
    """1 si ``a`` domina a ``b``, -1 si ``b`` domina a ``a``, 0 en otro caso."""
    return int(Dominator.get_relation(objectives(a), objectives(b)))


def non_dominated(solutions: Sequence[Any]) -> Tuple[Any, ...]:
    """Subconjunto no dominado de ``solutions`` preservando el orden original."""
    if len(solutions) == 0:
        return tuple()
    F = objective_matrix(solutions)
    idx = _NDS.do(F, only_non_dominated_front=True)
    keep = sorted(int(i) for i in np.atleast_1d(idx))
    return tuple(solutions[i] for i in keep)


def tchebycheff(F: Any, weights: Any, ideal_point: Any) -> np.ndarray:
    """
    Valores de Tchebycheff fila a fila: ``F[i]`` evaluado con ``weights[i]``.
    """
    F = np.atleast_2d(np.asarray(F, dtype=float))
    W = np.atleast_2d(np.asarray(weights, dtype=float))
    if F.shape[0] == 1 and W.shape[0] > 1:
        F = np.repeat(F, W.shape[0], axis=0)
    if F.shape != W.shape:
        raise InvalidSnapshot(
            f"Objective matrix {F.shape} does not match weight matrix {W.shape}"
        )
    ideal = np.asarray(ideal_point, dtype=float).ravel()
    values = _TCHEBYCHEFF.do(F, weights=W, _type="one_to_one", ideal_point=ideal)
    return np.asarray(values, dtype=float).ravel()
