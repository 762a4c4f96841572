"""
Instantanea inmutable del estado de la poblacion que consumen las
definiciones de credito.

Las definiciones nunca mutan la poblacion; todos los campos son tuplas o
arreglos de solo lectura. Cuando falta un frente de Pareto pero esta la
poblacion correspondiente, el frente se deriva con el ordenamiento no
dominado de pymoo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ..core.errors import InvalidSnapshot
from ..indicators.dominance import non_dominated


class CreditDefinedOn(Enum):
    PARENT = "parent"
    NEIGHBORHOOD = "neighborhood"
    PARETO_FRONT = "pareto_front"
    ARCHIVE = "archive"


def _as_tuple(values: Optional[Sequence[Any]]) -> Optional[Tuple[Any, ...]]:
    if values is None:
        return None
    return tuple(values)


def contains(members: Sequence[Any], solution: Any) -> bool:
    """Pertenencia por identidad, no por igualdad de objetivos."""
    return any(m is solution for m in members)


@dataclass(frozen=True, eq=False)
class Neighborhood:
    """
    Vecindario de un subproblema en un algoritmo de descomposicion.

    ``weights[0]`` es el vector de pesos del subproblema asignado al hijo;
    ``before[j]`` / ``after[j]`` son las soluciones que ocupan el subproblema
    ``j`` antes y despues de insertar al hijo.
    """

    weights: np.ndarray
    before: Tuple[Any, ...]
    ideal_point: np.ndarray
    after: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        weights = np.array(self.weights, dtype=float)
        if weights.ndim == 1:
            weights = weights.reshape(1, -1)
        weights.setflags(write=False)
        ideal = np.array(self.ideal_point, dtype=float).ravel()
        ideal.setflags(write=False)
        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "ideal_point", ideal)
        object.__setattr__(self, "before", tuple(self.before))
        object.__setattr__(self, "after", tuple(self.after))
        if weights.shape[0] == 0:
            raise InvalidSnapshot("Neighborhood needs at least one weight vector")
        if len(self.before) not in (0, weights.shape[0]):
            raise InvalidSnapshot(
                f"Neighborhood has {weights.shape[0]} weights but {len(self.before)} incumbents"
            )
        if len(self.after) not in (0, weights.shape[0]):
            raise InvalidSnapshot(
                f"Neighborhood has {weights.shape[0]} weights but {len(self.after)} incumbents after insertion"
            )
        if ideal.shape[0] != weights.shape[1]:
            raise InvalidSnapshot(
                f"Ideal point has {ideal.shape[0]} components, weights have {weights.shape[1]}"
            )

    @property
    def own_weights(self) -> np.ndarray:
        return self.weights[0]


@dataclass(frozen=True)
class PopulationSnapshot:
    offspring: Tuple[Any, ...]
    parents: Tuple[Any, ...] = ()
    population_before: Tuple[Any, ...] = ()
    population_after: Tuple[Any, ...] = ()
    pareto_front: Optional[Tuple[Any, ...]] = None
    previous_pareto_front: Optional[Tuple[Any, ...]] = None
    archive: Optional[Tuple[Any, ...]] = None
    previous_archive: Optional[Tuple[Any, ...]] = None
    neighborhood: Optional[Neighborhood] = None
    generation: int = field(default=-1)

    def __post_init__(self) -> None:
        for name in ("offspring", "parents", "population_before", "population_after"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        for name in ("pareto_front", "previous_pareto_front", "archive", "previous_archive"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))

    # Accesos con validacion ---------------------------------------------
    def require_offspring(self) -> Tuple[Any, ...]:
        if not self.offspring:
            raise InvalidSnapshot("Snapshot has no offspring")
        return self.offspring

    def require_parents(self) -> Tuple[Any, ...]:
        if not self.parents:
            raise InvalidSnapshot("Snapshot has no parents for an offspring-vs-parent credit")
        return self.parents

    def require_neighborhood(self) -> Neighborhood:
        if self.neighborhood is None:
            raise InvalidSnapshot("Snapshot has no subproblem neighborhood")
        return self.neighborhood

    def front_after(self) -> Tuple[Any, ...]:
        if self.pareto_front is not None:
            return self.pareto_front
        if self.population_after:
            return non_dominated(self.population_after)
        raise InvalidSnapshot("Snapshot has neither a Pareto front nor a population after insertion")

    def front_before(self) -> Tuple[Any, ...]:
        if self.previous_pareto_front is not None:
            return self.previous_pareto_front
        if self.population_before:
            return non_dominated(self.population_before)
        raise InvalidSnapshot(
            "Snapshot has neither a previous Pareto front nor a population before insertion"
        )

    def archive_after(self) -> Tuple[Any, ...]:
        if self.archive is None:
            raise InvalidSnapshot("Snapshot has no archive")
        return self.archive

    def archive_before(self) -> Tuple[Any, ...]:
        if self.previous_archive is None:
            raise InvalidSnapshot("Snapshot has no archive before insertion")
        return self.previous_archive

    def reference_set(self, defined_on: CreditDefinedOn, after: bool = True) -> Tuple[Any, ...]:
        if defined_on is CreditDefinedOn.PARETO_FRONT:
            return self.front_after() if after else self.front_before()
        if defined_on is CreditDefinedOn.ARCHIVE:
            return self.archive_after() if after else self.archive_before()
        raise InvalidSnapshot(f"No solution set is defined on {defined_on.value}")
