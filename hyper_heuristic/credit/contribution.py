"""
Creditos de contribucion a la poblacion.

Ademas del credito escalar del hijo (``compute``), estas definiciones pueden
repartir credito entre todas las heuristicas que poseen miembros del conjunto
de referencia (``compute_all``), usando la heuristica creadora registrada en
cada solucion.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict, Hashable, Iterable, Sequence, Tuple

from ..core.errors import InvalidSnapshot
from ..indicators.base import QualityIndicator
from ..indicators.dominance import objective_matrix
from .base import CreditDefinition, CreditFamily
from .snapshot import CreditDefinedOn, PopulationSnapshot, contains


def _owned_by(members: Sequence[Any], heuristic: Hashable) -> Tuple[Any, ...]:
    return tuple(m for m in members if getattr(m, "heuristic", None) is heuristic)


class ContributionDefinition(CreditDefinition):
    family = CreditFamily.POPULATION_CONTRIBUTION

    def members(self, snapshot: PopulationSnapshot) -> Tuple[Any, ...]:
        """Conjunto de referencia tras la insercion."""
        return snapshot.reference_set(self.defined_on, after=True)

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        offspring = snapshot.require_offspring()
        members = self.members(snapshot)
        return self._credit_for(members, [m for m in members if any(m is o for o in offspring)])

    def compute_all(
        self, snapshot: PopulationSnapshot, heuristics: Iterable[Hashable]
    ) -> Dict[Hashable, float]:
        """Credito de cada heuristica segun los miembros que creo."""
        members = self.members(snapshot)
        return {h: self._checked(self._credit_for(members, _owned_by(members, h))) for h in heuristics}

    @abstractmethod
    def _credit_for(self, members: Sequence[Any], owned: Sequence[Any]) -> float:
        ...


class _MembershipContribution(ContributionDefinition):
    def __init__(self, satisfy: float = 1.0, disatisfy: float = 0.0) -> None:
        self.satisfy = float(satisfy)
        self.disatisfy = float(disatisfy)

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        offspring = snapshot.require_offspring()
        members = self.members(snapshot)
        if any(contains(members, o) for o in offspring):
            return self.satisfy
        return self.disatisfy

    def _credit_for(self, members: Sequence[Any], owned: Sequence[Any]) -> float:
        if not owned:
            return self.disatisfy
        return self.satisfy * len(owned)


class DecompositionContribution(_MembershipContribution):
    """``satisfy`` si un hijo ocupa algun subproblema de su vecindario."""

    defined_on = CreditDefinedOn.NEIGHBORHOOD

    def members(self, snapshot: PopulationSnapshot) -> Tuple[Any, ...]:
        nb = snapshot.require_neighborhood()
        if not nb.after:
            raise InvalidSnapshot("Neighborhood has no incumbents after insertion")
        return nb.after


class SetContribution(_MembershipContribution):
    """``satisfy`` si un hijo es miembro del frente o del archivo."""

    def __init__(
        self,
        satisfy: float = 1.0,
        disatisfy: float = 0.0,
        defined_on: CreditDefinedOn = CreditDefinedOn.PARETO_FRONT,
    ) -> None:
        if defined_on not in (CreditDefinedOn.PARETO_FRONT, CreditDefinedOn.ARCHIVE):
            raise ValueError(f"Contribution credit cannot be defined on {defined_on.value}")
        super().__init__(satisfy, disatisfy)
        self.defined_on = defined_on


class IndicatorContribution(ContributionDefinition):
    """
    Contribucion marginal al indicador: valor con los miembros propios menos
    valor sin ellos (orientado de modo que mayor es mejor).
    """

    def __init__(
        self,
        indicator: QualityIndicator,
        defined_on: CreditDefinedOn = CreditDefinedOn.PARETO_FRONT,
    ) -> None:
        if defined_on not in (CreditDefinedOn.PARETO_FRONT, CreditDefinedOn.ARCHIVE):
            raise ValueError(f"Contribution credit cannot be defined on {defined_on.value}")
        self.indicator = indicator
        self.defined_on = defined_on

    def _credit_for(self, members: Sequence[Any], owned: Sequence[Any]) -> float:
        if not owned:
            return 0.0
        without = [m for m in members if not contains(owned, m)]
        return self.indicator.improvement(objective_matrix(without), objective_matrix(members))

    def __repr__(self) -> str:
        return f"IndicatorContribution(indicator={self.indicator!r}, on={self.defined_on.value})"
