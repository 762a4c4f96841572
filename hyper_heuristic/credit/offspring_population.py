"""
Creditos que miden el efecto del hijo sobre la estructura de la poblacion:
vecindario del subproblema, frente de Pareto o archivo secundario.
"""

from __future__ import annotations

import numpy as np

from ..core.errors import InvalidSnapshot
from ..indicators.base import QualityIndicator
from ..indicators.dominance import objective_matrix, tchebycheff
from .base import CreditDefinition, CreditFamily
from .snapshot import CreditDefinedOn, PopulationSnapshot, contains


class OffspringNeighborhood(CreditDefinition):
    """
    Suma de mejoras relativas de Tchebycheff que el hijo logra sobre los
    ocupantes del vecindario: ``max(0, (g_old - g_new) / g_old)``.
    """

    family = CreditFamily.OFFSPRING_POPULATION
    defined_on = CreditDefinedOn.NEIGHBORHOOD

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        offspring = snapshot.require_offspring()
        nb = snapshot.require_neighborhood()
        if not nb.before:
            raise InvalidSnapshot("Neighborhood has no incumbents before insertion")
        g_old = tchebycheff(objective_matrix(nb.before), nb.weights, nb.ideal_point)
        g_new = np.min(
            [tchebycheff(objective_matrix([o]), nb.weights, nb.ideal_point) for o in offspring],
            axis=0,
        )
        improved = (g_old > 0.0) & (g_new < g_old)
        if not np.any(improved):
            return 0.0
        gains = (g_old[improved] - g_new[improved]) / g_old[improved]
        return float(gains.sum())


class OffspringSetMembership(CreditDefinition):
    """``satisfy`` si algun hijo entro en el conjunto de referencia, ``disatisfy`` si no."""

    family = CreditFamily.OFFSPRING_POPULATION

    def __init__(
        self,
        satisfy: float = 1.0,
        disatisfy: float = 0.0,
        defined_on: CreditDefinedOn = CreditDefinedOn.PARETO_FRONT,
    ) -> None:
        if defined_on not in (CreditDefinedOn.PARETO_FRONT, CreditDefinedOn.ARCHIVE):
            raise ValueError(f"Membership credit cannot be defined on {defined_on.value}")
        self.satisfy = float(satisfy)
        self.disatisfy = float(disatisfy)
        self.defined_on = defined_on

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        offspring = snapshot.require_offspring()
        members = snapshot.reference_set(self.defined_on, after=True)
        if any(contains(members, o) for o in offspring):
            return self.satisfy
        return self.disatisfy


class OffspringSetIndicator(CreditDefinition):
    """Mejora del indicador del conjunto de referencia tras insertar al hijo."""

    family = CreditFamily.OFFSPRING_POPULATION

    def __init__(
        self,
        indicator: QualityIndicator,
        defined_on: CreditDefinedOn = CreditDefinedOn.PARETO_FRONT,
    ) -> None:
        if defined_on not in (CreditDefinedOn.PARETO_FRONT, CreditDefinedOn.ARCHIVE):
            raise ValueError(f"Indicator credit cannot be defined on {defined_on.value}")
        self.indicator = indicator
        self.defined_on = defined_on

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        snapshot.require_offspring()
        before = objective_matrix(snapshot.reference_set(self.defined_on, after=False))
        after = objective_matrix(snapshot.reference_set(self.defined_on, after=True))
        return self.indicator.improvement(before, after)

    def __repr__(self) -> str:
        return f"OffspringSetIndicator(indicator={self.indicator!r}, on={self.defined_on.value})"
