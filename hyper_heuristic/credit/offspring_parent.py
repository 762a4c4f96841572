"""
Creditos que comparan a cada hijo con sus propios padres.

Con varios pares (hijo, padre) el credito es el del mejor par: basta con que
un hijo supere a alguno de sus padres.
"""

from __future__ import annotations

import math

from ..indicators.base import QualityIndicator
from ..indicators.dominance import compare, objective_matrix, objectives, tchebycheff
from .base import CreditDefinition, CreditFamily
from .snapshot import CreditDefinedOn, PopulationSnapshot


class ParentDomination(CreditDefinition):
    """
    ``satisfy`` si el hijo domina al padre, ``disatisfy`` si el padre domina
    al hijo y ``neither`` si son mutuamente no dominados.
    """

    family = CreditFamily.OFFSPRING_PARENT
    defined_on = CreditDefinedOn.PARENT

    def __init__(self, satisfy: float = 1.0, neither: float = 0.0, disatisfy: float = 0.0) -> None:
        self.satisfy = float(satisfy)
        self.neither = float(neither)
        self.disatisfy = float(disatisfy)

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        offspring = snapshot.require_offspring()
        parents = snapshot.require_parents()
        best = max(compare(o, p) for o in offspring for p in parents)
        if best > 0:
            return self.satisfy
        if best < 0:
            return self.disatisfy
        return self.neither

    def __repr__(self) -> str:
        return (
            f"ParentDomination(satisfy={self.satisfy}, neither={self.neither}, "
            f"disatisfy={self.disatisfy})"
        )


class ParentDecomposition(CreditDefinition):
    """1 si el hijo mejora al padre en el subproblema asignado, 0 en otro caso."""

    family = CreditFamily.OFFSPRING_PARENT
    defined_on = CreditDefinedOn.PARENT

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        offspring = snapshot.require_offspring()
        parents = snapshot.require_parents()
        nb = snapshot.require_neighborhood()
        w = nb.own_weights
        g_offspring = tchebycheff(objective_matrix(offspring), [w] * len(offspring), nb.ideal_point)
        g_parents = tchebycheff(objective_matrix(parents), [w] * len(parents), nb.ideal_point)
        return 1.0 if float(g_offspring.min()) < float(g_parents.min()) else 0.0


class OPBinaryIndicator(CreditDefinition):
    """
    Comparacion binaria hijo/padre al estilo IBEA.

    credito = exp(-I(o, p) / (c * kappa)) - exp(-I(p, o) / (c * kappa)),
    con ``I(a, b)`` cuanto peor es ``a`` que ``b`` y ``c`` el mayor de ambos
    valores. Hijo identico al padre -> 0.
    """

    family = CreditFamily.OFFSPRING_PARENT
    defined_on = CreditDefinedOn.PARENT

    def __init__(self, indicator: QualityIndicator, kappa: float = 0.05) -> None:
        self.indicator = indicator
        self.kappa = float(kappa)

    def _pair_credit(self, offspring, parent) -> float:
        f_o = objectives(offspring)
        f_p = objectives(parent)
        i_op = self.indicator.binary(f_o, f_p)
        i_po = self.indicator.binary(f_p, f_o)
        c = max(i_op, i_po)
        if c <= 0.0:
            return 0.0
        scale = c * self.kappa
        return math.exp(-i_op / scale) - math.exp(-i_po / scale)

    def _compute(self, snapshot: PopulationSnapshot) -> float:
        offspring = snapshot.require_offspring()
        parents = snapshot.require_parents()
        return max(self._pair_credit(o, p) for o in offspring for p in parents)

    def __repr__(self) -> str:
        return f"OPBinaryIndicator(indicator={self.indicator!r}, kappa={self.kappa})"
