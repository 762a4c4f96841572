"""
Contrato comun de las definiciones de credito.

Una definicion, una vez construida para un problema, no guarda estado y puede
reutilizarse en todas las generaciones (y compartirse entre hilos).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum

from ..core.errors import InvalidSnapshot
from .snapshot import CreditDefinedOn, PopulationSnapshot


class CreditFamily(Enum):
    OFFSPRING_PARENT = "offspring_parent"
    OFFSPRING_POPULATION = "offspring_population"
    POPULATION_CONTRIBUTION = "population_contribution"


class CreditDefinition(ABC):
    family: CreditFamily
    defined_on: CreditDefinedOn

    def compute(self, snapshot: PopulationSnapshot) -> float:
        """Credito escalar de una aplicacion de heuristica."""
        return self._checked(self._compute(snapshot))

    def _checked(self, value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise InvalidSnapshot(f"{self!r} produced a non-finite credit: {value}")
        return value

    @abstractmethod
    def _compute(self, snapshot: PopulationSnapshot) -> float:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(on={self.defined_on.value})"
