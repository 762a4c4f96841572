"""
Estrategias de agregacion de creditos.

Cada estrategia es una funcion pura del contenido del repositorio en el
momento de la llamada; un historial vacio devuelve ``default`` (0.0).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Hashable, Mapping, Optional

from ..core.config import Properties
from ..core.errors import ConfigurationError
from .repository import CreditHistory, CreditRepository


class CreditAggregationStrategy(ABC):
    def __init__(self, default: float = 0.0) -> None:
        self.default = float(default)

    def aggregate(self, repository: CreditRepository, heuristic: Hashable) -> float:
        history = repository.history(heuristic)
        if len(history) == 0:
            return self.default
        return float(self._reduce(history, repository))

    @abstractmethod
    def _reduce(self, history: CreditHistory, repository: CreditRepository) -> float:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SumAggregation(CreditAggregationStrategy):
    """Credito acumulado."""

    def _reduce(self, history: CreditHistory, repository: CreditRepository) -> float:
        return sum(history.values())


class MeanAggregation(CreditAggregationStrategy):
    def _reduce(self, history: CreditHistory, repository: CreditRepository) -> float:
        values = history.values()
        return sum(values) / len(values)


class DecayingMeanAggregation(CreditAggregationStrategy):
    """
    Media ponderada por recencia: la observacion ``i`` posiciones antes de la
    ultima pesa ``decay ** i``.
    """

    def __init__(self, decay: float = 0.8, default: float = 0.0) -> None:
        super().__init__(default)
        decay = float(decay)
        if not 0.0 < decay <= 1.0:
            raise ConfigurationError(f"decay must be in (0, 1], got {decay}")
        self.decay = decay

    def _reduce(self, history: CreditHistory, repository: CreditRepository) -> float:
        values = history.values()
        n = len(values)
        weights = [self.decay ** (n - 1 - i) for i in range(n)]
        return sum(w * v for w, v in zip(weights, values)) / sum(weights)

    def __repr__(self) -> str:
        return f"DecayingMeanAggregation(decay={self.decay})"


class WindowMeanAggregation(CreditAggregationStrategy):
    """
    Media de las observaciones de las ultimas ``window`` generaciones, contadas
    desde la generacion mas reciente del repositorio (todas las heuristicas).
    """

    def __init__(self, window: int = 10, default: float = 0.0) -> None:
        super().__init__(default)
        window = int(window)
        if window < 1:
            raise ConfigurationError(f"window must be at least 1, got {window}")
        self.window = window

    def _reduce(self, history: CreditHistory, repository: CreditRepository) -> float:
        current = repository.current_generation()
        if current is None:
            return self.default
        oldest = current - self.window + 1
        values = [obs.value for obs in history if obs.generation >= oldest]
        if not values:
            return self.default
        return sum(values) / len(values)

    def __repr__(self) -> str:
        return f"WindowMeanAggregation(window={self.window})"


def create_aggregation(
    name: str, configuration: Optional[Mapping[str, Any]] = None
) -> CreditAggregationStrategy:
    props = configuration if isinstance(configuration, Properties) else Properties(configuration)
    default = props.get_float("default_credit", 0.0)
    key = str(name).strip().lower()
    if key == "sum":
        return SumAggregation(default)
    if key == "mean":
        return MeanAggregation(default)
    if key == "decay":
        return DecayingMeanAggregation(props.get_float("decay", 0.8), default)
    if key == "window":
        return WindowMeanAggregation(props.get_int("window", 10), default)
    raise ConfigurationError(f"No such credit aggregation: {name!r}")
