"""
Capa logica: repositorio de creditos, agregacion, selectores y controlador.
"""

from .aggregation import (  # noqa: F401
    CreditAggregationStrategy,
    DecayingMeanAggregation,
    MeanAggregation,
    SumAggregation,
    WindowMeanAggregation,
    create_aggregation,
)
from .controller import AdaptiveOperatorController  # noqa: F401
from .repository import CreditHistory, CreditObservation, CreditRepository  # noqa: F401
from .selectors import (  # noqa: F401
    AbstractHeuristicSelector,
    AdaptivePursuit,
    ProbabilityMatching,
    RandomSelect,
    SoftmaxSelect,
    UCBSelect,
    create_selector,
)

__all__ = [
    "CreditAggregationStrategy",
    "DecayingMeanAggregation",
    "MeanAggregation",
    "SumAggregation",
    "WindowMeanAggregation",
    "create_aggregation",
    "AdaptiveOperatorController",
    "CreditHistory",
    "CreditObservation",
    "CreditRepository",
    "AbstractHeuristicSelector",
    "AdaptivePursuit",
    "ProbabilityMatching",
    "RandomSelect",
    "SoftmaxSelect",
    "UCBSelect",
    "create_selector",
]
