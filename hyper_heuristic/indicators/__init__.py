"""
Capa de indicadores de calidad y dominancia (hipervolumen, R2, epsilon aditivo).
"""

from .base import QualityIndicator, as_objective_matrix  # noqa: F401
from .dominance import compare, non_dominated, objective_matrix, objectives, tchebycheff  # noqa: F401
from .epsilon import AdditiveEpsilonIndicator, additive_epsilon  # noqa: F401
from .hypervolume import HypervolumeIndicator  # noqa: F401
from .r2 import R2Indicator, reference_vectors  # noqa: F401

__all__ = [
    "QualityIndicator",
    "as_objective_matrix",
    "compare",
    "non_dominated",
    "objective_matrix",
    "objectives",
    "tchebycheff",
    "AdditiveEpsilonIndicator",
    "additive_epsilon",
    "HypervolumeIndicator",
    "R2Indicator",
    "reference_vectors",
]


if __name__ == "__main__":
    print("Componentes disponibles:", __all__)
