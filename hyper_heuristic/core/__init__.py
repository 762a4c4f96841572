"""
Componentes compartidos por todas las capas del sistema: configuraciones,
errores y telemetria.
"""

from .config import Config, Properties, set_global_seeds  # noqa: F401
from .model import Heuristic, Solution  # noqa: F401
from .errors import (  # noqa: F401
    ConfigurationError,
    HyperHeuristicError,
    InvalidSnapshot,
    UnknownCreditDefinition,
    UnknownHeuristicSelector,
)
from .telemetry import LOGGER_NAME, SelectionMetrics, get_logger, setup_logger  # noqa: F401

__all__ = [
    "Config",
    "Properties",
    "Heuristic",
    "Solution",
    "set_global_seeds",
    "ConfigurationError",
    "HyperHeuristicError",
    "InvalidSnapshot",
    "UnknownCreditDefinition",
    "UnknownHeuristicSelector",
    "LOGGER_NAME",
    "SelectionMetrics",
    "get_logger",
    "setup_logger",
]


if __name__ == "__main__":
    logger = setup_logger()
    logger.info("Core module smoke test completado.")
