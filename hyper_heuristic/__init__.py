"""
Paquete raiz del controlador adaptativo de seleccion de operadores para un
optimizador multiobjetivo hiper-heuristico.

Cada subpaquete representa una capa: nucleo compartido, indicadores de
calidad, definiciones de credito y logica de seleccion.
"""

from .core.config import Config, set_global_seeds  # noqa: F401
from .core.model import Heuristic, Solution  # noqa: F401
from .core.telemetry import setup_logger  # noqa: F401
from .credit import PopulationSnapshot, Neighborhood, create  # noqa: F401
from .logic import AdaptiveOperatorController, CreditRepository, create_selector  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Config",
    "set_global_seeds",
    "Heuristic",
    "Solution",
    "setup_logger",
    "PopulationSnapshot",
    "Neighborhood",
    "create",
    "AdaptiveOperatorController",
    "CreditRepository",
    "create_selector",
]


if __name__ == "__main__":
    # Prueba rapida para verificar que los imports principales funcionan.
    cfg = Config()
    logger = setup_logger()
    logger.info("Inicializacion basica completada.")
    print(cfg)
