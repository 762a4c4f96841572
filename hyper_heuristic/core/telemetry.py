"""
Herramientas de registro y telemetria compartidas por todos los modulos.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Any, Deque, Dict, Hashable, Optional

LOGGER_NAME = "hyper_heuristic"


def setup_logger(level: str = "INFO") -> logging.Logger:
    """Configura un logger estandar reutilizable en toda la aplicacion."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    fmt = "[%(asctime)s] %(levelname)s - %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


class SelectionMetrics:
    """
    Registro en memoria de selecciones y creditos por heuristica.

    ``generation_history`` conserva solo los ultimos ``history_size`` resumenes
    (``None`` para no limitar, 0 para no guardarlos).
    """

    def __init__(self, history_size: Optional[int] = 100) -> None:
        self.start_time = time.time()
        self.selections: Dict[Hashable, int] = {}
        self.credit_sum: Dict[Hashable, float] = {}
        self.rewards = 0
        self.generation_history: Deque[Dict[str, Any]] = deque(maxlen=history_size)

    def record_selection(self, heuristic: Hashable) -> None:
        self.selections[heuristic] = self.selections.get(heuristic, 0) + 1

    def record_credit(self, heuristic: Hashable, value: float) -> None:
        self.credit_sum[heuristic] = self.credit_sum.get(heuristic, 0.0) + float(value)
        self.rewards += 1

    def record_generation(self, payload: Dict[str, Any]) -> None:
        """
        Registra informacion resumida de cada generacion para analisis posterior.
        """
        self.generation_history.append(payload)

    def selection_frequencies(self) -> Dict[Hashable, float]:
        total = sum(self.selections.values())
        if total == 0:
            return {}
        return {h: count / total for h, count in self.selections.items()}

    def to_dict(self) -> Dict[str, Any]:
        total = max(time.time() - self.start_time, 1e-9)
        return {
            "wall_time_s": total,
            "rewards": self.rewards,
            "selections": {str(h): n for h, n in self.selections.items()},
            "frequencies": {str(h): f for h, f in self.selection_frequencies().items()},
            "credit_sum": {str(h): v for h, v in self.credit_sum.items()},
            "generation_history": list(self.generation_history),
        }


if __name__ == "__main__":
    log = setup_logger()
    metrics = SelectionMetrics()
    metrics.record_selection("sbx")
    metrics.record_credit("sbx", 1.0)
    log.info("Telemetria registrada correctamente: %s", metrics.to_dict()["selections"])
