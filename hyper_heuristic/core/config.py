"""
Configuraciones base, lectura tipada de propiedades y utilidades de seeding
para el controlador de seleccion de heuristicas.
"""

from __future__ import annotations

import math
import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError


@dataclass
class Config:
    """
    Parametros de un run: definicion de credito, agregacion y selector.

    Los valores ``None`` se omiten al convertir a propiedades para que la
    fabrica aplique sus propios valores por defecto (dependientes del numero
    de objetivos).
    """

    # Credito
    credit_definition: str = "SIDoPF"
    satisfy: float = 1.0
    disatisfy: float = 0.0
    neither: float = 0.0
    kappa: float = 0.05
    ref_point: Optional[Tuple[float, ...]] = None
    ideal_point: Optional[Tuple[float, ...]] = None
    num_reference_vectors: Optional[int] = None

    # Agregacion
    aggregation: str = "decay"
    decay: float = 0.8
    window: int = 10

    # Seleccion
    selector: str = "ProbabilityMatching"
    p_min: float = 0.1
    beta: float = 0.8
    temperature: float = 1.0
    ucb_c: float = 1.0

    # Ejecucion
    seed: int = 42
    log_level: str = "INFO"
    metrics_history: int = 100

    def to_properties(self) -> Dict[str, Any]:
        """Devuelve el mapeo plano clave -> valor que consumen las fabricas."""
        return {key: value for key, value in asdict(self).items() if value is not None}


class Properties:
    """
    Acceso tipado a un mapeo plano de propiedades con valores por defecto.

    Los valores pueden venir ya tipados o como cadenas (``"2.0,2.0"`` para
    vectores); cualquier valor que no pueda interpretarse lanza
    ``ConfigurationError`` en lugar de caer silenciosamente al valor por defecto.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    def __contains__(self, key: object) -> bool:
        return key in self._values and self._values[key] is not None

    def __repr__(self) -> str:
        return f"Properties({self._values!r})"

    def get_float(self, key: str, default: float) -> float:
        if key not in self:
            return float(default)
        raw = self._values[key]
        try:
            value = float(raw.strip()) if isinstance(raw, str) else float(raw)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Property '{key}' is not a number: {raw!r}") from exc
        if not math.isfinite(value):
            raise ConfigurationError(f"Property '{key}' must be finite, got {value}")
        return value

    def get_int(self, key: str, default: Optional[int] = None) -> int:
        if key not in self:
            if default is None:
                raise ConfigurationError(f"Property '{key}' is required and has no default")
            return int(default)
        raw = self._values[key]
        try:
            value = float(raw.strip()) if isinstance(raw, str) else float(raw)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Property '{key}' is not an integer: {raw!r}") from exc
        if not value.is_integer():
            raise ConfigurationError(f"Property '{key}' is not an integer: {raw!r}")
        return int(value)

    def get_float_array(
        self,
        key: str,
        default: Sequence[float],
        length: Optional[int] = None,
    ) -> np.ndarray:
        raw = self._values[key] if key in self else default
        if isinstance(raw, str):
            parts = [p for p in raw.replace(";", ",").split(",") if p.strip()]
            raw = [p.strip() for p in parts]
        try:
            arr = np.asarray([float(v) for v in raw], dtype=float)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Property '{key}' is not a numeric vector: {raw!r}") from exc
        if length is not None and arr.shape[0] != length:
            raise ConfigurationError(
                f"Property '{key}' must have {length} components, got {arr.shape[0]}"
            )
        if not np.all(np.isfinite(arr)):
            raise ConfigurationError(f"Property '{key}' must contain finite values")
        return arr

    def get_str(self, key: str, default: str) -> str:
        if key not in self:
            return default
        return str(self._values[key]).strip()


def set_global_seeds(seed: int) -> None:
    """Inicializa generadores pseudoaleatorios reproducibles."""
    random.seed(seed)
    np.random.seed(seed)


if __name__ == "__main__":
    cfg = Config()
    set_global_seeds(cfg.seed)
    props = Properties(cfg.to_properties())
    print("Config de prueba:", cfg)
    print("kappa =", props.get_float("kappa", 0.05))
