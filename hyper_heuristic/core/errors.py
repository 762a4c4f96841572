"""
Taxonomia de errores del controlador de seleccion de heuristicas.

Los errores de construccion (fabrica, indicadores) abortan la inicializacion
del run; los errores por generacion se propagan al llamador sin reintentos.
"""

from __future__ import annotations


class HyperHeuristicError(ValueError):
    """Base comun para todos los errores del paquete."""


class UnknownCreditDefinition(HyperHeuristicError):
    """El nombre pedido no corresponde a ninguna definicion de credito registrada."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such credit definition: {name!r}")
        self.name = name


class UnknownHeuristicSelector(HyperHeuristicError):
    """El nombre pedido no corresponde a ningun selector registrado."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such heuristic selector: {name!r}")
        self.name = name


class ConfigurationError(HyperHeuristicError):
    """Parametro ausente o mal formado sin valor por defecto seguro."""


class InvalidSnapshot(HyperHeuristicError):
    """La instantanea de poblacion no contiene los datos que la definicion necesita."""
