"""
Controlador adaptativo que coordina selector, definicion de credito,
repositorio y agregacion alrededor del bucle generacional externo.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from ..core.config import Config
from ..core.errors import ConfigurationError
from ..core.telemetry import LOGGER_NAME, SelectionMetrics
from ..credit.base import CreditDefinition
from ..credit.contribution import ContributionDefinition
from ..credit.factory import create as create_credit_definition
from ..credit.snapshot import PopulationSnapshot
from .aggregation import CreditAggregationStrategy, MeanAggregation, create_aggregation
from .repository import CreditRepository
from .selectors import AbstractHeuristicSelector, create_selector


class AdaptiveOperatorController:
    def __init__(
        self,
        selector: AbstractHeuristicSelector,
        credit_definition: CreditDefinition,
        repository: Optional[CreditRepository] = None,
        aggregation: Optional[CreditAggregationStrategy] = None,
        logger: Optional[Any] = None,
        history_size: Optional[int] = 100,
    ) -> None:
        self.selector = selector
        self.credit_definition = credit_definition
        self.repository = repository if repository is not None else CreditRepository()
        self.aggregation = aggregation if aggregation is not None else MeanAggregation()
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.metrics = SelectionMetrics(history_size)
        self._generation = 0

    @classmethod
    def from_config(
        cls,
        cfg: Config,
        heuristics: Any,
        problem: Any,
        logger: Optional[Any] = None,
    ) -> "AdaptiveOperatorController":
        """Construye todas las piezas a partir de un ``Config``."""
        props = cfg.to_properties()
        credit = create_credit_definition(cfg.credit_definition, props, problem)
        aggregation = create_aggregation(cfg.aggregation, props)
        selector = create_selector(cfg.selector, heuristics, props, seed=cfg.seed, logger=logger)
        controller = cls(
            selector,
            credit,
            aggregation=aggregation,
            logger=logger,
            history_size=cfg.metrics_history,
        )
        controller.logger.info(
            "Adaptive operator selection | selector=%s | credit=%s | aggregation=%r | heuristics=%d",
            selector,
            cfg.credit_definition,
            aggregation,
            len(selector.heuristics),
        )
        return controller

    @property
    def generation(self) -> int:
        return self._generation

    def select(self) -> Hashable:
        heuristic = self.selector.next_heuristic()
        self.metrics.record_selection(heuristic)
        return heuristic

    def _resolve_generation(self, snapshot: PopulationSnapshot, generation: Optional[int]) -> int:
        if generation is not None:
            return int(generation)
        if snapshot.generation >= 0:
            return snapshot.generation
        return self._generation

    def reward(
        self,
        heuristic: Hashable,
        snapshot: PopulationSnapshot,
        generation: Optional[int] = None,
        update: bool = True,
    ) -> float:
        """
        Calcula el credito de ``heuristic``, lo registra y (por defecto)
        actualiza el selector. Con ``update=False`` el llamador debe invocar
        ``update()`` una vez registrados todos los creditos de la generacion.
        """
        value = self.credit_definition.compute(snapshot)
        gen = self._resolve_generation(snapshot, generation)
        self.repository.record(heuristic, value, gen)
        self.metrics.record_credit(heuristic, value)
        self.logger.debug("Generation %d | %s -> credit=%.6f", gen, heuristic, value)
        self._generation = max(self._generation, gen + 1)
        if update:
            self.update()
        return value

    def reward_population(
        self,
        snapshot: PopulationSnapshot,
        generation: Optional[int] = None,
        update: bool = True,
    ) -> Dict[Hashable, float]:
        """Reparte credito de contribucion entre todas las heuristicas candidatas."""
        if not isinstance(self.credit_definition, ContributionDefinition):
            raise ConfigurationError(
                f"{self.credit_definition!r} is not a population-contribution credit definition"
            )
        credits = self.credit_definition.compute_all(snapshot, self.selector.heuristics)
        gen = self._resolve_generation(snapshot, generation)
        for heuristic, value in credits.items():
            self.repository.record(heuristic, value, gen)
            self.metrics.record_credit(heuristic, value)
        self.logger.debug(
            "Generation %d | population credit %s",
            gen,
            {str(h): round(v, 6) for h, v in credits.items()},
        )
        self._generation = max(self._generation, gen + 1)
        if update:
            self.update()
        return credits

    def update(self) -> None:
        self.selector.update(self.repository, self.aggregation)
        self.metrics.record_generation(
            {
                "generation": self._generation,
                "iteration": self.selector.iteration_count,
                "probabilities": {str(h): p for h, p in self.selector.probabilities().items()},
            }
        )

    def step(self, apply: Callable[[Hashable], PopulationSnapshot]) -> Tuple[Hashable, float]:
        """Una vuelta completa: seleccionar, aplicar (externo), premiar y actualizar."""
        heuristic = self.select()
        snapshot = apply(heuristic)
        value = self.reward(heuristic, snapshot)
        return heuristic, value
