"""
Selectores de heuristicas.

Todos comparten la maquina de estados "listo para seleccionar":
``next_heuristic()`` elige y cuenta la iteracion, ``update()`` refresca el
estado interno con el credito recien registrado. Las dos llamadas deben
alternarse; los selectores adaptativos avisan en el log cuando se selecciona
sin una actualizacion intermedia.
"""

from __future__ import annotations

import logging
import math
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence

from ..core.config import Properties
from ..core.errors import ConfigurationError, UnknownHeuristicSelector
from ..core.telemetry import LOGGER_NAME
from .aggregation import CreditAggregationStrategy
from .repository import CreditRepository


class AbstractHeuristicSelector(ABC):
    requires_update = True

    def __init__(
        self,
        heuristics: Sequence[Hashable],
        seed: Optional[int] = None,
        logger: Optional[Any] = None,
    ) -> None:
        self.heuristics = tuple(heuristics)
        if not self.heuristics:
            raise ConfigurationError("A heuristic selector needs at least one heuristic")
        if len({id(h) for h in self.heuristics}) != len(self.heuristics):
            raise ConfigurationError("The candidate heuristics contain duplicates")
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self._rng = random.Random(seed)
        self.iteration_count = 0
        self.last_selected: Optional[Hashable] = None
        self._awaiting_update = False

    def next_heuristic(self) -> Hashable:
        if self.requires_update and self._awaiting_update:
            self.logger.warning(
                "%s: selecting again before the credit of %r was applied",
                self,
                self.last_selected,
            )
        heuristic = self._select()
        self.iteration_count += 1
        self.last_selected = heuristic
        self._awaiting_update = True
        return heuristic

    def update(self, repository: CreditRepository, aggregation: CreditAggregationStrategy) -> None:
        self._update(repository, aggregation)
        self._awaiting_update = False

    def get_random_heuristic(self, heuristics: Optional[Sequence[Hashable]] = None) -> Hashable:
        pool = self.heuristics if heuristics is None else tuple(heuristics)
        return self._rng.choice(pool)

    def probabilities(self) -> Dict[Hashable, float]:
        """Probabilidad actual de seleccion de cada heuristica."""
        k = len(self.heuristics)
        return {h: 1.0 / k for h in self.heuristics}

    def _estimates(
        self, repository: CreditRepository, aggregation: CreditAggregationStrategy
    ) -> List[float]:
        return [aggregation.aggregate(repository, h) for h in self.heuristics]

    @abstractmethod
    def _select(self) -> Hashable:
        ...

    @abstractmethod
    def _update(self, repository: CreditRepository, aggregation: CreditAggregationStrategy) -> None:
        ...

    def __str__(self) -> str:
        return type(self).__name__


class RandomSelect(AbstractHeuristicSelector):
    """
    Seleccion uniforme; no usa el repositorio ni la agregacion, por lo que
    sirve como linea base sin control.
    """

    requires_update = False

    def _select(self) -> Hashable:
        return self.get_random_heuristic()

    def _update(self, repository: CreditRepository, aggregation: CreditAggregationStrategy) -> None:
        # nada que actualizar
        return None

    def __str__(self) -> str:
        return "RandomSelect"


class _ProbabilitySelector(AbstractHeuristicSelector):
    """Seleccion por ruleta con un piso de exploracion ``p_min``."""

    def __init__(
        self,
        heuristics: Sequence[Hashable],
        p_min: float = 0.1,
        seed: Optional[int] = None,
        logger: Optional[Any] = None,
    ) -> None:
        super().__init__(heuristics, seed=seed, logger=logger)
        k = len(self.heuristics)
        p_min = float(p_min)
        if p_min < 0.0 or p_min * k > 1.0 + 1e-12:
            raise ConfigurationError(
                f"p_min must be in [0, 1/{k}] for {k} heuristics, got {p_min}"
            )
        self.p_min = p_min
        self._probs: List[float] = [1.0 / k] * k

    def probabilities(self) -> Dict[Hashable, float]:
        return dict(zip(self.heuristics, self._probs))

    def _select(self) -> Hashable:
        return self._rng.choices(self.heuristics, weights=self._probs, k=1)[0]

    def _with_floor(self, shares: Sequence[float]) -> List[float]:
        k = len(self.heuristics)
        spread = max(0.0, 1.0 - k * self.p_min)
        return [self.p_min + spread * s for s in shares]


class ProbabilityMatching(_ProbabilitySelector):
    """
    Probabilidad proporcional a la estimacion agregada (recortada a >= 0),
    mas el piso ``p_min``. Sin credito positivo la seleccion es uniforme.
    """

    def _update(self, repository: CreditRepository, aggregation: CreditAggregationStrategy) -> None:
        q = [max(0.0, v) for v in self._estimates(repository, aggregation)]
        total = sum(q)
        k = len(self.heuristics)
        if total <= 0.0:
            self._probs = [1.0 / k] * k
            return
        self._probs = self._with_floor([v / total for v in q])

    def __str__(self) -> str:
        return f"ProbabilityMatching(p_min={self.p_min})"


class AdaptivePursuit(_ProbabilitySelector):
    """
    Persecucion adaptativa: la heuristica con mejor estimacion se acerca a
    ``p_max = 1 - (K - 1) * p_min`` con tasa ``beta``; el resto a ``p_min``.
    """

    def __init__(
        self,
        heuristics: Sequence[Hashable],
        p_min: float = 0.1,
        beta: float = 0.8,
        seed: Optional[int] = None,
        logger: Optional[Any] = None,
    ) -> None:
        super().__init__(heuristics, p_min=p_min, seed=seed, logger=logger)
        beta = float(beta)
        if not 0.0 < beta <= 1.0:
            raise ConfigurationError(f"beta must be in (0, 1], got {beta}")
        self.beta = beta
        self.p_max = 1.0 - (len(self.heuristics) - 1) * self.p_min

    def _update(self, repository: CreditRepository, aggregation: CreditAggregationStrategy) -> None:
        q = self._estimates(repository, aggregation)
        best = max(range(len(q)), key=lambda i: q[i])
        self._probs = [
            p + self.beta * ((self.p_max if i == best else self.p_min) - p)
            for i, p in enumerate(self._probs)
        ]

    def __str__(self) -> str:
        return f"AdaptivePursuit(p_min={self.p_min}, beta={self.beta})"


class SoftmaxSelect(_ProbabilitySelector):
    """Soft-max de las estimaciones con temperatura, mas el piso ``p_min``."""

    def __init__(
        self,
        heuristics: Sequence[Hashable],
        temperature: float = 1.0,
        p_min: float = 0.1,
        seed: Optional[int] = None,
        logger: Optional[Any] = None,
    ) -> None:
        super().__init__(heuristics, p_min=p_min, seed=seed, logger=logger)
        temperature = float(temperature)
        if temperature <= 0.0:
            raise ConfigurationError(f"temperature must be positive, got {temperature}")
        self.temperature = temperature

    def _update(self, repository: CreditRepository, aggregation: CreditAggregationStrategy) -> None:
        z = [v / self.temperature for v in self._estimates(repository, aggregation)]
        top = max(z)
        e = [math.exp(v - top) for v in z]
        total = sum(e)
        self._probs = self._with_floor([v / total for v in e])

    def __str__(self) -> str:
        return f"SoftmaxSelect(temperature={self.temperature}, p_min={self.p_min})"


class UCBSelect(AbstractHeuristicSelector):
    """
    UCB1: ``q_i + c * sqrt(2 ln N / n_i)``. Las heuristicas nunca elegidas se
    prueban primero, en el orden del conjunto candidato.
    """

    def __init__(
        self,
        heuristics: Sequence[Hashable],
        c: float = 1.0,
        seed: Optional[int] = None,
        logger: Optional[Any] = None,
    ) -> None:
        super().__init__(heuristics, seed=seed, logger=logger)
        c = float(c)
        if c < 0.0:
            raise ConfigurationError(f"UCB exploration constant must be >= 0, got {c}")
        self.c = c
        self.counts: List[int] = [0] * len(self.heuristics)
        self._q: List[float] = [0.0] * len(self.heuristics)

    def _select(self) -> Hashable:
        for i, n in enumerate(self.counts):
            if n == 0:
                self.counts[i] += 1
                return self.heuristics[i]
        total = sum(self.counts)
        scores = [
            q + self.c * math.sqrt(2.0 * math.log(total) / n) for q, n in zip(self._q, self.counts)
        ]
        best = max(range(len(scores)), key=lambda i: scores[i])
        self.counts[best] += 1
        return self.heuristics[best]

    def _update(self, repository: CreditRepository, aggregation: CreditAggregationStrategy) -> None:
        self._q = self._estimates(repository, aggregation)

    def __str__(self) -> str:
        return f"UCBSelect(c={self.c})"


SELECTOR_NAMES = ("RandomSelect", "ProbabilityMatching", "AdaptivePursuit", "SoftmaxSelect", "UCB")


def create_selector(
    name: str,
    heuristics: Sequence[Hashable],
    configuration: Optional[Mapping[str, Any]] = None,
    seed: Optional[int] = None,
    logger: Optional[Any] = None,
) -> AbstractHeuristicSelector:
    props = configuration if isinstance(configuration, Properties) else Properties(configuration)
    p_min = props.get_float("p_min", 0.1)
    if name == "RandomSelect":
        return RandomSelect(heuristics, seed=seed, logger=logger)
    if name == "ProbabilityMatching":
        return ProbabilityMatching(heuristics, p_min=p_min, seed=seed, logger=logger)
    if name == "AdaptivePursuit":
        return AdaptivePursuit(
            heuristics, p_min=p_min, beta=props.get_float("beta", 0.8), seed=seed, logger=logger
        )
    if name == "SoftmaxSelect":
        return SoftmaxSelect(
            heuristics,
            temperature=props.get_float("temperature", 1.0),
            p_min=p_min,
            seed=seed,
            logger=logger,
        )
    if name == "UCB":
        return UCBSelect(heuristics, c=props.get_float("ucb_c", 1.0), seed=seed, logger=logger)
    raise UnknownHeuristicSelector(name)
