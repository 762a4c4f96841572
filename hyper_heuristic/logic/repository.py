"""
Repositorio de creditos: historial ordenado y de solo anexado por heuristica.

El repositorio nunca elimina observaciones; las ventanas o el envejecimiento
son responsabilidad de las estrategias de agregacion. Las escrituras estan
protegidas por un lock y las lecturas ven siempre un prefijo consistente.
"""

from __future__ import annotations

import math
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Optional, Set


@dataclass(frozen=True)
class CreditObservation:
    heuristic: Hashable
    value: float
    generation: int


class CreditHistory(Sequence):
    """
    Vista perezosa y reiniciable sobre las primeras ``length`` observaciones
    de una heuristica. Las observaciones posteriores a su creacion no se ven.
    """

    def __init__(self, items: List[CreditObservation], length: int) -> None:
        self._items = items
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return [self._items[i] for i in range(*index.indices(self._length))]
        if index < 0:
            index += self._length
        if index < 0 or index >= self._length:
            raise IndexError("credit history index out of range")
        return self._items[index]

    def __iter__(self) -> Iterator[CreditObservation]:
        for i in range(self._length):
            yield self._items[i]

    def values(self) -> List[float]:
        return [obs.value for obs in self]

    def __repr__(self) -> str:
        return f"CreditHistory(len={self._length})"


class CreditRepository:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._histories: Dict[Hashable, List[CreditObservation]] = {}
        self._count = 0
        self._current_generation: Optional[int] = None

    def record(self, heuristic: Hashable, value: float, generation: int) -> CreditObservation:
        """Anexa una observacion; nunca sobreescribe."""
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Credit for {heuristic!r} must be finite, got {value}")
        generation = int(generation)
        obs = CreditObservation(heuristic=heuristic, value=value, generation=generation)
        with self._lock:
            history = self._histories.setdefault(heuristic, [])
            if history and history[-1].generation > generation:
                raise ValueError(
                    f"Generation {generation} is older than the last observation "
                    f"({history[-1].generation}) recorded for {heuristic!r}"
                )
            history.append(obs)
            self._count += 1
            if self._current_generation is None or generation > self._current_generation:
                self._current_generation = generation
        return obs

    def history(self, heuristic: Hashable) -> CreditHistory:
        with self._lock:
            items = self._histories.get(heuristic)
            if items is None:
                return CreditHistory([], 0)
            return CreditHistory(items, len(items))

    def known_heuristics(self) -> Set[Hashable]:
        with self._lock:
            return set(self._histories)

    def latest(self, heuristic: Hashable) -> Optional[CreditObservation]:
        with self._lock:
            items = self._histories.get(heuristic)
            return items[-1] if items else None

    def current_generation(self) -> Optional[int]:
        """Generacion mas reciente registrada para cualquier heuristica."""
        with self._lock:
            return self._current_generation

    def __len__(self) -> int:
        with self._lock:
            return self._count

    def __contains__(self, heuristic: object) -> bool:
        with self._lock:
            return heuristic in self._histories
