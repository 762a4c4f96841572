from __future__ import annotations

import threading

import pytest

from hyper_heuristic.core.model import Heuristic
from hyper_heuristic.logic.repository import CreditObservation, CreditRepository


def test_history_preserves_insertion_order() -> None:
    repo = CreditRepository()
    h = Heuristic("sbx")
    values = [0.5, 1.0, 0.0, 2.5, 1.5]
    for gen, value in enumerate(values):
        repo.record(h, value, gen)

    history = repo.history(h)
    assert len(history) == len(values)
    assert history.values() == values
    assert [obs.generation for obs in history] == list(range(len(values)))
    assert history[-1] == CreditObservation(h, 1.5, 4)
    # la vista se puede recorrer mas de una vez
    assert list(history) == list(history)


def test_unknown_heuristic_has_empty_history() -> None:
    repo = CreditRepository()
    h = Heuristic("pm")
    assert len(repo.history(h)) == 0
    assert repo.latest(h) is None
    assert h not in repo
    assert repo.known_heuristics() == set()
    assert repo.current_generation() is None


def test_known_heuristics_and_identity_keys() -> None:
    repo = CreditRepository()
    a, b = Heuristic("same"), Heuristic("same")
    repo.record(a, 1.0, 0)
    repo.record(b, 2.0, 0)
    assert repo.known_heuristics() == {a, b}
    assert repo.history(a).values() == [1.0]
    assert repo.history(b).values() == [2.0]
    assert len(repo) == 2


def test_invalid_records_are_rejected() -> None:
    repo = CreditRepository()
    h = Heuristic("de")
    with pytest.raises(ValueError):
        repo.record(h, float("nan"), 0)
    with pytest.raises(ValueError):
        repo.record(h, float("inf"), 0)
    repo.record(h, 1.0, 5)
    with pytest.raises(ValueError):
        repo.record(h, 1.0, 4)
    # misma generacion repetida es valida (varias aplicaciones por generacion)
    repo.record(h, 0.5, 5)
    assert len(repo.history(h)) == 2
    assert repo.latest(h).value == 0.5
    assert repo.current_generation() == 5


def test_history_view_is_a_fixed_prefix() -> None:
    repo = CreditRepository()
    h = Heuristic("sbx")
    repo.record(h, 1.0, 0)
    view = repo.history(h)
    repo.record(h, 2.0, 1)
    assert len(view) == 1
    assert view.values() == [1.0]
    with pytest.raises(IndexError):
        view[1]
    assert len(repo.history(h)) == 2


def test_concurrent_appends_keep_every_record() -> None:
    repo = CreditRepository()
    heuristics = [Heuristic(f"h{i}") for i in range(4)]
    n_threads, per_thread = 8, 500
    errors = []

    def writer(idx: int) -> None:
        h = heuristics[idx % len(heuristics)]
        for k in range(per_thread):
            repo.record(h, float(k), 0)

    def reader() -> None:
        for _ in range(200):
            for h in heuristics:
                view = repo.history(h)
                seen = [obs.value for obs in view]
                if len(seen) != len(view) or any(v is None for v in seen):
                    errors.append(h)

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(n_threads)]
    threads.append(threading.Thread(target=reader))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert len(repo) == n_threads * per_thread
    for h in heuristics:
        assert len(repo.history(h)) == per_thread * (n_threads // len(heuristics))
