from __future__ import annotations

import logging
from collections import Counter

import pytest

from hyper_heuristic.core.errors import ConfigurationError, UnknownHeuristicSelector
from hyper_heuristic.core.model import Heuristic
from hyper_heuristic.logic.aggregation import MeanAggregation, SumAggregation
from hyper_heuristic.logic.repository import CreditRepository
from hyper_heuristic.logic.selectors import (
    AdaptivePursuit,
    ProbabilityMatching,
    RandomSelect,
    SoftmaxSelect,
    UCBSelect,
    create_selector,
)


def _heuristics(*names: str):
    return [Heuristic(name) for name in names]


def test_random_select_single_candidate() -> None:
    (only,) = _heuristics("sbx")
    selector = RandomSelect([only], seed=3)
    for _ in range(20):
        assert selector.next_heuristic() is only
    assert selector.iteration_count == 20


def test_random_select_is_uniform() -> None:
    hs = _heuristics("a", "b", "c", "d")
    selector = RandomSelect(hs, seed=123)
    draws = 10_000
    counts = Counter(selector.next_heuristic() for _ in range(draws))
    # 4 desviaciones estandar de una binomial(10000, 1/4)
    tolerance = 4 * (draws * 0.25 * 0.75) ** 0.5
    for h in hs:
        assert abs(counts[h] - draws / 4) < tolerance
    assert selector.iteration_count == draws


def test_random_select_update_is_a_noop() -> None:
    hs = _heuristics("a", "b")
    selector = RandomSelect(hs, seed=0)
    repo = CreditRepository()
    repo.record(hs[0], 10.0, 0)
    before = selector.probabilities()
    selector.update(repo, SumAggregation())
    assert selector.probabilities() == before


def test_probability_matching_with_floor() -> None:
    a, b = _heuristics("a", "b")
    selector = ProbabilityMatching([a, b], p_min=0.1, seed=1)
    repo = CreditRepository()
    assert selector.probabilities() == {a: 0.5, b: 0.5}

    repo.record(a, 3.0, 0)
    repo.record(b, 1.0, 0)
    selector.update(repo, SumAggregation())
    probs = selector.probabilities()
    assert probs[a] == pytest.approx(0.7)
    assert probs[b] == pytest.approx(0.3)
    assert sum(probs.values()) == pytest.approx(1.0)


def test_probability_matching_without_credit_is_uniform() -> None:
    hs = _heuristics("a", "b", "c")
    selector = ProbabilityMatching(hs, p_min=0.05, seed=1)
    repo = CreditRepository()
    repo.record(hs[0], -1.0, 0)
    selector.update(repo, SumAggregation())
    for p in selector.probabilities().values():
        assert p == pytest.approx(1.0 / 3.0)


def test_adaptive_pursuit_moves_towards_best() -> None:
    a, b = _heuristics("a", "b")
    selector = AdaptivePursuit([a, b], p_min=0.1, beta=0.8, seed=1)
    assert selector.p_max == pytest.approx(0.9)
    repo = CreditRepository()
    repo.record(a, 1.0, 0)
    selector.update(repo, MeanAggregation())
    probs = selector.probabilities()
    assert probs[a] == pytest.approx(0.82)
    assert probs[b] == pytest.approx(0.18)

    for gen in range(1, 30):
        repo.record(a, 1.0, gen)
        selector.update(repo, MeanAggregation())
    probs = selector.probabilities()
    assert probs[a] == pytest.approx(0.9)
    assert probs[b] == pytest.approx(0.1)


def test_softmax_respects_floor() -> None:
    hs = _heuristics("a", "b", "c")
    selector = SoftmaxSelect(hs, temperature=0.01, p_min=0.1, seed=4)
    repo = CreditRepository()
    repo.record(hs[0], 5.0, 0)
    selector.update(repo, MeanAggregation())
    probs = selector.probabilities()
    assert probs[hs[0]] == pytest.approx(0.8)
    assert probs[hs[1]] == pytest.approx(0.1)
    assert probs[hs[2]] == pytest.approx(0.1)


def test_ucb_tries_every_heuristic_first() -> None:
    a, b, c = _heuristics("a", "b", "c")
    selector = UCBSelect([a, b, c], c=0.5, seed=0)
    repo = CreditRepository()
    aggregation = MeanAggregation()
    for expected, credit in ((a, 0.0), (b, 0.0), (c, 1.0)):
        chosen = selector.next_heuristic()
        assert chosen is expected
        repo.record(chosen, credit, selector.iteration_count)
        selector.update(repo, aggregation)
    assert selector.counts == [1, 1, 1]
    assert selector.next_heuristic() is c
    assert selector.counts == [1, 1, 2]


def test_selection_without_update_is_logged(caplog) -> None:
    hs = _heuristics("a", "b")
    selector = ProbabilityMatching(hs, seed=0)
    with caplog.at_level(logging.WARNING, logger="hyper_heuristic"):
        selector.next_heuristic()
        selector.next_heuristic()
    assert "selecting again" in caplog.text
    assert selector.iteration_count == 2


def test_create_selector() -> None:
    hs = _heuristics("a", "b", "c")
    assert isinstance(create_selector("RandomSelect", hs), RandomSelect)
    pursuit = create_selector("AdaptivePursuit", hs, {"p_min": "0.05", "beta": 0.5}, seed=7)
    assert isinstance(pursuit, AdaptivePursuit)
    assert (pursuit.p_min, pursuit.beta) == (0.05, 0.5)
    assert isinstance(create_selector("UCB", hs, {"ucb_c": 2}), UCBSelect)
    assert isinstance(create_selector("SoftmaxSelect", hs), SoftmaxSelect)
    with pytest.raises(UnknownHeuristicSelector):
        create_selector("GreedySelect", hs)


@pytest.mark.parametrize("p_min", [-0.1, 0.5])
def test_invalid_floor(p_min: float) -> None:
    with pytest.raises(ConfigurationError):
        ProbabilityMatching(_heuristics("a", "b", "c"), p_min=p_min)


def test_candidates_must_be_distinct() -> None:
    h = Heuristic("a")
    with pytest.raises(ConfigurationError):
        RandomSelect([h, h])
    with pytest.raises(ConfigurationError):
        RandomSelect([])
