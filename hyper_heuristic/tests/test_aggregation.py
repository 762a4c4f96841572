from __future__ import annotations

import pytest

from hyper_heuristic.core.errors import ConfigurationError
from hyper_heuristic.core.model import Heuristic
from hyper_heuristic.logic.aggregation import (
    DecayingMeanAggregation,
    MeanAggregation,
    SumAggregation,
    WindowMeanAggregation,
    create_aggregation,
)
from hyper_heuristic.logic.repository import CreditRepository


@pytest.fixture
def filled():
    repo = CreditRepository()
    a, b = Heuristic("a"), Heuristic("b")
    for gen, value in enumerate([1.0, 2.0, 3.0]):
        repo.record(a, value, gen)
    repo.record(b, 4.0, 0)
    repo.record(b, 8.0, 5)
    return repo, a, b


def test_empty_history_returns_default() -> None:
    repo = CreditRepository()
    h = Heuristic("x")
    for strategy in (SumAggregation(), MeanAggregation(), DecayingMeanAggregation(), WindowMeanAggregation()):
        assert strategy.aggregate(repo, h) == 0.0
    assert MeanAggregation(default=1.5).aggregate(repo, h) == 1.5


def test_sum_and_mean(filled) -> None:
    repo, a, b = filled
    assert SumAggregation().aggregate(repo, a) == pytest.approx(6.0)
    assert MeanAggregation().aggregate(repo, a) == pytest.approx(2.0)
    assert MeanAggregation().aggregate(repo, b) == pytest.approx(6.0)


def test_decaying_mean_favours_recent_values(filled) -> None:
    repo, a, _ = filled
    expected = (0.25 * 1.0 + 0.5 * 2.0 + 1.0 * 3.0) / 1.75
    assert DecayingMeanAggregation(0.5).aggregate(repo, a) == pytest.approx(expected)
    assert DecayingMeanAggregation(1.0).aggregate(repo, a) == pytest.approx(2.0)


def test_window_is_relative_to_latest_generation(filled) -> None:
    repo, a, b = filled
    # la generacion mas reciente es 5 (heuristica b): ventana 3 -> generaciones 3..5
    window = WindowMeanAggregation(3)
    assert window.aggregate(repo, a) == 0.0
    assert window.aggregate(repo, b) == pytest.approx(8.0)
    assert WindowMeanAggregation(5).aggregate(repo, a) == pytest.approx(2.5)


def test_aggregation_is_pure(filled) -> None:
    repo, a, _ = filled
    strategy = DecayingMeanAggregation(0.8)
    first = strategy.aggregate(repo, a)
    assert strategy.aggregate(repo, a) == first
    assert len(repo.history(a)) == 3


def test_create_aggregation() -> None:
    assert isinstance(create_aggregation("sum"), SumAggregation)
    assert isinstance(create_aggregation("Mean"), MeanAggregation)
    decay = create_aggregation("decay", {"decay": "0.5"})
    assert isinstance(decay, DecayingMeanAggregation) and decay.decay == 0.5
    window = create_aggregation("window", {"window": 4, "default_credit": 1.0})
    assert isinstance(window, WindowMeanAggregation)
    assert (window.window, window.default) == (4, 1.0)
    with pytest.raises(ConfigurationError):
        create_aggregation("median")
    with pytest.raises(ConfigurationError):
        create_aggregation("decay", {"decay": 1.5})
    with pytest.raises(ConfigurationError):
        create_aggregation("window", {"window": 0})
