from __future__ import annotations

import logging

import numpy as np
import pytest

from hyper_heuristic.core.config import Config, Properties
from hyper_heuristic.core.errors import ConfigurationError, HyperHeuristicError
from hyper_heuristic.core.telemetry import LOGGER_NAME, SelectionMetrics, setup_logger


def test_config_to_properties_skips_unset_values() -> None:
    props = Config().to_properties()
    assert "ref_point" not in props
    assert "num_reference_vectors" not in props
    assert props["credit_definition"] == "SIDoPF"
    assert props["p_min"] == 0.1


def test_properties_parsing() -> None:
    props = Properties({"a": " 1.5 ", "n": "12", "v": "1.0; 2.0", "s": " decay ", "none": None})
    assert props.get_float("a", 0.0) == 1.5
    assert props.get_int("n") == 12
    assert np.allclose(props.get_float_array("v", [0.0, 0.0], 2), [1.0, 2.0])
    assert props.get_str("s", "sum") == "decay"
    assert props.get_float("none", 3.0) == 3.0
    assert "none" not in props
    assert props.get_int("missing", 4) == 4


def test_properties_errors() -> None:
    props = Properties({"x": "nan", "y": "abc", "v": "1,2,3"})
    with pytest.raises(ConfigurationError):
        props.get_float("x", 0.0)
    with pytest.raises(ConfigurationError):
        props.get_int("y")
    with pytest.raises(ConfigurationError):
        props.get_int("missing")
    with pytest.raises(ConfigurationError):
        props.get_float_array("v", [0.0, 0.0], 2)
    # toda la jerarquia es ValueError
    assert issubclass(ConfigurationError, HyperHeuristicError)
    assert issubclass(HyperHeuristicError, ValueError)


def test_setup_logger_is_idempotent() -> None:
    first = setup_logger("DEBUG")
    handlers = list(first.handlers)
    second = setup_logger("WARNING")
    assert first is second
    assert first.name == LOGGER_NAME
    assert second.handlers == handlers
    assert second.level == logging.WARNING


def test_selection_metrics() -> None:
    metrics = SelectionMetrics()
    assert metrics.selection_frequencies() == {}
    metrics.record_selection("a")
    metrics.record_selection("a")
    metrics.record_selection("b")
    metrics.record_credit("a", 0.5)
    snapshot = metrics.to_dict()
    assert snapshot["selections"] == {"a": 2, "b": 1}
    assert snapshot["frequencies"]["a"] == pytest.approx(2 / 3)
    assert snapshot["credit_sum"] == {"a": 0.5}
    assert snapshot["rewards"] == 1


def test_generation_history_is_bounded() -> None:
    metrics = SelectionMetrics(history_size=3)
    for gen in range(10):
        metrics.record_generation({"generation": gen})
    assert [entry["generation"] for entry in metrics.to_dict()["generation_history"]] == [7, 8, 9]
    assert len(SelectionMetrics(history_size=0).generation_history) == 0
    assert Config().metrics_history == 100
