from __future__ import annotations

import numpy as np
import pytest

from hyper_heuristic.core.errors import ConfigurationError, UnknownCreditDefinition
from hyper_heuristic.credit import (
    CreditDefinedOn,
    CreditFamily,
    CreditDefinitionFactory,
    available_credit_definitions,
    create,
)
from hyper_heuristic.indicators import AdditiveEpsilonIndicator, HypervolumeIndicator, R2Indicator


class _Problem:
    def __init__(self, n_obj: int) -> None:
        self.n_obj = n_obj


def test_every_registered_name_builds_for_two_objectives() -> None:
    names = available_credit_definitions()
    assert len(names) == 21
    for name in names:
        definition = create(name, {}, _Problem(2))
        assert definition.family in set(CreditFamily)


def test_opihv_defaults_for_three_objectives() -> None:
    definition = create("OPIHV", {}, _Problem(3))
    assert isinstance(definition.indicator, HypervolumeIndicator)
    assert definition.indicator.ref_point.tolist() == [2.0, 2.0, 2.0]
    assert definition.kappa == 0.05


def test_unknown_name_is_rejected() -> None:
    with pytest.raises(UnknownCreditDefinition):
        create("XYZ", {}, _Problem(2))
    with pytest.raises(UnknownCreditDefinition):
        CreditDefinitionFactory().create("opdo", {}, 2)


def test_default_reference_vector_counts() -> None:
    assert create("SIR2PF", {}, 2).indicator.weights.shape == (50, 2)
    assert create("CSR2A", {}, 3).indicator.weights.shape == (91, 3)


def test_reference_vectors_required_beyond_three_objectives() -> None:
    with pytest.raises(ConfigurationError):
        create("OPIR2", {}, 4)
    definition = create("OPIR2", {"num_reference_vectors": 35}, 4)
    assert definition.indicator.weights.shape == (35, 4)
    # sin R2 no hace falta el numero de vectores
    assert isinstance(create("SIHVA", {}, 4).indicator, HypervolumeIndicator)


def test_ideal_point_and_ref_point_are_independent() -> None:
    definition = create("SIR2PF", {"ref_point": "3.0, 3.0", "ideal_point": [0.5, 0.5]}, 2)
    indicator = definition.indicator
    assert isinstance(indicator, R2Indicator)
    assert np.allclose(indicator.ideal_point, [0.5, 0.5])
    assert np.allclose(indicator.anchor, [[3.0, 3.0]])


def test_string_properties_are_parsed() -> None:
    definition = create("OPDo", {"satisfy": "2.5", "disatisfy": "-1", "neither": "0.25"}, 2)
    assert (definition.satisfy, definition.disatisfy, definition.neither) == (2.5, -1.0, 0.25)


@pytest.mark.parametrize(
    "configuration",
    [
        {"kappa": "abc"},
        {"kappa": 0.0},
        {"ref_point": [2.0, 2.0, 2.0]},
        {"ideal_point": "0.0"},
        {"num_reference_vectors": 0},
        {"num_reference_vectors": 2.5},
    ],
)
def test_malformed_configuration(configuration: dict) -> None:
    with pytest.raises(ConfigurationError):
        create("OPIR2", configuration, 2)


def test_problem_without_objective_count() -> None:
    with pytest.raises(ConfigurationError):
        create("OPDo", {}, object())


def test_reference_sets_and_indicators() -> None:
    assert create("SIAEA", {}, 2).defined_on is CreditDefinedOn.ARCHIVE
    assert isinstance(create("SIAEPF", {}, 2).indicator, AdditiveEpsilonIndicator)
    assert create("CSHVPF", {}, 2).defined_on is CreditDefinedOn.PARETO_FRONT
    assert create("CSDe", {}, 2).defined_on is CreditDefinedOn.NEIGHBORHOOD
    assert create("OPDe", {}, 2).family is CreditFamily.OFFSPRING_PARENT
    assert create("SIDe", {}, 2).family is CreditFamily.OFFSPRING_POPULATION
    assert create("CSDoA", {}, 2).family is CreditFamily.POPULATION_CONTRIBUTION
