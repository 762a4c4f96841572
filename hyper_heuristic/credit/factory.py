"""
Fabrica de definiciones de credito.

El conjunto de variantes es cerrado: cada miembro de ``CreditDefinitionName``
describe que se compara, sobre que conjunto de referencia y con que indicador.
Un nombre fuera de la enumeracion lanza ``UnknownCreditDefinition``; nunca se
usa una variante por defecto.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..core.config import Properties
from ..core.errors import ConfigurationError, UnknownCreditDefinition
from ..core.telemetry import LOGGER_NAME
from ..indicators.base import QualityIndicator
from ..indicators.epsilon import AdditiveEpsilonIndicator
from ..indicators.hypervolume import HypervolumeIndicator
from ..indicators.r2 import R2Indicator
from .base import CreditDefinition
from .contribution import DecompositionContribution, IndicatorContribution, SetContribution
from .offspring_parent import OPBinaryIndicator, ParentDecomposition, ParentDomination
from .offspring_population import OffspringNeighborhood, OffspringSetIndicator, OffspringSetMembership
from .snapshot import CreditDefinedOn

DEFAULT_SATISFY = 1.0
DEFAULT_DISATISFY = 0.0
DEFAULT_NEITHER = 0.0
DEFAULT_REF_COMPONENT = 2.0
DEFAULT_IDEAL_COMPONENT = 0.0
DEFAULT_KAPPA = 0.05
DEFAULT_NUM_REFERENCE_VECTORS = {2: 50, 3: 91}


class CreditDefinitionName(str, Enum):
    OPDe = "OPDe"
    OPDo = "OPDo"
    OPIAE = "OPIAE"
    OPIHV = "OPIHV"
    OPIR2 = "OPIR2"
    SIDe = "SIDe"
    SIDoPF = "SIDoPF"
    SIDoA = "SIDoA"
    SIAEPF = "SIAEPF"
    SIHVPF = "SIHVPF"
    SIR2PF = "SIR2PF"
    SIAEA = "SIAEA"
    SIHVA = "SIHVA"
    SIR2A = "SIR2A"
    CSDe = "CSDe"
    CSDoPF = "CSDoPF"
    CSDoA = "CSDoA"
    CSHVPF = "CSHVPF"
    CSHVA = "CSHVA"
    CSR2PF = "CSR2PF"
    CSR2A = "CSR2A"


_PF = CreditDefinedOn.PARETO_FRONT
_A = CreditDefinedOn.ARCHIVE
_N = CreditDefinedOn.NEIGHBORHOOD
_P = CreditDefinedOn.PARENT

# nombre -> (forma del credito, indicador, conjunto de referencia)
_VARIANTS: Dict[CreditDefinitionName, Tuple[str, Optional[str], CreditDefinedOn]] = {
    CreditDefinitionName.OPDe: ("parent_decomposition", None, _P),
    CreditDefinitionName.OPDo: ("parent_domination", None, _P),
    CreditDefinitionName.OPIAE: ("parent_indicator", "AE", _P),
    CreditDefinitionName.OPIHV: ("parent_indicator", "HV", _P),
    CreditDefinitionName.OPIR2: ("parent_indicator", "R2", _P),
    CreditDefinitionName.SIDe: ("offspring_neighborhood", None, _N),
    CreditDefinitionName.SIDoPF: ("offspring_membership", None, _PF),
    CreditDefinitionName.SIDoA: ("offspring_membership", None, _A),
    CreditDefinitionName.SIAEPF: ("offspring_indicator", "AE", _PF),
    CreditDefinitionName.SIHVPF: ("offspring_indicator", "HV", _PF),
    CreditDefinitionName.SIR2PF: ("offspring_indicator", "R2", _PF),
    CreditDefinitionName.SIAEA: ("offspring_indicator", "AE", _A),
    CreditDefinitionName.SIHVA: ("offspring_indicator", "HV", _A),
    CreditDefinitionName.SIR2A: ("offspring_indicator", "R2", _A),
    CreditDefinitionName.CSDe: ("decomposition_contribution", None, _N),
    CreditDefinitionName.CSDoPF: ("set_contribution", None, _PF),
    CreditDefinitionName.CSDoA: ("set_contribution", None, _A),
    CreditDefinitionName.CSHVPF: ("indicator_contribution", "HV", _PF),
    CreditDefinitionName.CSHVA: ("indicator_contribution", "HV", _A),
    CreditDefinitionName.CSR2PF: ("indicator_contribution", "R2", _PF),
    CreditDefinitionName.CSR2A: ("indicator_contribution", "R2", _A),
}


def available_credit_definitions() -> List[str]:
    return [member.value for member in CreditDefinitionName]


def objective_count(problem: Any) -> int:
    """Numero de objetivos de un ``pymoo.core.problem.Problem`` o de un entero."""
    if isinstance(problem, bool):
        raise ConfigurationError(f"Cannot read the number of objectives from {problem!r}")
    if isinstance(problem, int):
        n_obj = problem
    else:
        n_obj = getattr(problem, "n_obj", None)
    if n_obj is None:
        raise ConfigurationError(f"Cannot read the number of objectives from {problem!r}")
    n_obj = int(n_obj)
    if n_obj < 1:
        raise ConfigurationError(f"Number of objectives must be positive, got {n_obj}")
    return n_obj


def num_reference_vectors(props: Properties, n_obj: int) -> int:
    count = props.get_int("num_reference_vectors", DEFAULT_NUM_REFERENCE_VECTORS.get(n_obj))
    if count < 1:
        raise ConfigurationError(f"num_reference_vectors must be positive, got {count}")
    return count


class CreditDefinitionFactory:
    """Fabrica sin estado; basta con una instancia o con la funcion ``create``."""

    def __init__(self, logger: Optional[Any] = None) -> None:
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def create(
        self,
        name: str,
        configuration: Optional[Mapping[str, Any]] = None,
        problem: Any = None,
    ) -> CreditDefinition:
        try:
            key = CreditDefinitionName(name)
        except ValueError:
            raise UnknownCreditDefinition(name) from None

        n_obj = objective_count(problem)
        props = configuration if isinstance(configuration, Properties) else Properties(configuration)

        satisfy = props.get_float("satisfy", DEFAULT_SATISFY)
        disatisfy = props.get_float("disatisfy", DEFAULT_DISATISFY)
        neither = props.get_float("neither", DEFAULT_NEITHER)
        kappa = props.get_float("kappa", DEFAULT_KAPPA)
        if kappa <= 0.0:
            raise ConfigurationError(f"kappa must be positive, got {kappa}")
        ref_point = props.get_float_array("ref_point", [DEFAULT_REF_COMPONENT] * n_obj, n_obj)
        ideal_point = props.get_float_array("ideal_point", [DEFAULT_IDEAL_COMPONENT] * n_obj, n_obj)

        builders: Dict[str, Callable[[], QualityIndicator]] = {
            "AE": lambda: AdditiveEpsilonIndicator(anchor=ref_point),
            "HV": lambda: HypervolumeIndicator(ref_point),
            "R2": lambda: R2Indicator(
                n_obj,
                num_reference_vectors(props, n_obj),
                ideal_point=ideal_point,
                anchor=ref_point,
            ),
        }

        shape, indicator_code, defined_on = _VARIANTS[key]
        indicator = builders[indicator_code]() if indicator_code is not None else None

        if shape == "parent_decomposition":
            definition: CreditDefinition = ParentDecomposition()
        elif shape == "parent_domination":
            definition = ParentDomination(satisfy, neither, disatisfy)
        elif shape == "parent_indicator":
            definition = OPBinaryIndicator(indicator, kappa)
        elif shape == "offspring_neighborhood":
            definition = OffspringNeighborhood()
        elif shape == "offspring_membership":
            definition = OffspringSetMembership(satisfy, disatisfy, defined_on)
        elif shape == "offspring_indicator":
            definition = OffspringSetIndicator(indicator, defined_on)
        elif shape == "decomposition_contribution":
            definition = DecompositionContribution(satisfy, disatisfy)
        elif shape == "set_contribution":
            definition = SetContribution(satisfy, disatisfy, defined_on)
        elif shape == "indicator_contribution":
            definition = IndicatorContribution(indicator, defined_on)
        else:
            raise UnknownCreditDefinition(name)

        self.logger.debug("Built credit definition %s -> %r (n_obj=%d)", key.value, definition, n_obj)
        return definition


def create(
    name: str,
    configuration: Optional[Mapping[str, Any]] = None,
    problem: Any = None,
) -> CreditDefinition:
    """Atajo sobre ``CreditDefinitionFactory().create``."""
    return CreditDefinitionFactory().create(name, configuration, problem)


if __name__ == "__main__":
    for credit_name in available_credit_definitions():
        print(credit_name, "->", create(credit_name, {}, 2))
