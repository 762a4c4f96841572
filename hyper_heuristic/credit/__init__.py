"""
Definiciones de credito: como se convierte el estado de la poblacion antes y
despues de aplicar una heuristica en una recompensa escalar.
"""

from .base import CreditDefinition, CreditFamily  # noqa: F401
from .contribution import (  # noqa: F401
    ContributionDefinition,
    DecompositionContribution,
    IndicatorContribution,
    SetContribution,
)
from .factory import (  # noqa: F401
    CreditDefinitionFactory,
    CreditDefinitionName,
    available_credit_definitions,
    create,
)
from .offspring_parent import OPBinaryIndicator, ParentDecomposition, ParentDomination  # noqa: F401
from .offspring_population import (  # noqa: F401
    OffspringNeighborhood,
    OffspringSetIndicator,
    OffspringSetMembership,
)
from .snapshot import CreditDefinedOn, Neighborhood, PopulationSnapshot  # noqa: F401

__all__ = [
    "CreditDefinition",
    "CreditFamily",
    "ContributionDefinition",
    "DecompositionContribution",
    "IndicatorContribution",
    "SetContribution",
    "CreditDefinitionFactory",
    "CreditDefinitionName",
    "available_credit_definitions",
    "create",
    "OPBinaryIndicator",
    "ParentDecomposition",
    "ParentDomination",
    "OffspringNeighborhood",
    "OffspringSetIndicator",
    "OffspringSetMembership",
    "CreditDefinedOn",
    "Neighborhood",
    "PopulationSnapshot",
]
