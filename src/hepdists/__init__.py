"""
hepdists: continuous probability distributions for high-energy physics
analyses, with analytic densities, cumulative distributions and quantiles.
"""

from ._version import version as __version__
from .errors import DomainError, HEPDistError, ParameterError
from .math.distributions import (
    CrystalBall,
    DoubleCrystalBall,
    cdf,
    maximum,
    minimum,
    pdf,
    quantile,
)

__all__ = [
    "__version__",
    "CrystalBall",
    "DoubleCrystalBall",
    "DomainError",
    "HEPDistError",
    "ParameterError",
    "cdf",
    "maximum",
    "minimum",
    "pdf",
    "quantile",
]
