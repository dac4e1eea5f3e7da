r"""
Contains a list of distribution functions, all implemented using Numba's
:func:`numba.vectorize` to take advantage of the just-in-time speed boost.

The module level :func:`pdf`, :func:`cdf`, :func:`quantile`, :func:`minimum`
and :func:`maximum` take the distribution as first argument, for code that
prefers a functional style.
"""

# nopycln: file

from __future__ import annotations

import numpy as np

from hepdists.math.functions.crystal_ball import CrystalBall  # noqa: F401
from hepdists.math.functions.crystal_ball import (  # noqa: F401
    nb_crystal_ball_cdf,
    nb_crystal_ball_pdf,
    tail_constants,
)
from hepdists.math.functions.double_crystal_ball import DoubleCrystalBall  # noqa: F401
from hepdists.math.functions.double_crystal_ball import (  # noqa: F401
    nb_double_crystal_ball_cdf,
    nb_double_crystal_ball_pdf,
)
from hepdists.math.functions.error_function import (  # noqa: F401
    erfinv_clipped,
    nb_erf,
)
from hepdists.math.functions.hep_continuous import HEPContinuous


def pdf(dist: HEPContinuous, x: np.ndarray) -> np.ndarray:
    """Probability density of `dist` at `x`."""
    return dist.pdf(x)


def cdf(dist: HEPContinuous, x: np.ndarray) -> np.ndarray:
    """Cumulative probability of `dist` at `x`."""
    return dist.cdf(x)


def quantile(dist: HEPContinuous, p: np.ndarray) -> np.ndarray:
    """Quantile of `dist` at probability `p`, see :meth:`.HEPContinuous.quantile`."""
    return dist.quantile(p)


def minimum(dist: HEPContinuous) -> float:
    return dist.minimum


def maximum(dist: HEPContinuous) -> float:
    return dist.maximum
