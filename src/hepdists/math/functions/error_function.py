import logging
from math import erf
from typing import Union

import numba as nb
import numpy as np
from scipy.special import erfinv

from hepdists.utils import numba_math_defaults_kwargs as nb_kwargs

log = logging.getLogger(__name__)


@nb.vectorize([nb.float32(nb.float32), nb.float64(nb.float64)], **nb_kwargs)
def nb_erf(x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    r"""
    Error function as a numba ufunc. The float32 loop comes first so that
    single precision inputs stay in single precision.

    Parameters
    ----------
    x
        The input data

    Returns
    -------
    math.erf(x), in the dtype of `x`
    """

    return erf(x)


def erfinv_clipped(y: np.ndarray) -> np.ndarray:
    r"""
    Inverse error function, with the input clipped to :math:`[-1, 1]`.

    Inverting a CDF segment through :math:`\text{erf}` can push the argument a
    few ulps outside the domain of :func:`scipy.special.erfinv` when the
    probability sits next to a segment boundary. Those values are clipped
    instead of turned into NaN. The dtype of `y` is preserved.

    Parameters
    ----------
    y
        The input data
    """

    y = np.asarray(y)
    outside = np.abs(y) > 1
    if np.any(outside):
        log.debug(
            f"clipped {np.count_nonzero(outside)} erfinv argument(s) to [-1, 1]"
        )
    return erfinv(np.clip(y, -1, 1))
