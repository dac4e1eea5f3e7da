"""
Base class of the hepdists distributions. A distribution is an immutable value
holding its parameters and all the constants derived from them, and exposes a
scipy-like interface on top of numba-vectorized kernels.
Example:

>>> cb = CrystalBall(mu=0, sigma=1, alpha=2, n=3)
>>> cb.pdf([-1, 2, 3]) # a direct call to the numba-fied kernel
>>> cb.quantile(0.5) # analytic inversion of the cdf
>>> cb.rvs(100) # inverse-transform sampling

NOTE: the precision of a distribution is fixed by its parameters, ``float32``
parameters give ``float32`` results
"""

from __future__ import annotations

import numpy as np

from hepdists.errors import DomainError, ParameterError


def float_dtype(*values) -> np.dtype:
    r"""
    Floating point dtype the distribution kernels are evaluated in.

    Follows numpy promotion rules, except that anything that does not promote
    to ``float32`` (integers, ``float64``, ``longdouble``) is computed in
    ``float64``.
    """

    dtype = np.result_type(*values)
    if dtype == np.float32:
        return dtype
    return np.dtype(np.float64)


def as_float_array(x, dtype: np.dtype) -> np.ndarray:
    r"""
    Convert `x` to an array in the precision shared with `dtype`.

    Python scalars do not upcast a ``float32`` distribution.
    """

    if not np.isscalar(x):
        x = np.asarray(x)
    return np.asarray(x, dtype=float_dtype(x, dtype))


def check_finite(**pars) -> None:
    """Raise :class:`.ParameterError` if any of the keyword values is not finite."""
    for name, value in pars.items():
        if not np.isfinite(value):
            raise ParameterError(f"{name} must be finite, got {value}")


def check_scale(sigma: float) -> None:
    """Raise :class:`.ParameterError` unless the scale is positive."""
    if not sigma > 0:
        raise ParameterError(f"sigma (scale) must be positive, got {sigma}")


class HEPContinuous:
    r"""
    Common interface of the hepdists continuous distributions.

    Subclasses are frozen dataclasses. They call :meth:`_freeze` from their
    ``__post_init__`` to store the parameters, cast to the distribution dtype,
    together with the derived constants, and implement

    1. :func:`_pdf(x)`
    The PDF evaluated on an array already cast to the working dtype

    2. :func:`_cdf(x)`
    The CDF evaluated on an array already cast to the working dtype

    3. :func:`_quantile(p)`
    The inverse CDF for probabilities strictly inside :math:`(0, 1)`

    4. :func:`required_args`
    A tuple of the names of the parameters, in constructor order
    """

    x_lo = -np.inf
    x_hi = np.inf

    def _freeze(self, **fields) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def _pdf(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _cdf(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _quantile(self, p: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def required_args(self) -> tuple[str, ...]:
        raise NotImplementedError

    @property
    def params(self) -> tuple:
        """The parameter values, ordered as in :meth:`required_args`."""
        return tuple(getattr(self, name) for name in self.required_args())

    def constants(self, dtype: np.dtype, *names: str) -> tuple:
        """The named attributes cast to `dtype`, ready to feed a kernel."""
        return tuple(dtype.type(getattr(self, name)) for name in names)

    def pdf(self, x: np.ndarray) -> np.ndarray:
        r"""
        Probability density at `x`, a scalar or array-like

        Returns
        -------
        support normalized pdf, a scalar for a scalar input
        """

        return self._pdf(as_float_array(x, self.dtype))

    def logpdf(self, x: np.ndarray) -> np.ndarray:
        r"""
        Natural logarithm of the pdf, ``-inf`` where the density underflows
        """

        with np.errstate(divide="ignore"):
            return np.log(self.pdf(x))

    def cdf(self, x: np.ndarray) -> np.ndarray:
        r"""
        Cumulative distribution at `x`, a scalar or array-like

        Returns
        -------
        integral of the pdf from the lower end of the support up to `x`
        """

        return self._cdf(as_float_array(x, self.dtype))

    def sf(self, x: np.ndarray) -> np.ndarray:
        r"""
        Survival function, :math:`1 - cdf(x)`
        """

        return 1 - self.cdf(x)

    def quantile(self, p: np.ndarray) -> np.ndarray:
        r"""
        Inverse of the cdf.

        Parameters
        ----------
        p
            probabilities in :math:`[0, 1]`. ``p = 0`` and ``p = 1`` map to the
            ends of the support.

        Raises
        ------
        DomainError
            if any probability lies outside :math:`[0, 1]` or is NaN.
        """

        p = as_float_array(p, self.dtype)
        outside = ~((p >= 0) & (p <= 1))
        if np.any(outside):
            raise DomainError(p[outside][0].item())

        x = np.empty_like(p)
        x[p == 0] = self.x_lo
        x[p == 1] = self.x_hi
        inner = (p > 0) & (p < 1)
        x[inner] = self._quantile(p[inner])
        return x[()]

    def ppf(self, p: np.ndarray) -> np.ndarray:
        r"""
        Alias of :meth:`quantile`, named after scipy's percent point function
        """

        return self.quantile(p)

    def rvs(self, size=None, random_state=None) -> np.ndarray:
        r"""
        Random variates drawn by inverting the cdf on uniform deviates.

        Parameters
        ----------
        size
            output shape, a single value is drawn if `None`
        random_state
            seed or :class:`numpy.random.Generator` handed to
            :func:`numpy.random.default_rng`
        """

        rng = np.random.default_rng(random_state)
        return self.quantile(rng.random(size, dtype=self.dtype))

    @property
    def minimum(self) -> float:
        """Lower end of the support, in the distribution dtype."""
        return self.dtype.type(self.x_lo)

    @property
    def maximum(self) -> float:
        """Upper end of the support, in the distribution dtype."""
        return self.dtype.type(self.x_hi)

    def support(self) -> tuple[float, float]:
        return self.minimum, self.maximum
