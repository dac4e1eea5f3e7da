"""
Crystal ball distributions for hepdists
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import erf, sqrt

import numba as nb
import numpy as np

from hepdists.errors import ParameterError
from hepdists.math.functions.error_function import erfinv_clipped, nb_erf
from hepdists.math.functions.hep_continuous import (
    HEPContinuous,
    check_finite,
    check_scale,
    float_dtype,
)
from hepdists.utils import numba_math_defaults_kwargs as nb_kwargs

SQRT2 = sqrt(2)
SQRT_HALF_PI = sqrt(np.pi / 2)


def check_tail(alpha: float, n: float, side: str = "") -> None:
    r"""
    Raise :class:`.ParameterError` unless :math:`\alpha>0` and :math:`n>1`.

    `side` is appended to the parameter names in the error message (``"_l"``
    or ``"_r"`` for a double-sided distribution).
    """

    if not alpha > 0:
        raise ParameterError(
            f"alpha{side} (transition point) must be positive, got {alpha}"
        )
    if not n > 1:
        raise ParameterError(
            f"n{side} (power-law exponent) must be greater than 1, got {n}"
        )


def tail_constants(alpha: float, n: float) -> tuple[float, float, float]:
    r"""
    Constants of a power-law tail glued to a unit Gaussian at
    :math:`|\hat{x}| = \alpha`.

    .. math::
        A = \frac{n^n}{\alpha^n}e^{-\alpha^2/2} \\
        B = \frac{n}{\alpha}-\alpha \\
        C = \frac{n}{\alpha(n-1)}e^{-\alpha^2/2}

    :math:`A (B - \hat{x})^{-n}` matches value and slope of
    :math:`e^{-\hat{x}^2/2}` at :math:`\hat{x}=-\alpha`, and :math:`C` is the
    (unnormalized) area of the tail. The arithmetic is carried out in the
    precision of `alpha` and `n`.

    :math:`A` overflows to ``inf`` for large `n` and small `alpha`. The
    kernels never use it, they evaluate the tail as
    :math:`e^{-\alpha^2/2}\left(\frac{\alpha(B - \hat{x})}{n}\right)^{-n}`
    whose base is at least 1 in the tail.

    Returns
    -------
    a, b, c
    """

    gauss = np.exp(-(alpha**2) / 2)
    with np.errstate(over="ignore"):
        a = np.exp(n * np.log(n / alpha) - alpha**2 / 2)
    b = n / alpha - alpha
    c = n / (alpha * (n - 1)) * gauss
    return a, b, c


@nb.vectorize(
    [ftype(*(ftype,) * 8) for ftype in (nb.float32, nb.float64)], **nb_kwargs
)
def nb_crystal_ball_pdf(
    x: float,
    mu: float,
    sigma: float,
    alpha: float,
    n: float,
    norm: float,
    b: float,
    gauss_alpha: float,
) -> float:
    r"""
    PDF of a power-law tail plus gaussian. Its range of support is :math:`x\in\mathbb{R}, \alpha>0, n>1`. It computes:


    .. math::
        pdf(x, \alpha, n, \mu, \sigma) =  \begin{cases}Ne^{-\alpha^2/2}\left(\frac{\alpha}{n}(B-\frac{x-\mu}{\sigma})\right)^{-n}/\sigma \quad \frac{x-\mu}{\sigma}\leq -\alpha \\ Ne^{-(\frac{x-\mu}{\sigma})^2/2}/\sigma \quad \frac{x-\mu}{\sigma}>-\alpha\end{cases}


    which is :math:`NA(B-\hat{x})^{-n}/\sigma` in the tail, without forming
    :math:`A`. The constants are precomputed by :class:`CrystalBall`, the
    kernel only branches on the position of `x`.

    Parameters
    ----------
    x
        The input data
    mu
        The amount to shift the distribution
    sigma
        The amount to scale the distribution
    alpha
        The point where the pdf changes from power-law to Gaussian
    n
        The power of the power-law tail
    norm
        The normalization constant N
    b
        The tail constant B
    gauss_alpha
        :math:`e^{-\alpha^2/2}`
    """

    y = (x - mu) / sigma
    if y > -alpha:
        return norm * np.exp(-(y**2) / 2) / sigma
    return norm * gauss_alpha * (alpha * (b - y) / n) ** (-n) / sigma


@nb.vectorize(
    [ftype(*(ftype,) * 9) for ftype in (nb.float32, nb.float64)], **nb_kwargs
)
def nb_crystal_ball_cdf(
    x: float,
    mu: float,
    sigma: float,
    alpha: float,
    n: float,
    norm: float,
    b: float,
    cdf_alpha: float,
    erf_alpha: float,
) -> float:
    r"""
    CDF for power-law tail plus gaussian. Its range of support is :math:`x\in\mathbb{R}, \alpha>0, n>1`. It computes:


    .. math::
        cdf(x, \alpha, n,  \mu, \sigma)= \begin{cases}  F_{-\alpha}\left(\frac{\alpha}{n}(B-\frac{x-\mu}{\sigma})\right)^{1-n} \quad , \frac{x-\mu}{\sigma} \leq -\alpha \\ F_{-\alpha} + N \sqrt{\frac{\pi}{2}}\left(\text{erf}\left(\frac{x-\mu}{\sigma \sqrt{2}}\right)+\text{erf}\left(\frac{\alpha}{\sqrt{2}}\right)\right)  \quad , \frac{x-\mu}{\sigma} >  -\alpha \end{cases}


    Where :math:`F_{-\alpha} = NC` is the cdf at the transition point.

    Parameters
    ----------
    x
        The input data
    mu
        The amount to shift the distribution
    sigma
        The amount to scale the distribution
    alpha
        The point where the cdf changes from power-law to Gaussian
    n
        The power of the power-law tail
    norm
        The normalization constant N
    b
        The tail constant B
    cdf_alpha
        The cdf at the transition point
    erf_alpha
        :math:`\text{erf}(\alpha/\sqrt{2})`
    """

    y = (x - mu) / sigma
    if y <= -alpha:
        return cdf_alpha * (alpha * (b - y) / n) ** (1 - n)
    cdf = cdf_alpha + norm * SQRT_HALF_PI * (erf(y / SQRT2) + erf_alpha)
    # rounding can overshoot in the far right
    if cdf > 1:
        return 1.0
    return cdf


@dataclass(frozen=True)
class CrystalBall(HEPContinuous):
    r"""
    Crystal Ball distribution: a Gaussian core with a power-law tail on the
    left side, below the mean.

    .. math::
        f(x; \mu, \sigma, \alpha, n) = \begin{cases} N e^{-\hat{x}^2/2}/\sigma \quad \hat{x} > -\alpha \\ N A (B - \hat{x})^{-n}/\sigma \quad \hat{x} \leq -\alpha \end{cases}

    with :math:`\hat{x} = (x - \mu)/\sigma`. :math:`A` and :math:`B` keep the
    density and its first derivative continuous at the transition point,
    :math:`N` normalizes it (see :func:`tail_constants`).

    Parameters
    ----------
    mu
        The mean of the Gaussian core
    sigma
        The standard deviation of the Gaussian core, must be positive
    alpha
        The distance from `mu` to the transition point, in units of `sigma`,
        must be positive
    n
        The power of the tail, must be greater than 1

    Raises
    ------
    ParameterError
        if a parameter is out of range

    Examples
    --------
    >>> from hepdists import CrystalBall
    >>> cb = CrystalBall(0.0, 1.0, 2.0, 3.2)
    >>> cb.pdf([-3.0, 0.0, 1.0])
    >>> cb.quantile(cb.cdf(-3.0))
    """

    mu: float
    sigma: float
    alpha: float
    n: float
    dtype: np.dtype = field(init=False, repr=False, compare=False)
    norm: float = field(init=False, repr=False, compare=False)
    a: float = field(init=False, repr=False, compare=False)
    b: float = field(init=False, repr=False, compare=False)
    gauss_alpha: float = field(init=False, repr=False, compare=False)
    cdf_alpha: float = field(init=False, repr=False, compare=False)
    erf_alpha: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_finite(mu=self.mu, sigma=self.sigma, alpha=self.alpha, n=self.n)
        check_scale(self.sigma)
        check_tail(self.alpha, self.n)

        dtype = float_dtype(self.mu, self.sigma, self.alpha, self.n)
        mu, sigma, alpha, n = (dtype.type(p) for p in self.params)

        a, b, c = tail_constants(alpha, n)
        erf_alpha = nb_erf(alpha / dtype.type(SQRT2))
        norm = 1 / (c + dtype.type(SQRT_HALF_PI) * (1 + erf_alpha))

        self._freeze(
            mu=mu,
            sigma=sigma,
            alpha=alpha,
            n=n,
            dtype=dtype,
            norm=norm,
            a=a,
            b=b,
            gauss_alpha=np.exp(-(alpha**2) / 2),
            cdf_alpha=norm * c,
            erf_alpha=erf_alpha,
        )

    def _pdf(self, x: np.ndarray) -> np.ndarray:
        return nb_crystal_ball_pdf(
            x,
            *self.constants(
                x.dtype, "mu", "sigma", "alpha", "n", "norm", "b", "gauss_alpha"
            ),
        )

    def _cdf(self, x: np.ndarray) -> np.ndarray:
        return nb_crystal_ball_cdf(
            x,
            *self.constants(
                x.dtype,
                "mu",
                "sigma",
                "alpha",
                "n",
                "norm",
                "b",
                "cdf_alpha",
                "erf_alpha",
            ),
        )

    def _quantile(self, p: np.ndarray) -> np.ndarray:
        mu, sigma, alpha, n, norm, b, cdf_alpha, erf_alpha = self.constants(
            p.dtype, "mu", "sigma", "alpha", "n", "norm", "b", "cdf_alpha", "erf_alpha"
        )
        x_hat = np.empty_like(p)

        # power-law tail, p = F(-alpha) * (alpha * (B - x_hat) / n)^(1 - n)
        tail = p <= cdf_alpha
        with np.errstate(over="ignore"):
            base = (p[tail] / cdf_alpha) ** (1 / (1 - n))
        x_hat[tail] = b - n / alpha * base

        # gaussian core
        core = ~tail
        x_hat[core] = SQRT2 * erfinv_clipped(
            (p[core] - cdf_alpha) / (norm * SQRT_HALF_PI) - erf_alpha
        )

        return mu + sigma * x_hat

    def required_args(self) -> tuple[str, str, str, str]:
        return "mu", "sigma", "alpha", "n"
