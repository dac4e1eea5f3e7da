"""
Double-sided crystal ball distributions for hepdists
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import erf

import numba as nb
import numpy as np

from hepdists.math.functions.crystal_ball import (
    SQRT2,
    SQRT_HALF_PI,
    check_tail,
    tail_constants,
)
from hepdists.math.functions.error_function import erfinv_clipped, nb_erf
from hepdists.math.functions.hep_continuous import (
    HEPContinuous,
    check_finite,
    check_scale,
    float_dtype,
)
from hepdists.utils import numba_math_defaults_kwargs as nb_kwargs


@nb.vectorize(
    [ftype(*(ftype,) * 12) for ftype in (nb.float32, nb.float64)], **nb_kwargs
)
def nb_double_crystal_ball_pdf(
    x: float,
    mu: float,
    sigma: float,
    alpha_l: float,
    n_l: float,
    alpha_r: float,
    n_r: float,
    norm: float,
    b_l: float,
    b_r: float,
    gauss_alpha_l: float,
    gauss_alpha_r: float,
) -> float:
    r"""
    PDF of a gaussian with power-law tails on both sides. Its range of support is :math:`x\in\mathbb{R}, \alpha_L, \alpha_R>0, n_L, n_R>1`. It computes:


    .. math::
        pdf(x) =  \begin{cases}Ne^{-\alpha_L^2/2}\left(\frac{\alpha_L}{n_L}(B_L-\hat{x})\right)^{-n_L}/\sigma \quad \hat{x} < -\alpha_L \\ Ne^{-\hat{x}^2/2}/\sigma \quad -\alpha_L \leq \hat{x} < \alpha_R \\ Ne^{-\alpha_R^2/2}\left(\frac{\alpha_R}{n_R}(B_R+\hat{x})\right)^{-n_R}/\sigma \quad \hat{x} \geq \alpha_R \end{cases}


    Where :math:`\hat{x} = (x-\mu)/\sigma`. The tails equal
    :math:`NA_L(B_L-\hat{x})^{-n_L}/\sigma` and
    :math:`NA_R(B_R+\hat{x})^{-n_R}/\sigma`, evaluated without forming
    :math:`A_L` and :math:`A_R`. The constants are precomputed by
    :class:`DoubleCrystalBall`.

    Parameters
    ----------
    x
        The input data
    mu
        The amount to shift the distribution
    sigma
        The amount to scale the distribution
    alpha_l, alpha_r
        The points where the pdf changes from Gaussian to the left and right
        power-law tails
    n_l, n_r
        The powers of the left and right tails
    norm
        The normalization constant N
    b_l, b_r
        The left and right tail constants B
    gauss_alpha_l, gauss_alpha_r
        :math:`e^{-\alpha_L^2/2}` and :math:`e^{-\alpha_R^2/2}`
    """

    y = (x - mu) / sigma
    if y < -alpha_l:
        return norm * gauss_alpha_l * (alpha_l * (b_l - y) / n_l) ** (-n_l) / sigma
    if y < alpha_r:
        return norm * np.exp(-(y**2) / 2) / sigma
    return norm * gauss_alpha_r * (alpha_r * (b_r + y) / n_r) ** (-n_r) / sigma


@nb.vectorize(
    [ftype(*(ftype,) * 13) for ftype in (nb.float32, nb.float64)], **nb_kwargs
)
def nb_double_crystal_ball_cdf(
    x: float,
    mu: float,
    sigma: float,
    alpha_l: float,
    n_l: float,
    alpha_r: float,
    n_r: float,
    norm: float,
    b_l: float,
    b_r: float,
    cdf_l: float,
    cdf_r: float,
    erf_alpha_l: float,
) -> float:
    r"""
    CDF of a gaussian with power-law tails on both sides. It computes:


    .. math::
        cdf(x) = \begin{cases} F_L\left(\frac{\alpha_L}{n_L}(B_L-\hat{x})\right)^{1-n_L} \quad \hat{x} \leq -\alpha_L \\ F_L + N \sqrt{\frac{\pi}{2}}\left(\text{erf}\left(\frac{\hat{x}}{\sqrt{2}}\right)+\text{erf}\left(\frac{\alpha_L}{\sqrt{2}}\right)\right) \quad -\alpha_L < \hat{x} < \alpha_R \\ F_R + (1 - F_R)\left(1 - \left(\frac{\alpha_R}{n_R}(B_R+\hat{x})\right)^{1-n_R}\right) \quad \hat{x} \geq \alpha_R \end{cases}


    Where :math:`F_L = NC_L` and :math:`F_R = 1 - NC_R` are the cdf at the
    left and right transition points.

    Parameters
    ----------
    x
        The input data
    mu
        The amount to shift the distribution
    sigma
        The amount to scale the distribution
    alpha_l, alpha_r
        The points where the cdf changes from Gaussian to the left and right
        power-law tails
    n_l, n_r
        The powers of the left and right tails
    norm
        The normalization constant N
    b_l, b_r
        The left and right tail constants B
    cdf_l, cdf_r
        The cdf at the left and right transition points
    erf_alpha_l
        :math:`\text{erf}(\alpha_L/\sqrt{2})`
    """

    y = (x - mu) / sigma
    if y <= -alpha_l:
        return cdf_l * (alpha_l * (b_l - y) / n_l) ** (1 - n_l)
    if y < alpha_r:
        return cdf_l + norm * SQRT_HALF_PI * (erf(y / SQRT2) + erf_alpha_l)
    cdf = cdf_r + (1 - cdf_r) * (1 - (alpha_r * (b_r + y) / n_r) ** (1 - n_r))
    # rounding can overshoot in the far right
    if cdf > 1:
        return 1.0
    return cdf


@dataclass(frozen=True)
class DoubleCrystalBall(HEPContinuous):
    r"""
    Double-sided Crystal Ball distribution: a Gaussian core with independent
    power-law tails below and above the mean.

    .. math::
        f(x) = \begin{cases} N A_L (B_L - \hat{x})^{-n_L}/\sigma \quad \hat{x} < -\alpha_L \\ N e^{-\hat{x}^2/2}/\sigma \quad -\alpha_L \leq \hat{x} < \alpha_R \\ N A_R (B_R + \hat{x})^{-n_R}/\sigma \quad \hat{x} \geq \alpha_R \end{cases}

    with :math:`\hat{x} = (x - \mu)/\sigma`. Each tail is built as the tail
    of a :class:`.CrystalBall` (mirrored for the right side), so that the
    density and its first derivative are continuous at both transition points.

    Parameters
    ----------
    mu
        The mean of the Gaussian core
    sigma
        The standard deviation of the Gaussian core, must be positive
    alpha_l
        The distance from `mu` to the left transition point, in units of
        `sigma`, must be positive
    n_l
        The power of the left tail, must be greater than 1
    alpha_r
        The distance from `mu` to the right transition point, in units of
        `sigma`, must be positive
    n_r
        The power of the right tail, must be greater than 1

    Raises
    ------
    ParameterError
        if a parameter is out of range

    Examples
    --------
    >>> from hepdists import DoubleCrystalBall
    >>> dcb = DoubleCrystalBall(0.0, 1.0, 1.5, 2.0, 2.0, 3.0)
    >>> dcb.cdf([-2.0, 0.5, 3.0])
    >>> dcb.rvs(1000, random_state=42)
    """

    mu: float
    sigma: float
    alpha_l: float
    n_l: float
    alpha_r: float
    n_r: float
    dtype: np.dtype = field(init=False, repr=False, compare=False)
    norm: float = field(init=False, repr=False, compare=False)
    a_l: float = field(init=False, repr=False, compare=False)
    b_l: float = field(init=False, repr=False, compare=False)
    a_r: float = field(init=False, repr=False, compare=False)
    b_r: float = field(init=False, repr=False, compare=False)
    gauss_alpha_l: float = field(init=False, repr=False, compare=False)
    gauss_alpha_r: float = field(init=False, repr=False, compare=False)
    cdf_l: float = field(init=False, repr=False, compare=False)
    cdf_r: float = field(init=False, repr=False, compare=False)
    erf_alpha_l: float = field(init=False, repr=False, compare=False)
    erf_alpha_r: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_finite(
            mu=self.mu,
            sigma=self.sigma,
            alpha_l=self.alpha_l,
            n_l=self.n_l,
            alpha_r=self.alpha_r,
            n_r=self.n_r,
        )
        check_scale(self.sigma)
        check_tail(self.alpha_l, self.n_l, side="_l")
        check_tail(self.alpha_r, self.n_r, side="_r")

        dtype = float_dtype(*self.params)
        mu, sigma, alpha_l, n_l, alpha_r, n_r = (dtype.type(p) for p in self.params)

        a_l, b_l, c_l = tail_constants(alpha_l, n_l)
        a_r, b_r, c_r = tail_constants(alpha_r, n_r)
        erf_alpha_l = nb_erf(alpha_l / dtype.type(SQRT2))
        erf_alpha_r = nb_erf(alpha_r / dtype.type(SQRT2))
        core = dtype.type(SQRT_HALF_PI) * (erf_alpha_r + erf_alpha_l)
        norm = 1 / (c_l + c_r + core)

        self._freeze(
            mu=mu,
            sigma=sigma,
            alpha_l=alpha_l,
            n_l=n_l,
            alpha_r=alpha_r,
            n_r=n_r,
            dtype=dtype,
            norm=norm,
            a_l=a_l,
            b_l=b_l,
            a_r=a_r,
            b_r=b_r,
            gauss_alpha_l=np.exp(-(alpha_l**2) / 2),
            gauss_alpha_r=np.exp(-(alpha_r**2) / 2),
            cdf_l=norm * c_l,
            cdf_r=norm * (c_l + core),
            erf_alpha_l=erf_alpha_l,
            erf_alpha_r=erf_alpha_r,
        )

    def _pdf(self, x: np.ndarray) -> np.ndarray:
        return nb_double_crystal_ball_pdf(
            x,
            *self.constants(
                x.dtype,
                "mu",
                "sigma",
                "alpha_l",
                "n_l",
                "alpha_r",
                "n_r",
                "norm",
                "b_l",
                "b_r",
                "gauss_alpha_l",
                "gauss_alpha_r",
            ),
        )

    def _cdf(self, x: np.ndarray) -> np.ndarray:
        return nb_double_crystal_ball_cdf(
            x,
            *self.constants(
                x.dtype,
                "mu",
                "sigma",
                "alpha_l",
                "n_l",
                "alpha_r",
                "n_r",
                "norm",
                "b_l",
                "b_r",
                "cdf_l",
                "cdf_r",
                "erf_alpha_l",
            ),
        )

    def _quantile(self, p: np.ndarray) -> np.ndarray:
        (
            mu,
            sigma,
            alpha_l,
            n_l,
            alpha_r,
            n_r,
            norm,
            b_l,
            b_r,
            cdf_l,
            cdf_r,
            erf_alpha_l,
        ) = self.constants(
            p.dtype,
            "mu",
            "sigma",
            "alpha_l",
            "n_l",
            "alpha_r",
            "n_r",
            "norm",
            "b_l",
            "b_r",
            "cdf_l",
            "cdf_r",
            "erf_alpha_l",
        )
        x_hat = np.empty_like(p)

        # left power-law tail
        left = p <= cdf_l
        with np.errstate(over="ignore"):
            base = (p[left] / cdf_l) ** (1 / (1 - n_l))
        x_hat[left] = b_l - n_l / alpha_l * base

        # right power-law tail
        right = p >= cdf_r
        q = 1 - (p[right] - cdf_r) / (1 - cdf_r)
        # q vanishes as p -> 1, rounding must not make it negative
        with np.errstate(divide="ignore", over="ignore"):
            base = np.clip(q, 0, None) ** (1 / (1 - n_r))
        x_hat[right] = n_r / alpha_r * base - b_r

        # gaussian core
        core = ~(left | right)
        x_hat[core] = SQRT2 * erfinv_clipped(
            (p[core] - cdf_l) / (norm * SQRT_HALF_PI) - erf_alpha_l
        )

        return mu + sigma * x_hat

    def required_args(self) -> tuple[str, str, str, str, str, str]:
        return "mu", "sigma", "alpha_l", "n_l", "alpha_r", "n_r"
