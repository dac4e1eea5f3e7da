"""
Convenience functions to select distributions
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from hepdists.errors import ParameterError
from hepdists.math.functions.crystal_ball import CrystalBall
from hepdists.math.functions.double_crystal_ball import DoubleCrystalBall
from hepdists.math.functions.hep_continuous import HEPContinuous
from hepdists.utils import load_dict

log = logging.getLogger(__name__)

DISTRIBUTIONS = {
    "crystal_ball": CrystalBall,
    "double_crystal_ball": DoubleCrystalBall,
}


def get_distribution(name: str, pars: Sequence | Mapping) -> HEPContinuous:
    """
    Function to build a distribution from its name and parameters

    Parameters
    ----------
    name
        key of :data:`DISTRIBUTIONS`, e.g. ``crystal_ball``
    pars
        either the parameter values in the order given by the distribution's
        ``required_args``, or a mapping from parameter names to values
    """
    if name not in DISTRIBUTIONS:
        log.warning(f"get_distribution not implemented for {name}")
        raise NameError(
            f"unknown distribution {name}, choose one of {list(DISTRIBUTIONS)}"
        )

    dist = DISTRIBUTIONS[name]
    try:
        if isinstance(pars, Mapping):
            out = dist(**pars)
        else:
            out = dist(*pars)
    except TypeError as e:
        raise ParameterError(f"bad parameters for {name}: {e}") from e

    log.debug(f"built {out}")
    return out


def load_distribution(config: str | Path | dict) -> HEPContinuous:
    """
    Function to build a distribution from a configuration

    Parameters
    ----------
    config
        dictionary or name of a JSON/YAML file holding it. The expected format is

        .. code-block:: yaml

            distribution: double_crystal_ball
            parameters:
              mu: 0
              sigma: 1
              alpha_l: 1.5
              n_l: 2
              alpha_r: 2
              n_r: 3
    """
    if isinstance(config, (str, Path)):
        config = load_dict(config)

    for key in ("distribution", "parameters"):
        if key not in config:
            raise ParameterError(f"'{key}' missing from distribution config")

    return get_distribution(config["distribution"], config["parameters"])
