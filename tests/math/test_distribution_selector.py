import pytest

from hepdists.errors import ParameterError
from hepdists.math.distribution_selector import (
    DISTRIBUTIONS,
    get_distribution,
    load_distribution,
)
from hepdists.math.functions.crystal_ball import CrystalBall
from hepdists.math.functions.double_crystal_ball import DoubleCrystalBall


def test_get_distribution():
    assert set(DISTRIBUTIONS) == {"crystal_ball", "double_crystal_ball"}

    cb = get_distribution("crystal_ball", [0, 1, 2, 3])
    assert cb == CrystalBall(0, 1, 2, 3)

    dcb = get_distribution(
        "double_crystal_ball",
        {"mu": 0, "sigma": 1, "alpha_l": 1.5, "n_l": 2, "alpha_r": 2, "n_r": 3},
    )
    assert dcb == DoubleCrystalBall(0, 1, 1.5, 2, 2, 3)


def test_get_distribution_errors(caplog):
    with pytest.raises(NameError):
        get_distribution("voigt", [0, 1])
    assert "get_distribution not implemented for voigt" in caplog.text

    with pytest.raises(ParameterError):
        get_distribution("crystal_ball", [0, 1, 2])
    with pytest.raises(ParameterError):
        get_distribution("crystal_ball", {"mu": 0, "sigma": 1, "beta": 2, "n": 3})
    with pytest.raises(ParameterError, match="^n "):
        get_distribution("crystal_ball", [0, 1, 2, 0.5])


def test_load_distribution(cb_config, dcb_config):
    assert load_distribution(cb_config) == CrystalBall(0.0, 1.0, 1.0, 1.6)
    assert load_distribution(dcb_config) == DoubleCrystalBall(
        0.0, 1.0, 1.5, 2.0, 2.0, 3.0
    )
    assert load_distribution(
        {"distribution": "crystal_ball", "parameters": [0, 1, 2, 3]}
    ) == CrystalBall(0, 1, 2, 3)

    with pytest.raises(ParameterError, match="parameters"):
        load_distribution({"distribution": "crystal_ball"})
