import numpy as np

import hepdists
from hepdists.math import distributions as hdd


def test_functional_interface():
    d = hepdists.DoubleCrystalBall(0.0, 1.0, 1.5, 2.0, 2.0, 3.0)

    assert hepdists.pdf(d, 0.5) == d.pdf(0.5)
    assert hepdists.cdf(d, 0.5) == d.cdf(0.5)
    assert hepdists.quantile(d, 0.3) == d.quantile(0.3)
    assert hepdists.minimum(d) == -np.inf
    assert hepdists.maximum(d) == np.inf


def test_exports():
    for name in (
        "CrystalBall",
        "DoubleCrystalBall",
        "nb_crystal_ball_pdf",
        "nb_crystal_ball_cdf",
        "nb_double_crystal_ball_pdf",
        "nb_double_crystal_ball_cdf",
        "nb_erf",
    ):
        assert hasattr(hdd, name)
