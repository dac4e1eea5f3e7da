import logging
import subprocess

import numpy as np
import pytest

import hepdists
from hepdists.cli import hepdists_cli


def test_cli_help():
    subprocess.check_call(["hepdists", "--help"])
    subprocess.check_call(["hepdists", "eval", "--help"])


def test_version(capsys):
    with pytest.raises(SystemExit):
        hepdists_cli(["--version"])
    assert capsys.readouterr().out.strip() == hepdists.__version__


def test_no_arguments():
    with pytest.raises(SystemExit):
        hepdists_cli([])


def test_eval(capsys, dcb_config):
    dcb = hepdists.DoubleCrystalBall(0.0, 1.0, 1.5, 2.0, 2.0, 3.0)

    hepdists_cli(["eval", "-c", dcb_config, "-f", "cdf", "-2.0", "0.5", "3.0"])
    out = [float(line) for line in capsys.readouterr().out.split()]
    assert np.allclose(out, dcb.cdf([-2.0, 0.5, 3.0]), rtol=1e-12)

    hepdists_cli(["eval", "-c", dcb_config, "-f", "quantile", "0", "0.5", "1"])
    out = [float(line) for line in capsys.readouterr().out.split()]
    assert out[0] == -np.inf
    assert out[1] == pytest.approx(dcb.quantile(0.5))
    assert out[2] == np.inf


def test_eval_domain_error(cb_config):
    with pytest.raises(hepdists.DomainError):
        hepdists_cli(["eval", "-c", cb_config, "-f", "quantile", "1.5"])


def test_sample(capsys, cb_config):
    hepdists_cli(["sample", "-c", cb_config, "-n", "5", "-s", "3"])
    out = [float(line) for line in capsys.readouterr().out.split()]

    cb = hepdists.CrystalBall(0.0, 1.0, 1.0, 1.6)
    assert np.allclose(out, cb.rvs(5, random_state=3), rtol=1e-12)


def test_logging_setup():
    logger = logging.getLogger("hepdists.test")
    hepdists.logging.setup(hepdists.logging.DEBUG, logger)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    # repeated setup only changes the level
    hepdists.logging.setup(hepdists.logging.WARNING, logger)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_repeated_calls_keep_one_handler(cb_config):
    for _ in range(3):
        hepdists_cli(["eval", "-c", cb_config, "0.0"])
    assert len(logging.getLogger("hepdists").handlers) == 1
