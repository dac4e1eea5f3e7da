from pathlib import Path

import pytest

config_dir = Path(__file__).parent / "configs"


@pytest.fixture(scope="session")
def cb_config():
    return str(config_dir / "crystal_ball.json")


@pytest.fixture(scope="session")
def dcb_config():
    return str(config_dir / "double_crystal_ball.yaml")
