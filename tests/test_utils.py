import json

import yaml

import hepdists.utils as hdu


def test_math_numba_defaults():
    assert not hdu.numba_math_defaults_kwargs.fastmath
    assert not hdu.numba_math_defaults_kwargs.cache

    assert hdu.numba_math_defaults(cache=True) == {"cache": True, "fastmath": False}

    hdu.numba_math_defaults.fastmath = True
    assert hdu.numba_math_defaults["fastmath"]
    hdu.numba_math_defaults.fastmath = False


def test_getenv_bool(monkeypatch):
    monkeypatch.delenv("HEPDISTS_TEST_FLAG", raising=False)
    assert not hdu.getenv_bool("HEPDISTS_TEST_FLAG")
    assert hdu.getenv_bool("HEPDISTS_TEST_FLAG", default=True)

    for val in ("1", "t", "True", "TRUE"):
        monkeypatch.setenv("HEPDISTS_TEST_FLAG", val)
        assert hdu.getenv_bool("HEPDISTS_TEST_FLAG")

    monkeypatch.setenv("HEPDISTS_TEST_FLAG", "no")
    assert not hdu.getenv_bool("HEPDISTS_TEST_FLAG", default=True)


def test_load_dict(tmp_path):
    data = {"distribution": "crystal_ball", "parameters": {"mu": 1.0}}

    with (tmp_path / "conf.json").open("w") as f:
        json.dump(data, f)
    with (tmp_path / "conf.yml").open("w") as f:
        yaml.dump(data, f)

    assert hdu.load_dict(str(tmp_path / "conf.json")) == data
    assert hdu.load_dict(str(tmp_path / "conf.yml")) == data
    assert hdu.load_dict(str(tmp_path / "conf.yml"), ftype="yaml") == data
