from __future__ import annotations

import json
import logging
import os
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Iterator

import yaml

log = logging.getLogger(__name__)


def getenv_bool(name: str, default: bool = False) -> bool:
    """Get environment value as a boolean, returning True for 1, t and true
    (caps-insensitive), and False for any other value and default if undefined.
    """
    val = os.getenv(name)
    if not val:
        return default
    elif val.lower() in ("1", "t", "true"):
        return True
    else:
        return False


class NumbaMathDefaults(MutableMapping):
    """Bare-bones class to store some Numba default options. Defaults values
    are set from environment variables. Used when compiling the
    :mod:`hepdists.math.functions` kernels.

    Examples
    --------
    Set all default option values for a numba vectorized function at once by
    expanding the provided dictionary:

    >>> from numba import vectorize
    >>> from hepdists.utils import numba_math_defaults_kwargs as nb_kwargs
    >>> @vectorize(["float64(float64)"], **nb_kwargs) # def dist(...): ...

    Customize one argument but still set defaults for the others:

    >>> from hepdists.utils import numba_math_defaults as nb_defaults
    >>> @vectorize(["float64(float64)"], **nb_defaults(cache=True)) # def dist(...): ...

    Override global options at runtime:

    >>> from hepdists.utils import numba_math_defaults
    >>> # must set options before explicitly importing hepdists.math.distributions!
    >>> numba_math_defaults.cache = True

    Note
    ----
    ``fastmath`` is off by default: it lets LLVM assume that no infinities
    occur, while the distributions are evaluated up to infinite arguments.
    """

    def __init__(self) -> None:
        self.cache: bool = getenv_bool("HEPDISTS_CACHE", default=False)
        self.fastmath: bool = getenv_bool("HEPDISTS_FASTMATH", default=False)

    def __getitem__(self, item: str) -> Any:
        return self.__dict__[item]

    def __setitem__(self, item: str, val: Any) -> None:
        self.__dict__[item] = val

    def __delitem__(self, item: str) -> None:
        del self.__dict__[item]

    def __iter__(self) -> Iterator:
        return self.__dict__.__iter__()

    def __len__(self) -> int:
        return len(self.__dict__)

    def __call__(self, **kwargs) -> dict:
        mapping = self.__dict__.copy()
        mapping.update(**kwargs)
        return mapping

    def __str__(self) -> str:
        return str(self.__dict__)

    def __repr__(self) -> str:
        return str(self.__dict__)


numba_math_defaults = NumbaMathDefaults()
numba_math_defaults_kwargs = numba_math_defaults

__file_extensions__ = {"json": [".json"], "yaml": [".yaml", ".yml"]}


def load_dict(fname: str, ftype: str | None = None) -> dict:
    """Load a text file as a Python dict."""
    fname = Path(fname)

    # determine file type from extension
    if ftype is None:
        for _ftype, exts in __file_extensions__.items():
            if fname.suffix in exts:
                ftype = _ftype

    msg = f"loading {ftype} dict from: {fname}"
    log.debug(msg)

    with fname.open() as f:
        if ftype == "json":
            return json.load(f)
        if ftype == "yaml":
            return yaml.safe_load(f)

        msg = f"unsupported file format {ftype}"
        raise NotImplementedError(msg)
