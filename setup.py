#!/usr/bin/env python3
import os

from setuptools import find_packages, setup


def read_version():
    version = {}
    here = os.path.dirname(os.path.realpath(__file__))
    with open(os.path.join(here, "src", "hepdists", "_version.py")) as f:
        exec(f.read(), version)
    return version["version"]


setup(
    name="hepdists",
    version=read_version(),
    author="hepdists developers",
    description="Continuous probability distributions for high-energy physics data analysis",
    long_description="",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "colorlog",
        "numba",
        "numpy",
        "pyyaml",
        "scipy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "hepdists=hepdists.cli:hepdists_cli",
        ],
    },
    zip_safe=False,
)
