#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDELTA_PATH = HERE / "jsondelta"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(JSONDELTA_PATH / '_version.py')


if __name__ == '__main__':
    setup(
      name="jsondelta",
      version=VERSION,
      description="Minimal structural diff of JSON documents",
      long_description=(
          "Compute a compact delta between two JSON-like value trees: "
          "added entries, removed entries (as null) and changed values, "
          "recursing into nested objects."
      ),
      license="BSD-3-Clause",
      python_requires=">=3.8",
      packages=find_packages(include=["jsondelta", "jsondelta.*"]),
      package_data={"jsondelta.tests": ["files/*.json"]},
      install_requires=[
          "traitlets>=5",
          "jupyter_core",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "pytest-timeout",
          ],
      },
      entry_points={
          "console_scripts": [
              "jsondelta = jsondelta.jsondeltaapp:main",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )
