# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .jsondeltaapp import main


if __name__ == "__main__":
    sys.exit(main())
