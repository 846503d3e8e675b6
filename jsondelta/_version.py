# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel"])

__version__ = "0.1.0"

_parsed = re.match(r"^(\d+)\.(\d+)\.(\d+)(\w*)$", __version__)

version_info = VersionInfo(
    int(_parsed.group(1)),
    int(_parsed.group(2)),
    int(_parsed.group(3)),
    # Empty suffix means a final release
    _parsed.group(4) or "final",
)
