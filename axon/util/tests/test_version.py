# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
import re

import axon
from axon.version import SHORT_VERSION, VERSION


def test_version_exported():
    assert axon.__version__ == VERSION
    assert VERSION.startswith(SHORT_VERSION)
    assert re.match(r'^\d+\.\d+\.\d+', VERSION)
