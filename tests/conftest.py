import itertools
import logging

import numpy as np
import pytest


@pytest.fixture
def all_bytes():
    return range(256)


@pytest.fixture
def unit_samples():
    """1001 evenly spaced floats covering [0, 1]."""
    return np.linspace(0.0, 1.0, 1001)


@pytest.fixture
def linear_triples():
    axis = np.linspace(0.0, 1.0, 6)
    return list(itertools.product(axis, axis, axis))


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="okchroma")
    return caplog
