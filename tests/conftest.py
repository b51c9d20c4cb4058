import warnings

import pytest


@pytest.fixture
def ramp():
    """Five evenly rising samples."""
    return [0.0, 1.0, 2.0, 3.0, 4.0]


@pytest.fixture
def bumpy():
    return [3.0, -1.0, 4.0, 1.0, -5.0, 9.0]


@pytest.fixture
def no_warnings():
    """Fail the test if any warning is emitted."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield
