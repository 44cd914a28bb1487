import pytest

from tinyfloat import REGISTRY


@pytest.fixture(autouse=True)
def nan_rotation():
    """Start every test at the beginning of the NaN payload rotation."""
    REGISTRY.reset_nan_counter()
    yield
    REGISTRY.reset_nan_counter()
