import pytest

from chromapick import Color, ColorMath


@pytest.fixture(autouse=True)
def fresh_default_cache():
    """Each test starts from an empty shared cache."""
    Color.reset()
    yield
    Color.reset()


@pytest.fixture
def engine():
    return ColorMath()
