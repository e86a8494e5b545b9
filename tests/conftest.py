import pytest


@pytest.fixture
def sentinel():
    """Destination prefilled with a value no filter under test produces."""
    def make(length, value=0xEE):
        return bytearray([value] * length)
    return make
