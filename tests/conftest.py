import pytest

from entropass.random_source import SeededRandomSource


class ExplodingSource:
    """Fails the test if any random draw is attempted."""

    def randbelow(self, n):
        raise AssertionError("randomness consumed")


@pytest.fixture
def seeded():
    return SeededRandomSource(20240517)


@pytest.fixture
def exploding():
    return ExplodingSource()
