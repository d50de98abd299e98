import pytest

from nuri import normalizer


@pytest.fixture
def default_ports():
    """Restores the default port table after a test changes it."""
    saved = dict(normalizer.DEFAULT_PORTS)
    yield normalizer.DEFAULT_PORTS
    normalizer._default_ports.clear()
    normalizer._default_ports.update(saved)
