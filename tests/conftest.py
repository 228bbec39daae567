import pytest

from columnize.logging import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep debug logging out of captured output."""
    configure_logging(verbosity=0)
