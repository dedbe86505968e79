import pytest

from ezutils.config import reset_config

@pytest.fixture(autouse=True)
def default_config():
    config = reset_config()
    yield config
    reset_config()
