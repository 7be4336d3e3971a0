import pytest

import cojar.config as config


@pytest.fixture(autouse=True)
def default_config():
    config.config(None, None)
    yield
    config.config(None, None)
