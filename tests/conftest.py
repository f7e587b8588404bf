"""
Shared pytest fixtures.
"""

import pytest

from amount_words.app import create_app
from amount_words.config import AppConfig, get_config


@pytest.fixture
def app_config():
    """Configuration for a non-production app with stock defaults."""
    return AppConfig(env='testing', debug=False, cors_origins=['*'])


@pytest.fixture
def app(app_config):
    """Flask application built from app_config."""
    application = create_app(app_config)
    application.config['TESTING'] = True
    return application


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Each test reads the environment afresh."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()
