"""
pytest configuration for Array Tools.
Puts src/ on the import path and provides Flask test clients.
"""

import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def make_config(tools=None, defaults=None):
    """Build an in-memory tools config like the one read from config/config.json."""
    return {
        'tools': tools or {},
        'defaults': defaults or {'output_mode': 'auto', 'url_parameter': 'sku'},
        'log_level': 'WARNING',
    }


@pytest.fixture
def app():
    from array_tools.main import create_app
    flask_app = create_app(make_config())
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def app_factory():
    """Create an app with a custom tools config."""
    from array_tools.main import create_app

    def factory(tools=None, defaults=None):
        flask_app = create_app(make_config(tools, defaults))
        flask_app.config['TESTING'] = True
        return flask_app

    return factory
