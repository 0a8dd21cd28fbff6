import os
import sys
import pytest

# Ensure the backend root (containing the `quizroom` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config
from quizroom import create_app


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SSE_KEEPALIVE_SEC = 1
    SSE_QUEUE_SIZE = 5
    ROOMS = [
        {'name': 'Classic Rock', 'slug': 'classic-rock', 'image': '/web/images/guitar.svg'},
        {'name': 'Pop Hits', 'slug': 'pop-hits', 'image': '/web/images/pop.svg'},
    ]


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def state(flask_app):
    return flask_app.extensions['quizroom.state']


@pytest.fixture()
def broadcaster(flask_app):
    return flask_app.extensions['quizroom.broadcaster']
