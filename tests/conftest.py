import pytest

from app import app as flask_app, system
from audio_control import AudioControlSystem


@pytest.fixture
def audio_system():
    return AudioControlSystem()


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    system.reset()
    with flask_app.test_client() as c:
        yield c
    system.reset()
