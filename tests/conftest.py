import time

import pytest

from river_server import create_app


@pytest.fixture
def app():
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def no_sleep(monkeypatch):
    """Sessions built inside a request skip their wall-clock delay."""

    slept = []
    monkeypatch.setattr(time, "sleep", slept.append)
    return slept


class FakeClock:

    def __init__(self):
        self.now = 0.0
        self.calls = []

    def sleep(self, seconds):
        self.calls.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
