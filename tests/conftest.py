"""
Pytest configuration for the Multi-Wordle server.

Routes the game log into a temporary directory so test runs never write
into the working tree.
"""

import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="multiwordle-logs-"))

import pytest

from multiwordle import create_app
from multiwordle.config import TestingConfig
from multiwordle.services.game_service import GameService


@pytest.fixture
def game_service():
    return GameService(["apple", "mango"])


@pytest.fixture
def server(game_service):
    app, socketio = create_app(TestingConfig, game_service=game_service)
    return app, socketio


@pytest.fixture
def app(server):
    return server[0]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(server):
    app, socketio = server
    ws = socketio.test_client(app, flask_test_client=app.test_client())
    ws.get_received()  # drop the snapshot sent on connect
    yield ws
    if ws.is_connected():
        ws.disconnect()
