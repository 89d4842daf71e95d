import pytest

from bot_config_server import create_app
from bot_config_server.config import MemoryStore

ENV_DEFAULTS = {"botName": "Bot", "prefix": "?", "debugMode": False}


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def dist(tmp_path):
    d = tmp_path / "dist"
    d.mkdir()
    (d / "index.html").write_text("<html>app</html>")
    (d / "app.js").write_text("console.log('hi')")
    return d


@pytest.fixture
def client(store, dist):
    app = create_app(snapshot=dict(ENV_DEFAULTS), store=store, dist_dir=str(dist))
    app.testing = True
    return app.test_client()
