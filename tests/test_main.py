from fastapi.testclient import TestClient

import app.main as main_module
from app import dependencies as deps
from app.main import app
from app.services.post_index import SharedPostIndex
from app.settings import Settings
from tests.conftest import write_post


class DummyThread:
    def __init__(self):
        self.join_called = False
        self.join_timeout = None

    def join(self, timeout=None):
        self.join_called = True
        self.join_timeout = timeout


def test_per_request_mode_does_not_start_refresher(monkeypatch, posts_dir):
    started = []
    monkeypatch.setattr(main_module, "settings", Settings(INDEX_MODE="per_request"))
    monkeypatch.setattr(
        main_module, "start_refresher", lambda *args: started.append(args)
    )
    write_post(posts_dir, "hello.yaml", "title: Hello\ncontent: hi\n")

    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_settings] = lambda: Settings(POSTS_DIR=posts_dir)
    try:
        with TestClient(app) as client:
            res = client.get("/post/hello")
            assert res.status_code == 200
            assert "<p>hi</p>" in res.text
    finally:
        app.dependency_overrides = original_overrides

    assert started == []


def test_shared_mode_runs_refresher_lifespan(monkeypatch, posts_dir):
    thread = DummyThread()
    started = []
    stopped = []

    def fake_start_refresher(shared_index, interval):
        started.append((shared_index, interval))
        return thread

    monkeypatch.setattr(
        main_module,
        "settings",
        Settings(INDEX_MODE="shared", POSTS_DIR=posts_dir, INDEX_REFRESH_SECONDS=5),
    )
    monkeypatch.setattr(main_module, "start_refresher", fake_start_refresher)
    monkeypatch.setattr(main_module, "stop_refresher", lambda: stopped.append(True))
    write_post(posts_dir, "shared.yaml", "title: Shared\ncontent: from the index\n")

    with TestClient(app) as client:
        assert isinstance(app.state.post_index, SharedPostIndex)
        res = client.get("/post/shared")
        assert res.status_code == 200
        assert "<p>from the index</p>" in res.text

        # served from the shared index until the next refresh
        (posts_dir / "shared.yaml").unlink()
        assert client.get("/post/shared").status_code == 200

    assert len(started) == 1
    assert started[0][1] == 5
    assert stopped == [True]
    assert thread.join_called is True
    assert thread.join_timeout == 10
    assert app.state.post_index is None


def test_static_files_are_served(monkeypatch):
    monkeypatch.setattr(main_module, "settings", Settings(INDEX_MODE="per_request"))

    with TestClient(app) as client:
        res = client.get("/static/style.css")

    assert res.status_code == 200
    assert "text/css" in res.headers["content-type"]
