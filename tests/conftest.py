import pytest

from toyrobot.commands import router


@pytest.fixture(autouse=True)
def fresh_session(tmp_path, monkeypatch):
    """Each test starts with the robot off the table and logs in tmp_path."""
    monkeypatch.setattr(router, "_LOG_PATH", str(tmp_path / "toyrobot.log"))
    router.reset()
    yield
    router.reset()
