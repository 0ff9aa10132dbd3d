import pytest


@pytest.fixture(autouse=True)
def _clean_alertfixer_env(monkeypatch):
    """Keep developer ALERTFIXER_* settings out of the tests."""
    for name in ("ALERTFIXER_ON_UNTERMINATED", "ALERTFIXER_EXTENSIONS", "ALERTFIXER_BACKUP", "ALERTFIXER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
