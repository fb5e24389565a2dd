# tests/conftest.py
import pytest

from word_counter.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test in its own directory so logs/config files never leak."""
    monkeypatch.chdir(tmp_path)
    Log.configure(str(tmp_path / "logs" / "test.log"))
    yield tmp_path
