import pytest
from kontrol_core.storage import MemKeyPairStorage, SQLiteKeyPairStorage


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        s = MemKeyPairStorage()
    else:
        s = SQLiteKeyPairStorage(str(tmp_path / "keys.db"))
    yield s
    s.close()


@pytest.fixture(params=["memory", "sqlite"])
def strict_store(request, tmp_path):
    if request.param == "memory":
        s = MemKeyPairStorage(strict=True)
    else:
        s = SQLiteKeyPairStorage(str(tmp_path / "keys.db"), strict=True)
    yield s
    s.close()


@pytest.fixture
def kite_home(tmp_path, monkeypatch):
    home = tmp_path / "kite"
    monkeypatch.setenv("KITE_HOME", str(home))
    return home
