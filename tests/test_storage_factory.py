import pytest
from kontrol_core.storage import (
    MemKeyPairStorage, SQLiteKeyPairStorage, load_storage_provider,
)


def test_default_is_memory(monkeypatch):
    monkeypatch.delenv("KONTROL_STORAGE_PROVIDER", raising=False)
    monkeypatch.delenv("KONTROL_STRICT_KEYS", raising=False)
    store = load_storage_provider()
    assert isinstance(store, MemKeyPairStorage)
    assert store.strict is False


def test_sqlite_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("KONTROL_STORAGE_PROVIDER", "sqlite")
    monkeypatch.setenv("KONTROL_DB_PATH", str(tmp_path / "k.db"))
    monkeypatch.setenv("KONTROL_STRICT_KEYS", "1")
    store = load_storage_provider()
    assert isinstance(store, SQLiteKeyPairStorage)
    assert store.strict is True
    store.close()


def test_config_overrides_env(monkeypatch, tmp_path):
    monkeypatch.setenv("KONTROL_STORAGE_PROVIDER", "sqlite")
    store = load_storage_provider({"provider": "memory", "strict": True})
    assert isinstance(store, MemKeyPairStorage)
    assert store.strict is True


def test_unknown_provider():
    with pytest.raises(ValueError):
        load_storage_provider({"provider": "etcd"})
