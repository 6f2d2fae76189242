# kontrol_core/storage/__init__.py

from .provider import KeyPairStorage
from .providers.memory_provider import MemKeyPairStorage
from .providers.sqlite_provider import SQLiteKeyPairStorage
import os


def load_storage_provider(config: dict | None = None) -> KeyPairStorage:
    """
    Factory resolver for selecting the key pair storage backend.

        - memory (default)
        - sqlite
    """
    config = config or {}
    provider = config.get("provider") or os.getenv("KONTROL_STORAGE_PROVIDER", "memory")
    strict = config.get("strict")
    if strict is None:
        strict = os.getenv("KONTROL_STRICT_KEYS", "0") == "1"

    if provider == "memory":
        return MemKeyPairStorage(strict=strict)

    if provider == "sqlite":
        db_path = config.get("sqlite_path") or os.getenv("KONTROL_DB_PATH", "db/kontrol_keys.db")
        return SQLiteKeyPairStorage(db_path, strict=strict)

    raise ValueError(f"Unknown storage provider: {provider}")


__all__ = [
    "KeyPairStorage",
    "MemKeyPairStorage",
    "SQLiteKeyPairStorage",
    "load_storage_provider",
]
