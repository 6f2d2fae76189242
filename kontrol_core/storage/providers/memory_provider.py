# kontrol_core/storage/providers/memory_provider.py
from __future__ import annotations
import threading
from typing import Any, Dict
from kontrol_core.crypto import public_key_fingerprint
from kontrol_core.errors import Corrupt, NotFound
from kontrol_core.keypair import KeyPair, validate
from kontrol_core.logger import get_logger
from kontrol_core.storage.provider import KeyPairStorage

log = get_logger("kontrol.storage.memory")


class MemKeyPairStorage(KeyPairStorage):
    """
    Dual-indexed in-memory store.

    Both indexes belong to this one object and every mutation holds the same
    lock, so add_key and the lookup-then-delete in delete_key are atomic and a
    reader never sees one index updated without the other.

    delete_key only drops public entries that belong to the deleted id.

    strict=False keeps the legacy overwrite behaviour: re-adding an id with a
    different public key leaves the old public entry resolvable. strict=True
    drops it.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._by_id: Dict[str, Any] = {}
        self._by_public: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def add_key(self, kp: KeyPair) -> None:
        validate(kp)
        with self._lock:
            if self.strict:
                old = self._by_id.get(kp.id)
                if isinstance(old, KeyPair) and old.public != kp.public:
                    self._by_public.pop(old.public, None)
            self._by_id[kp.id] = kp
            self._by_public[kp.public] = kp
        log.debug(f"added key id={kp.id} fpr={public_key_fingerprint(kp.public)}")

    def delete_key(self, kp: KeyPair) -> None:
        with self._lock:
            if not kp.public:
                current = self.get_key_from_id(kp.id)
            else:
                current = self._by_id.get(kp.id)
            owned = {kp.public} if kp.public else set()
            if isinstance(current, KeyPair):
                owned.add(current.public)
            for public in owned:
                # never touch a public entry that belongs to another id
                entry = self._by_public.get(public)
                if isinstance(entry, KeyPair) and entry.id == kp.id:
                    del self._by_public[public]
            self._by_id.pop(kp.id, None)
        log.debug(f"deleted key id={kp.id}")

    def get_key_from_id(self, key_id: str) -> KeyPair:
        return self._lookup(self._by_id, "id", key_id)

    def get_key_from_public(self, public: str) -> KeyPair:
        return self._lookup(self._by_public, "public", public)

    def _lookup(self, index: Dict[str, Any], name: str, key: str) -> KeyPair:
        with self._lock:
            value = index.get(key)
        if value is None:
            raise NotFound(name, key)
        if not isinstance(value, KeyPair):
            raise Corrupt(f"MemKeyPairStorage: lookup by {name} value is malformed {value!r}")
        return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
