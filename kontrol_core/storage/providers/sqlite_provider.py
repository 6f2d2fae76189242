from __future__ import annotations
from typing import Optional
import sqlite3, os, threading
from kontrol_core.crypto import public_key_fingerprint
from kontrol_core.errors import Corrupt, NotFound, ValidationError
from kontrol_core.keypair import KeyPair, validate
from kontrol_core.logger import get_logger
from kontrol_core.storage.provider import KeyPairStorage

log = get_logger("kontrol.storage.sqlite")


class SQLiteKeyPairStorage(KeyPairStorage):
    """
    Persistent KeyPairStorage. The two indexes are two tables written in a
    single transaction, so a crash or a concurrent reader never observes only
    half of an add or delete.
    """

    def __init__(self, path="db/kontrol_keys.db", strict: bool = False):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.db = sqlite3.connect(path, check_same_thread=False)
        self.strict = strict
        self._lock = threading.RLock()

        self._init()

    def _init(self) -> None:
        c = self.db.cursor()
        c.execute("""CREATE TABLE IF NOT EXISTS keypair_by_id(
            id TEXT PRIMARY KEY,
            public TEXT,
            private TEXT
        )""")
        c.execute("""CREATE TABLE IF NOT EXISTS keypair_by_public(
            public TEXT PRIMARY KEY,
            id TEXT,
            private TEXT
        )""")
        self.db.commit()

    def add_key(self, kp: KeyPair) -> None:
        validate(kp)
        with self._lock:
            try:
                if self.strict:
                    cur = self.db.execute("SELECT public FROM keypair_by_id WHERE id=?", (kp.id,))
                    row = cur.fetchone()
                    if row and row[0] != kp.public:
                        self.db.execute("DELETE FROM keypair_by_public WHERE public=?", (row[0],))
                self.db.execute(
                    "INSERT INTO keypair_by_id(id,public,private) VALUES(?,?,?) "
                    "ON CONFLICT(id) DO UPDATE SET public=excluded.public, private=excluded.private",
                    (kp.id, kp.public, kp.private)
                )
                self.db.execute(
                    "INSERT INTO keypair_by_public(public,id,private) VALUES(?,?,?) "
                    "ON CONFLICT(public) DO UPDATE SET id=excluded.id, private=excluded.private",
                    (kp.public, kp.id, kp.private)
                )
                self.db.commit()
            except sqlite3.Error:
                self.db.rollback()
                raise
        log.debug(f"added key id={kp.id} fpr={public_key_fingerprint(kp.public)}")

    def delete_key(self, kp: KeyPair) -> None:
        with self._lock:
            try:
                if not kp.public:
                    # NotFound / Corrupt when the id cannot be resolved
                    self.get_key_from_id(kp.id)
                else:
                    self.db.execute(
                        "DELETE FROM keypair_by_public WHERE public=? AND id=?",
                        (kp.public, kp.id)
                    )
                self.db.execute(
                    "DELETE FROM keypair_by_public WHERE id=? AND public IN "
                    "(SELECT public FROM keypair_by_id WHERE id=?)",
                    (kp.id, kp.id)
                )
                self.db.execute("DELETE FROM keypair_by_id WHERE id=?", (kp.id,))
                self.db.commit()
            except sqlite3.Error:
                self.db.rollback()
                raise
        log.debug(f"deleted key id={kp.id}")

    def get_key_from_id(self, key_id: str) -> KeyPair:
        with self._lock:
            cur = self.db.execute("SELECT id,public,private FROM keypair_by_id WHERE id=?", (key_id,))
            row = cur.fetchone()
        return self._decode(row, "id", key_id)

    def get_key_from_public(self, public: str) -> KeyPair:
        with self._lock:
            cur = self.db.execute("SELECT id,public,private FROM keypair_by_public WHERE public=?", (public,))
            row = cur.fetchone()
        return self._decode(row, "public", public)

    @staticmethod
    def _decode(row: Optional[tuple], name: str, key: str) -> KeyPair:
        if not row:
            raise NotFound(name, key)
        kp = KeyPair.from_dict(dict(zip(("id", "public", "private"), row)))
        try:
            validate(kp)
        except ValidationError as e:
            raise Corrupt(f"SQLiteKeyPairStorage: lookup by {name} row is malformed ({e})") from e
        return kp

    def __len__(self) -> int:
        with self._lock:
            cur = self.db.execute("SELECT COUNT(*) FROM keypair_by_id")
            return cur.fetchone()[0]

    def close(self):
        self.db.close()
