"""
kontrol_core.authority
----------------------
The authority side of the registry: issues key pairs to hosts and answers
"is this public key known and trusted" when a registration or token request
arrives. All storage errors propagate to the caller unchanged.
"""

from __future__ import annotations
from typing import Optional
from .crypto import generate_keypair, public_key_fingerprint
from .errors import KeyPairError
from .keypair import KeyPair
from .logger import get_logger
from .storage.provider import KeyPairStorage

log = get_logger("kontrol.authority")


class Authority:
    def __init__(self, storage: KeyPairStorage):
        self.storage = storage

    def issue_key(self, key_id: Optional[str] = None) -> KeyPair:
        kp = generate_keypair(key_id)
        self.storage.add_key(kp)
        log.info(f"issued key id={kp.id} fpr={public_key_fingerprint(kp.public)}")
        return kp

    def register_key(self, kp: KeyPair) -> None:
        self.storage.add_key(kp)
        log.info(f"registered key id={kp.id} fpr={public_key_fingerprint(kp.public)}")

    def authenticate(self, public: str) -> KeyPair:
        """Return the KeyPair behind a presented public key."""
        fpr = public_key_fingerprint(public)
        try:
            self.storage.is_valid(public)
        except KeyPairError as e:
            log.warning(f"rejected public key fpr={fpr}: {e}")
            raise
        return self.storage.get_key_from_public(public)

    def revoke(self, key_id: str) -> None:
        self.storage.delete_key(KeyPair(id=key_id))
        log.info(f"revoked key id={key_id}")

    def rotate(self, key_id: str) -> KeyPair:
        # no in-place mutation: delete then add
        self.revoke(key_id)
        return self.issue_key(key_id)
