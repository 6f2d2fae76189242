# kontrol_core/storage/provider.py
from __future__ import annotations
from abc import ABC, abstractmethod
from kontrol_core.keypair import KeyPair


class KeyPairStorage(ABC):
    """
    Storage contract for key pairs.

    Every backend keeps two lookup paths onto the same records: by id and by
    public key. Errors are raised, never swallowed:

    - ValidationError: add_key got a KeyPair with an empty field
    - NotFound: nothing is indexed under the requested id / public key
    - Corrupt: the indexed value is not a well-formed KeyPair
    """

    @abstractmethod
    def add_key(self, kp: KeyPair) -> None:
        """Validate kp and store it under both kp.id and kp.public."""

    @abstractmethod
    def delete_key(self, kp: KeyPair) -> None:
        """
        Delete the entry for kp.id. When kp.public is empty the current public
        key is resolved through get_key_from_id first (NotFound if absent).
        Public entries that belong to another id are never removed.
        """

    @abstractmethod
    def get_key_from_id(self, key_id: str) -> KeyPair: ...

    @abstractmethod
    def get_key_from_public(self, public: str) -> KeyPair: ...

    def is_valid(self, public: str) -> None:
        """Return None if public resolves to a stored KeyPair, raise otherwise."""
        self.get_key_from_public(public)

    @abstractmethod
    def __len__(self) -> int: ...

    def close(self) -> None:
        return
