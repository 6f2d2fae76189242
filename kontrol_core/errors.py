# kontrol_core/errors.py
from __future__ import annotations
from typing import Optional


class KontrolError(Exception):
    pass


class KeyPairError(KontrolError):
    """Base class for everything raised by a KeyPairStorage."""


class ValidationError(KeyPairError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"KeyPair {field} field is empty")


class NotFound(KeyPairError):
    def __init__(self, index: str, key: str):
        self.index = index
        self.key = key
        super().__init__(f"no key pair found for {index} {key!r}")


class Corrupt(KeyPairError):
    """The stored value does not have the shape of a KeyPair."""


class RegistrationError(KontrolError):
    def __init__(self, msg: str, status: Optional[int] = None):
        self.status = status
        super().__init__(msg)


class KiteKeyError(KontrolError):
    pass
