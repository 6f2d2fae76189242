"""
kontrol_core
============
Credential registry for the kontrol service-discovery authority.

Provides:
- KeyPair entity and its validation gate
- KeyPairStorage contract with in-memory (dual-indexed) and SQLite backends
- Key issuing and the host-side registration flow
"""

from .errors import (
    KontrolError, KeyPairError, ValidationError, NotFound, Corrupt,
    RegistrationError, KiteKeyError,
)
from .keypair import KeyPair, validate

__all__ = [
    "KontrolError",
    "KeyPairError",
    "ValidationError",
    "NotFound",
    "Corrupt",
    "RegistrationError",
    "KiteKeyError",
    "KeyPair",
    "validate",
]
