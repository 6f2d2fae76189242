"""
kontrol_core.crypto
-------------------
Key material for the kontrol registry.

- Ed25519 key pair generation for newly issued credentials
- Stable fingerprints so public keys can be logged without dumping them

Token signing and verification live with the authority, not here.
"""

from __future__ import annotations
from typing import Optional, Tuple
from cryptography.hazmat.primitives.asymmetric import ed25519
from .keypair import KeyPair
from .utils import b64e, new_id, sha256


def ed25519_generate() -> Tuple[bytes, bytes]:
    sk = ed25519.Ed25519PrivateKey.generate()
    pk = sk.public_key()
    return sk.private_bytes_raw(), pk.public_bytes_raw()


def generate_keypair(key_id: Optional[str] = None) -> KeyPair:
    """Issue a fresh Ed25519 KeyPair with base64 encoded key material."""
    priv, pub = ed25519_generate()
    return KeyPair(id=key_id or new_id(), public=b64e(pub), private=b64e(priv))


def public_key_fingerprint(public: str) -> str:
    # 16 bytes = 32 hex chars
    return sha256(public.encode("utf-8"))[:32]
