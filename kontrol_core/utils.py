"""
kontrol_core.utils
------------------
Small helpers for base64 encoding, identifiers and digests.
"""

from __future__ import annotations
import base64, hashlib, uuid


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")

def new_id() -> str:
    return uuid.uuid4().hex

def sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()
