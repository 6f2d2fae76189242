# kontrol_core/kitekey.py
"""Local persistence of the credential handed out by the authority."""

from __future__ import annotations
import os
from pathlib import Path
from .errors import KiteKeyError

KEY_FILE = "kite.key"


def key_path() -> Path:
    home = os.getenv("KITE_HOME") or os.path.join(os.path.expanduser("~"), ".kite")
    return Path(home) / KEY_FILE


def read() -> str:
    path = key_path()
    try:
        key = path.read_text().strip()
    except OSError as e:
        raise KiteKeyError(f"cannot read kite key {path}: {e}") from e
    if not key:
        raise KiteKeyError(f"kite key {path} is empty")
    return key


def write(key: str) -> Path:
    path = key_path()
    try:
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        path.write_text(key)
        os.chmod(path, 0o600)
    except OSError as e:
        raise KiteKeyError(f"cannot write kite key {path}: {e}") from e
    return path
