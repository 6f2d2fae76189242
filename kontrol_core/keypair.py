# kontrol_core/keypair.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict
from .errors import ValidationError, Corrupt

FIELDS = ("id", "public", "private")


@dataclass(frozen=True)
class KeyPair:
    """
    A registered host's credential.

    - id: unique identifier of the key pair
    - public: key material used to validate tokens
    - private: key material used to sign/generate tokens, never leaves storage
    """
    id: str = ""
    public: str = ""
    private: str = ""

    def validate(self) -> None:
        validate(self)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyPair":
        try:
            values = {f: data[f] for f in FIELDS}
        except (KeyError, TypeError) as e:
            raise Corrupt(f"KeyPair value is malformed {data!r}") from e
        if not all(isinstance(v, str) for v in values.values()):
            raise Corrupt(f"KeyPair value is malformed {data!r}")
        return cls(**values)

    def __repr__(self) -> str:
        return f"KeyPair(id={self.id!r}, public={self.public!r}, private=***)"


def validate(kp: KeyPair) -> None:
    """Raise ValidationError for the first empty field (id, public, private)."""
    for field in FIELDS:
        if not getattr(kp, field):
            raise ValidationError(field)
