import base64
import pytest
from kontrol_core import KeyPair, NotFound, ValidationError
from kontrol_core.authority import Authority
from kontrol_core.crypto import generate_keypair, public_key_fingerprint
from kontrol_core.storage import MemKeyPairStorage


def test_generate_keypair_is_ed25519_sized():
    kp = generate_keypair("h1")
    assert kp.id == "h1"
    assert len(base64.b64decode(kp.public)) == 32
    assert len(base64.b64decode(kp.private)) == 32
    assert generate_keypair().id != generate_keypair().id


def test_fingerprint_is_stable():
    assert public_key_fingerprint("pub1") == public_key_fingerprint("pub1")
    assert len(public_key_fingerprint("pub1")) == 32


def test_issue_and_authenticate():
    auth = Authority(MemKeyPairStorage())
    kp = auth.issue_key("host-a")
    assert auth.authenticate(kp.public) == kp


def test_authenticate_unknown_key_logs_and_raises(caplog):
    auth = Authority(MemKeyPairStorage())
    with pytest.raises(NotFound):
        auth.authenticate("unknown")
    assert "rejected public key" in caplog.text


def test_revoke_invalidates_public_key():
    store = MemKeyPairStorage()
    auth = Authority(store)
    kp = auth.issue_key("host-a")
    auth.revoke("host-a")
    with pytest.raises(NotFound):
        store.is_valid(kp.public)


def test_rotate_replaces_key_material():
    store = MemKeyPairStorage()
    auth = Authority(store)
    old = auth.issue_key("host-a")
    new = auth.rotate("host-a")
    assert new.id == "host-a"
    assert new.public != old.public
    with pytest.raises(NotFound):
        store.is_valid(old.public)
    assert store.get_key_from_id("host-a") == new


def test_register_external_key():
    store = MemKeyPairStorage()
    auth = Authority(store)
    kp = KeyPair(id="host-b", public="pub-b", private="priv-b")
    auth.register_key(kp)
    assert auth.authenticate("pub-b") == kp
    with pytest.raises(ValidationError):
        auth.register_key(KeyPair(id="host-c", public="", private="x"))
