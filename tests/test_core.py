import base64

from daraza_core.crypto import decrypt_blob, derive_encryption_key, derive_iv, encrypt_blob
from daraza_core.storage import InMemoryStore, SQLiteStore, load_settings_store
from daraza_core.config import DarazaConfig

KEY = derive_encryption_key("auth-salt")


def test_derived_lengths_and_determinism():
    assert len(derive_encryption_key("a")) == 32
    assert len(derive_iv("a")) == 16
    assert derive_encryption_key("a") == derive_encryption_key("a")
    assert derive_encryption_key("a") != derive_encryption_key("b")


def test_encrypt_decrypt():
    blob = encrypt_blob(KEY, "hello-key")
    raw = base64.b64decode(blob)
    # IV + tag + ciphertext of the same length as the plaintext
    assert len(raw) == 16 + 16 + len("hello-key")
    assert decrypt_blob(KEY, blob) == "hello-key"


def test_fresh_iv_per_encryption():
    assert encrypt_blob(KEY, "same") != encrypt_blob(KEY, "same")


def test_legacy_deterministic_iv_blob_decrypts():
    blob = encrypt_blob(KEY, "legacy-key", iv=derive_iv("secure-auth-salt"))
    assert base64.b64decode(blob)[:16] == derive_iv("secure-auth-salt")
    assert decrypt_blob(KEY, blob) == "legacy-key"


def test_decrypt_rejects_bad_input():
    blob = encrypt_blob(KEY, "hello-key")
    raw = bytearray(base64.b64decode(blob))
    raw[-1] ^= 0x01
    assert decrypt_blob(KEY, base64.b64encode(bytes(raw)).decode()) is None
    assert decrypt_blob(derive_encryption_key("other"), blob) is None
    assert decrypt_blob(KEY, "not base64 !!") is None
    assert decrypt_blob(KEY, base64.b64encode(b"short").decode()) is None
    assert decrypt_blob(KEY, "") is None


def test_memory_store_roundtrip():
    s = InMemoryStore()
    assert s.get("missing", 7) == 7
    assert s.set("opt", {"a": 1})
    assert s.get("opt") == {"a": 1}
    assert s.delete("opt")
    assert not s.delete("opt")


def test_sqlite_store_persists(tmp_path):
    db_path = tmp_path / "settings.db"
    s = SQLiteStore(str(db_path))
    assert s.set("daraza_api_key_version", 3)
    assert s.set("daraza_api_key_version", 4)
    s.close()

    s2 = SQLiteStore(str(db_path))
    assert s2.get("daraza_api_key_version") == 4
    assert s2.delete("daraza_api_key_version")
    assert s2.get("daraza_api_key_version") is None


def test_load_settings_store(tmp_path, monkeypatch):
    monkeypatch.setenv("DARAZA_STORAGE_PROVIDER", "memory")
    assert isinstance(load_settings_store(), InMemoryStore)

    cfg = DarazaConfig(auth_salt="a", secure_auth_salt="b", storage_provider="sqlite",
                       db_path=str(tmp_path / "x.db"))
    assert isinstance(load_settings_store(cfg), SQLiteStore)


def test_utils_helpers():
    from daraza_core import utils

    assert utils.try_b64d(utils.b64e(b"\x00\xff")) == b"\x00\xff"
    assert utils.try_b64d("***") is None
    assert utils.days_until(1000 + utils.DAY_IN_SECONDS + 1, 1000) == 2
    assert utils.days_until(0, 1000) == 0
    assert not hasattr(utils, "canonical_json")
