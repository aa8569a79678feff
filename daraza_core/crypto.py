from __future__ import annotations
from typing import Optional
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os, hashlib
from .utils import b64e, try_b64d

"""
daraza_core.crypto
------------------
Encryption-at-rest for the provider API key.

- Key/IV derivation: SHA-256 of a host secret, truncated to length
- AES-256-GCM blob format: base64(IV ‖ tag ‖ ciphertext)

A fresh random IV is drawn for every encryption. derive_iv() is kept so that
callers can reproduce blobs written with the older deterministic IV; decrypt
reads the IV from the blob and handles both.
"""

KEY_LEN = 32
IV_LEN = 16
TAG_LEN = 16


def derive_encryption_key(secret: str) -> bytes:
    return hashlib.sha256(secret.encode("utf-8")).digest()[:KEY_LEN]


def derive_iv(secret: str) -> bytes:
    return hashlib.sha256(secret.encode("utf-8")).digest()[:IV_LEN]


def encrypt_blob(key: bytes, plaintext: str, iv: Optional[bytes] = None) -> Optional[str]:
    iv = iv if iv is not None else os.urandom(IV_LEN)
    try:
        sealed = AESGCM(key).encrypt(iv, plaintext.encode("utf-8"), None)
    except (ValueError, TypeError, OverflowError):
        return None
    # AESGCM appends the tag; the stored layout puts it right after the IV
    ct, tag = sealed[:-TAG_LEN], sealed[-TAG_LEN:]
    return b64e(iv + tag + ct)


def decrypt_blob(key: bytes, blob: str) -> Optional[str]:
    if not blob:
        return None
    raw = try_b64d(blob)
    if raw is None or len(raw) <= IV_LEN + TAG_LEN:
        return None

    iv, tag, ct = raw[:IV_LEN], raw[IV_LEN:IV_LEN + TAG_LEN], raw[IV_LEN + TAG_LEN:]
    try:
        pt = AESGCM(key).decrypt(iv, ct + tag, None)
    except (InvalidTag, ValueError):
        return None

    try:
        return pt.decode("utf-8")
    except UnicodeDecodeError:
        return None
