"""
daraza_core.utils
-----------------
Lightweight helpers for base64 handling and epoch timestamps.
"""

from __future__ import annotations
import base64, binascii, math, time
from typing import Optional

DAY_IN_SECONDS = 86400


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    return base64.b64decode(s.encode("ascii"), validate=True)


def try_b64d(s: str) -> Optional[bytes]:
    try:
        return b64d(s)
    except (binascii.Error, ValueError, UnicodeEncodeError):
        return None


def now_epoch() -> int:
    return int(time.time())


def days_until(expiry: int, now: int) -> int:
    # Partial days round up, past expiry clamps to zero
    return max(0, math.ceil((expiry - now) / DAY_IN_SECONDS))

