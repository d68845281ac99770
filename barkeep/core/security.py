"""Security helpers (API key issuance and avatar hashing)."""

from __future__ import annotations

import hashlib
import secrets

USER_KEY_BYTES = 16


def generate_user_key() -> str:
    """Return a fresh opaque token used as an API key or secret."""
    return secrets.token_hex(USER_KEY_BYTES)


def email_hash(email: str) -> str:
    """MD5 of the lower-cased address, as avatar services expect."""
    return hashlib.md5((email or "").lower().encode("utf-8")).hexdigest()
