"""
Password hashing for the `passwordhash` column.

bcrypt reads at most 72 bytes, so the password is first reduced to a
base64 SHA-256 digest (44 bytes). Every byte of the password affects the hash.
"""

from __future__ import annotations

import base64
import hashlib

import bcrypt


def password_digest(plain_password: str) -> bytes:
    digest = hashlib.sha256((plain_password or "").encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plain_password: str) -> str:
    return bcrypt.hashpw(password_digest(plain_password), bcrypt.gensalt()).decode("utf-8")
