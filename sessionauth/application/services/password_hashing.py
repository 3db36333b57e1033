# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from sessionauth.domain.users.repositories import PasswordHasher

SALT_BYTES = 256


class HmacPasswordHasher(PasswordHasher):
    """HMAC-SHA256 keyed with a per-user random salt.

    The salt is generated once at signup and stored next to the digest; every
    later verification reuses it. Digests and salts are lowercase hex strings.
    """

    def __init__(self, *, salt_bytes: int = SALT_BYTES) -> None:
        self._salt_bytes = salt_bytes

    def generate_salt(self) -> str:
        return secrets.token_hex(self._salt_bytes)

    def hash(self, password: str, salt: str) -> str:
        return hmac.new(salt.encode(), password.encode(), hashlib.sha256).hexdigest()

    def verify(self, password: str, salt: str, hashed: str) -> bool:
        return hmac.compare_digest(self.hash(password, salt), hashed)
