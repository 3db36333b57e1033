# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from .entities import Identity, Session, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def add(self, *, name: str, email: str, password_hash: str, salt: str) -> User: ...
    def update_name(self, user_id: UUID, name: str) -> None: ...


class SessionRepository(Protocol):
    def add(self, user_id: UUID) -> Session: ...
    def find_identity(self, session_id: UUID) -> Identity | None: ...
    def delete(self, session_id: UUID) -> int: ...


class PasswordHasher(Protocol):
    def generate_salt(self) -> str: ...
    def hash(self, password: str, salt: str) -> str: ...
    def verify(self, password: str, salt: str, hashed: str) -> bool: ...
