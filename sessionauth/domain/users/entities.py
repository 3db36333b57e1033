# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(slots=True, frozen=True)
class User:

    id: UUID
    name: str
    email: str
    password_hash: str
    salt: str


@dataclass(slots=True, frozen=True)
class Session:

    id: UUID
    user_id: UUID
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """User data attached to an authenticated request."""

    session_id: UUID
    user_id: UUID
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        return {
            "session_id": str(self.session_id),
            "user_id": str(self.user_id),
            "name": self.name,
            "email": self.email,
        }
