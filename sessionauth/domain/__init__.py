# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import Identity, Session, User
from .users.exceptions import (
    InvalidCredentialsError,
    SessionIdRequiredError,
    SessionNotFoundError,
    SessionOwnerNotFoundError,
    UnauthenticatedError,
    UserAlreadyExistsError,
)

__all__ = [
    "Identity",
    "InvalidCredentialsError",
    "Session",
    "SessionIdRequiredError",
    "SessionNotFoundError",
    "SessionOwnerNotFoundError",
    "UnauthenticatedError",
    "User",
    "UserAlreadyExistsError",
]
