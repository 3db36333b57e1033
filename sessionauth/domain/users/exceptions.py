# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from uuid import UUID

from sessionauth.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"

    def __init__(self, email: str) -> None:
        super().__init__(message=f"User with this email {email} already exists")


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class UnauthenticatedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"


class SessionIdRequiredError(DomainError):
    code = "session_id_required"
    message = "Session ID is required"


class SessionNotFoundError(DomainError):
    code = "invalid_session"
    message = "Invalid Session ID"


class SessionOwnerNotFoundError(DomainError):
    code = "session_owner_not_found"
    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, user_id: UUID) -> None:
        super().__init__(
            message=f"Cannot create a session for unknown user {user_id}",
            context={"user_id": str(user_id)},
        )
