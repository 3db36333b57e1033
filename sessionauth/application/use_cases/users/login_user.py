# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.application.services.session_manager import SessionManager
from sessionauth.domain.users.entities import User
from sessionauth.domain.users.exceptions import InvalidCredentialsError
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionManager,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_email(email)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.salt, user.password_hash
        )

        # Unknown email and wrong password must stay indistinguishable.
        if not password_valid:
            raise InvalidCredentialsError()

        session_id = self._sessions.create_session(user.id)
        return user, session_id
