# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.application.services.session_manager import SessionManager
from sessionauth.domain.users.entities import User
from sessionauth.domain.users.exceptions import UserAlreadyExistsError
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
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

    def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
        if self._users.find_by_email(email) is not None:
            raise UserAlreadyExistsError(email)
        salt = self._password_hasher.generate_salt()
        hashed = self._password_hasher.hash(password, salt)
        user = self._users.add(name=name, email=email, password_hash=hashed, salt=salt)
        session_id = self._sessions.create_session(user.id)
        return user, session_id
