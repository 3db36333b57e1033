# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sessionauth.domain.users.entities import Identity
from sessionauth.domain.users.entities import Session as DomainSession
from sessionauth.domain.users.entities import User as DomainUser
from sessionauth.domain.users.exceptions import SessionOwnerNotFoundError, UserAlreadyExistsError
from sessionauth.domain.users.repositories import SessionRepository, UserRepository
from sessionauth.infrastructure.db.models import User, UserSession
from sessionauth.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password,
        salt=row.salt,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain_user(row) if row else None

    def add(self, *, name: str, email: str, password_hash: str, salt: str) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(name=name, email=email, password=password_hash, salt=salt)
                session.add(row)
                session.flush()
                return _to_domain_user(row)
        except IntegrityError as exc:
            # A concurrent signup won the unique(email) race.
            raise UserAlreadyExistsError(email) from exc

    def update_name(self, user_id: UUID, name: str) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.execute(update(User).where(User.id == user_id).values(name=name))


class SqlAlchemySessionRepository(SessionRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, user_id: UUID) -> DomainSession:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = UserSession(user_id=user_id)
                session.add(row)
                session.flush()
                return DomainSession(id=row.id, user_id=row.user_id, created_at=row.created_at)
        except IntegrityError as exc:
            raise SessionOwnerNotFoundError(user_id) from exc

    def find_identity(self, session_id: UUID) -> Identity | None:
        stmt = (
            select(UserSession.id, UserSession.user_id, User.name, User.email)
            .join(User, User.id == UserSession.user_id)
            .where(UserSession.id == session_id)
        )
        with unit_of_work_scope(self._session_factory) as session:
            row = session.execute(stmt).first()
        if row is None:
            return None
        return Identity(session_id=row.id, user_id=row.user_id, name=row.name, email=row.email)

    def delete(self, session_id: UUID) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(delete(UserSession).where(UserSession.id == session_id))
            return result.rowcount or 0
