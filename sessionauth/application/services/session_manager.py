# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session issuance and resolution."""

from __future__ import annotations

from uuid import UUID

from sessionauth.domain.users.entities import Identity
from sessionauth.domain.users.repositories import SessionRepository
from sessionauth.shared.logging import logger


def parse_session_id(value: str | UUID | None) -> UUID | None:
    """Return the session id as a UUID, or None when it cannot be one."""
    if isinstance(value, UUID):
        return value
    if not value:
        return None
    try:
        parsed = UUID(value)
    except ValueError:
        return None
    # Only the exact form handed out by create_session is accepted.
    return parsed if str(parsed) == value else None


class SessionManager:
    def __init__(self, *, sessions: SessionRepository) -> None:
        self._sessions = sessions

    def create_session(self, user_id: UUID) -> str:
        session = self._sessions.add(user_id)
        logger.info(f"session.create: user_id={user_id}")
        return str(session.id)

    def resolve_session(self, session_id: str | UUID | None) -> Identity | None:
        sid = parse_session_id(session_id)
        if sid is None:
            return None
        identity = self._sessions.find_identity(sid)
        if identity is None:
            logger.debug("session.resolve: no session matched")
        return identity

    def destroy_session(self, session_id: str | UUID | None) -> int:
        sid = parse_session_id(session_id)
        if sid is None:
            return 0
        deleted = self._sessions.delete(sid)
        logger.info(f"session.destroy: removed={deleted}")
        return deleted
