"""Use-case for ending a session."""

from __future__ import annotations

from sessionauth.application.services.session_manager import SessionManager
from sessionauth.domain.users.exceptions import SessionIdRequiredError, SessionNotFoundError


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, session_id: str | None) -> None:
        if not session_id:
            raise SessionIdRequiredError()
        if self._sessions.destroy_session(session_id) == 0:
            raise SessionNotFoundError()
