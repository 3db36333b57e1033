# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request gate resolving the session cookie to an identity.

The gate runs before every request and is permissive: a missing or unknown
session id leaves ``g.identity`` as ``None`` and the request continues.
Handlers that need a signed-in user are wrapped with ``identity_required``,
which turns a missing identity into a 401. A store failure while resolving
the cookie is never treated as "anonymous"; the request fails with a 500
before the handler runs.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import Flask, g, request

from sessionauth.application.services.session_manager import SessionManager
from sessionauth.domain.users.entities import Identity
from sessionauth.domain.users.exceptions import UnauthenticatedError
from sessionauth.shared.errors.base import AppError, SessionStoreUnavailableError
from sessionauth.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def configure_auth_gate(app: Flask, sessions: SessionManager, *, cookie_name: str) -> None:
    @app.before_request
    def _resolve_identity() -> None:
        g.identity = None

        session_id = request.cookies.get(cookie_name, "")
        if not session_id:
            return

        try:
            identity = sessions.resolve_session(session_id)
        except AppError:
            raise
        except Exception as exc:
            raise SessionStoreUnavailableError() from exc

        if identity is None:
            logger.debug(f"auth.gate: unknown session on {request.method} {request.path}")
            return

        g.identity = identity
        logger.debug(f"auth.gate: user={identity.user_id} {request.method} {request.path}")


def current_identity() -> Identity | None:
    return cast("Identity | None", getattr(g, "identity", None))


def authed_identity() -> Identity:
    identity = current_identity()
    if identity is None:
        raise UnauthenticatedError()
    return identity


def identity_required(f: F) -> F:
    @wraps(f)
    def inner(*args, **kwargs):
        if current_identity() is None:
            logger.warning(
                f"No valid session on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthenticatedError()
        return f(*args, **kwargs)

    return cast(F, inner)
