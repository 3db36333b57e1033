# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import HmacPasswordHasher
from .services.session_manager import SessionManager, parse_session_id
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.update_profile import UpdateProfileUseCase

__all__ = [
    "HmacPasswordHasher",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "SessionManager",
    "UpdateProfileUseCase",
    "parse_session_id",
]
