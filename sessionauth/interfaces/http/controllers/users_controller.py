# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.logout_user import LogoutUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.application.use_cases.users.update_profile import UpdateProfileUseCase
from sessionauth.domain.users.exceptions import InvalidCredentialsError, SessionNotFoundError
from sessionauth.infrastructure.audit import AuditAction, audit_log
from sessionauth.infrastructure.auth import authed_identity, identity_required
from sessionauth.interfaces.http.dto.users import (
    IdentityDTO,
    LoginRequestDTO,
    MessageDTO,
    ProfileDTO,
    SignupRequestDTO,
    SignupSuccessDTO,
    UpdateProfileRequestDTO,
)
from sessionauth.shared.config import SecurityConfig
from sessionauth.shared.errors.validation import raise_validation_error
from sessionauth.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        update_profile_use_case: UpdateProfileUseCase,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._update_profile_use_case = update_profile_use_case
        self._security = security

    def _set_session_cookie(self, response: Response, session_id: str) -> None:
        # No max_age: sessions live until logout.
        response.set_cookie(
            self._security.session_cookie_name,
            session_id,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, session_id = self._register_use_case.execute(dto.name, dto.email, dto.password)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=_get_client_ip(),
            details={"name": dto.name},
            success=True,
        )

        payload = SignupSuccessDTO(data={"message": "User registered successfully"})
        response = jsonify(payload.model_dump())
        self._set_session_cookie(response, session_id)
        logger.info(f"users.signup: ok user_id={user.id}")
        return response, HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()

        try:
            user, session_id = self._login_use_case.execute(dto.email, dto.password)
        except InvalidCredentialsError:
            audit_log(AuditAction.LOGIN_FAILED, ip_address=ip_address, success=False)
            raise

        audit_log(AuditAction.LOGIN_SUCCESS, user_id=user.id, ip_address=ip_address)

        response = jsonify(MessageDTO(message="Logged in successfully").model_dump())
        self._set_session_cookie(response, session_id)
        logger.info(f"users.login: ok user_id={user.id}")
        return response, HTTPStatus.OK

    def logout(self) -> tuple[Response, int]:
        session_id = request.cookies.get(self._security.session_cookie_name, "")

        try:
            self._logout_use_case.execute(session_id)
        except SessionNotFoundError:
            audit_log(AuditAction.LOGOUT_FAILED, ip_address=_get_client_ip(), success=False)
            raise

        audit_log(AuditAction.LOGOUT, ip_address=_get_client_ip())

        response = jsonify(MessageDTO(message="Logged out successfully").model_dump())
        response.delete_cookie(
            self._security.session_cookie_name,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        logger.info("users.logout: ok")
        return response, HTTPStatus.OK

    @identity_required
    def profile(self) -> tuple[Response, int]:
        identity = authed_identity()
        payload = ProfileDTO(data=IdentityDTO(**identity.to_dict()))
        return jsonify(payload.model_dump()), HTTPStatus.OK

    @identity_required
    def update_profile(self) -> tuple[Response, int]:
        identity = authed_identity()
        try:
            dto = UpdateProfileRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._update_profile_use_case.execute(identity, dto.name)

        audit_log(
            AuditAction.PROFILE_UPDATED,
            user_id=identity.user_id,
            ip_address=_get_client_ip(),
            details={"name": dto.name},
        )
        payload = MessageDTO(message="User information updated successfully")
        return jsonify(payload.model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("", view_func=self.profile, methods=["GET"])
        bp.add_url_rule("/me", endpoint="profile_me", view_func=self.profile, methods=["GET"])
        bp.add_url_rule("", view_func=self.update_profile, methods=["PATCH"])
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["DELETE"])
        return bp
