from __future__ import annotations

import uuid
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.domain.users.entities import User
from sessionauth.domain.users.exceptions import InvalidCredentialsError
from sessionauth.interfaces.http.controllers.users_controller import UsersController
from sessionauth.shared.config import SecurityConfig
from sessionauth.shared.middleware.error_handler import configure_error_handling


def _user(name: str = "Ann", email: str = "ann@x.com") -> User:
    return User(id=uuid.uuid4(), name=name, email=email, password_hash="hash", salt="salt")


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _controller(**overrides) -> UsersController:
    kwargs = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "logout_use_case": MagicMock(),
        "update_profile_use_case": MagicMock(),
        "security": SecurityConfig(),
    }
    kwargs.update(overrides)
    return UsersController(**kwargs)


def test_signup_endpoint_sets_cookie(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
            register_called["args"] = (name, email, password)
            return _user(name, email), "session-123"

    controller = _controller(register_use_case=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/users/signup", json={"name": "Ann", "email": "ann@x.com", "password": "pw1"}
        )

    assert response.status_code == 201
    assert register_called["args"] == ("Ann", "ann@x.com", "pw1")
    assert response.get_json() == {
        "success": True,
        "data": {"message": "User registered successfully"},
    }
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("sessionId=session-123")
    assert "HttpOnly" in cookie
    assert "SameSite=Lax" in cookie


def test_signup_invalid_payload_returns_422(flask_app: Flask) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/users/signup", json={"name": "Ann", "email": "not-an-email"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["success"] is False
    assert payload["context"]["fields"] == ["email", "password"]
    register.execute.assert_not_called()


def test_login_invalid_credentials_returns_400(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = _controller(login_use_case=cast(LoginUserUseCase, login))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/users/login", json={"email": "ann@x.com", "password": "bad"})

    assert response.status_code == 400
    assert response.get_json() == {
        "success": False,
        "error": "invalid_credentials",
        "message": "Invalid email or password",
    }
    assert "Set-Cookie" not in response.headers


def test_cookie_settings_follow_config(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = (_user(), "session-456")
    security = SecurityConfig(
        SESSION_COOKIE_NAME="sid", COOKIE_SECURE=True, COOKIE_SAMESITE="strict"
    )
    controller = _controller(login_use_case=login, security=security)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/users/login", json={"email": "ann@x.com", "password": "pw1"})

    assert response.status_code == 200
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("sid=session-456")
    assert "Secure" in cookie
    assert "SameSite=Strict" in cookie


def test_unexpected_error_returns_generic_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("connection refused by db-host-7")
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/users/login", json={"email": "ann@x.com", "password": "pw1"})

    assert response.status_code == 500
    assert response.get_json() == {
        "success": False,
        "error": "internal_error",
        "message": "Internal Server Error",
    }
