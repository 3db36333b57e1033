from __future__ import annotations

from sessionauth.shared.logging import sanitize_message


def test_password_is_masked() -> None:
    assert sanitize_message("login password=hunter2 ok") == "login password=***REDACTED*** ok"


def test_session_id_is_masked() -> None:
    result = sanitize_message("session_id=3f2b1c4d-9a8e-4f6b-8c1d-2e3f4a5b6c7d")

    assert "3f2b1c4d" not in result
    assert "***REDACTED***" in result


def test_database_credentials_are_masked() -> None:
    result = sanitize_message("connecting to postgresql+psycopg://app:secret@db/sessionauth")

    assert "secret" not in result
    assert "postgresql+psycopg://app:***REDACTED***@db/sessionauth" in result


def test_email_local_part_is_masked() -> None:
    assert sanitize_message("signup for ann@x.com") == "signup for ***@x.com"
