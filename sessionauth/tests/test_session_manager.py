from __future__ import annotations

import uuid

import pytest

from sessionauth.domain.users.exceptions import SessionOwnerNotFoundError
from sessionauth.infrastructure.container import Container


@pytest.fixture()
def user_id(container: Container) -> uuid.UUID:
    hasher = container.password_hasher
    salt = hasher.generate_salt()
    user = container.user_repository.add(
        name="Ann", email="ann@x.com", password_hash=hasher.hash("pw1", salt), salt=salt
    )
    return user.id


def test_created_session_resolves_to_identity(container: Container, user_id: uuid.UUID) -> None:
    manager = container.session_manager

    session_id = manager.create_session(user_id)
    identity = manager.resolve_session(session_id)

    assert identity is not None
    assert str(identity.session_id) == session_id
    assert identity.user_id == user_id
    assert identity.name == "Ann"
    assert identity.email == "ann@x.com"


def test_session_row_records_creation_time(container: Container, user_id: uuid.UUID) -> None:
    session = container.session_repository.add(user_id)

    assert session.user_id == user_id
    assert session.created_at is not None


def test_each_session_is_independent(container: Container, user_id: uuid.UUID) -> None:
    manager = container.session_manager
    first = manager.create_session(user_id)
    second = manager.create_session(user_id)

    assert first != second
    assert manager.destroy_session(first) == 1
    assert manager.resolve_session(first) is None
    assert manager.resolve_session(second) is not None


def test_destroy_reports_missing_session(container: Container, user_id: uuid.UUID) -> None:
    manager = container.session_manager
    session_id = manager.create_session(user_id)

    assert manager.destroy_session(session_id) == 1
    assert manager.destroy_session(session_id) == 0


@pytest.mark.parametrize("session_id", [None, "", "not-a-uuid", str(uuid.uuid4())])
def test_unresolvable_ids(container: Container, session_id: str | None) -> None:
    manager = container.session_manager

    assert manager.resolve_session(session_id) is None
    assert manager.destroy_session(session_id) == 0


def test_session_for_unknown_user_is_rejected(container: Container) -> None:
    with pytest.raises(SessionOwnerNotFoundError):
        container.session_manager.create_session(uuid.uuid4())


def test_identity_reflects_name_update(container: Container, user_id: uuid.UUID) -> None:
    manager = container.session_manager
    session_id = manager.create_session(user_id)

    container.user_repository.update_name(user_id, "Annie")

    identity = manager.resolve_session(session_id)
    assert identity is not None
    assert identity.name == "Annie"


def test_only_issued_spelling_resolves(container: Container, user_id: uuid.UUID) -> None:
    manager = container.session_manager
    session_id = manager.create_session(user_id)

    for variant in (
        session_id.upper(),
        "{" + session_id + "}",
        f"urn:uuid:{session_id}",
        session_id.replace("-", ""),
        f" {session_id} ",
    ):
        assert manager.resolve_session(variant) is None
        assert manager.destroy_session(variant) == 0

    assert manager.resolve_session(session_id) is not None
