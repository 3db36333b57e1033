"""Use-case for editing the signed-in user's profile."""

from __future__ import annotations

from sessionauth.domain.users.entities import Identity
from sessionauth.domain.users.repositories import UserRepository


class UpdateProfileUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, identity: Identity, name: str) -> None:
        # Only the display name is editable; email and credentials stay as-is.
        self._users.update_name(identity.user_id, name)
