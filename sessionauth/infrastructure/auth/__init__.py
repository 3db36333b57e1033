# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session_gate import (
    authed_identity,
    configure_auth_gate,
    current_identity,
    identity_required,
)

__all__ = [
    "authed_identity",
    "configure_auth_gate",
    "current_identity",
    "identity_required",
]
