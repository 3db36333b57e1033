# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from sessionauth.infrastructure.health import check_database
from sessionauth.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine) -> None:
        self._engine = engine

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.home, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def home(self):
        return "You have reached the home route"

    def health(self):
        try:
            check_database(self._engine)
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("health: database check failed")
            return (
                jsonify({"ok": False, "database": "error"}),
                HTTPStatus.SERVICE_UNAVAILABLE,
            )
        return jsonify({"ok": True, "database": "ok"})
