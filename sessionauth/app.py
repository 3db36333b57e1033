# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from sessionauth.infrastructure.auth import configure_auth_gate
from sessionauth.infrastructure.container import Container
from sessionauth.infrastructure.db import create_db_engine, create_session_factory, init_db
from sessionauth.shared.config import AppConfig, load_config
from sessionauth.shared.logging import logger, setup_logging
from sessionauth.shared.middleware.error_handler import configure_error_handling
from sessionauth.shared.middleware.request_logger import configure_request_logging


def _build_container(config: AppConfig) -> Container:
    engine = create_db_engine(config.database)
    init_db(engine)
    return Container(
        config=config,
        engine=engine,
        session_factory=create_session_factory(engine),
    )


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    level = "DEBUG" if config.debug_logging else config.log_level
    setup_logging(level, log_file=config.log_file)

    container = _build_container(config)

    app = Flask(__name__)
    app.extensions["sessionauth"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_auth_gate(
        app,
        container.session_manager,
        cookie_name=config.security.session_cookie_name,
    )

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=config.debug_logging)


if __name__ == "__main__":
    main()
