from __future__ import annotations

from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from sessionauth.app import create_app
from sessionauth.infrastructure.container import Container
from sessionauth.shared.config import AppConfig, DatabaseConfig, SecurityConfig


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'sessionauth.db'}"),
        security=SecurityConfig(),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Flask:
    return create_app(app_config)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions["sessionauth"]
