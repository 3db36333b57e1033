from __future__ import annotations

from pathlib import Path

from flask import Flask
from sqlalchemy import create_engine

from sessionauth.interfaces.http.controllers.misc_controller import MiscController
from sessionauth.shared.middleware.error_handler import configure_error_handling


def _make_app(database_url: str) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    app.register_blueprint(MiscController(engine=create_engine(database_url)).as_blueprint())
    return app


def test_health_reports_reachable_database(tmp_path: Path) -> None:
    app = _make_app(f"sqlite:///{tmp_path / 'ok.db'}")

    with app.test_client() as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}


def test_health_hides_driver_error_when_database_unreachable(tmp_path: Path) -> None:
    app = _make_app(f"sqlite:///{tmp_path / 'missing-dir' / 'gone.db'}")

    with app.test_client() as client:
        response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json() == {"ok": False, "database": "error"}
    body = response.get_data(as_text=True)
    assert "sqlite3" not in body
    assert "unable to open" not in body
