# tests/conftest.py
"""Shared fixtures. Points the app at a throwaway SQLite file before it is imported."""

import os
import sys
import tempfile
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

DB_PATH = Path(tempfile.gettempdir()) / "controle_veiculo_test.db"
if DB_PATH.exists():
    DB_PATH.unlink()

os.environ["DATABASE_URL"] = f"sqlite+pysqlite:///{DB_PATH}"
os.environ["TIMEZONE"] = "UTC"
os.environ["API_KEY"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.database import Base, engine


@pytest.fixture
def client():
    from app.main import app

    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def vehicle(client):
    resp = client.post("/api/veiculos", json={
        "placa": "ABC1D23", "modelo": "Strada", "marca": "Fiat", "cor": "Branco",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()
