import pytest
from fastapi.testclient import TestClient

from geotext.core.settings import Settings
from geotext.main import app


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def wkt_folder(tmp_path, monkeypatch):
    monkeypatch.setattr(Settings, "WKT_FOLDER", str(tmp_path))
    return tmp_path
