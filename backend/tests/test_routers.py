import inspect
import json

import pytest


def test_write_kml(client):
    response = client.post("/kml", json={"wkt": "POINT (1 2)"})
    assert response.status_code == 200
    assert response.json() == {
        "geometry_type": "Point",
        "kml": "<Point>\n  <coordinates>1,2</coordinates>\n</Point>\n",
    }


def test_write_kml_with_options(client):
    response = client.post(
        "/kml",
        json={
            "wkt": "POLYGON ((0 0, 1 0, 1 1, 0 0))",
            "options": {"extrude": True, "altitude_mode": "relativeToGround  ", "z": 12.5, "line_prefix": "\t"},
        },
    )
    assert response.status_code == 200
    kml = response.json()["kml"]
    assert kml.count("<extrude>1</extrude>") == 1
    assert "<altitudeMode>relativeToGround</altitudeMode>" in kml
    assert "0,0,12.5 1,0,12.5" in kml
    assert all(line.startswith("\t") for line in kml.splitlines())


def test_write_kml_default_precision(client, monkeypatch):
    from geotext.core.settings import Settings

    monkeypatch.setattr(Settings, "KML_DEFAULT_PRECISION", 1)
    response = client.post("/kml", json={"wkt": "POINT (1.26 2)"})
    assert "<coordinates>1.3,2</coordinates>" in response.json()["kml"]


@pytest.mark.parametrize(
    "body",
    [
        {"wkt": "POINT (1"},
        {"wkt": "CIRCLE (1 2)"},
        {"wkt": "POINT (1 2)", "options": {"altitude_mode": "onTheMoon"}},
    ],
)
def test_write_kml_rejects_bad_input(client, body):
    assert client.post("/kml", json=body).status_code == 422


def test_read_wkt(client):
    text = "POINT (0 0) POINT (1 1) POINT (2 2) POINT (3 3)"
    response = client.post("/wkt/read", json={"text": text, "offset": 1, "limit": 2})
    assert response.status_code == 200
    features = response.json()["features"]
    assert [f["properties"]["index"] for f in features] == [1, 2]
    assert features[0]["geometry"] == {"type": "Point", "coordinates": [1.0, 1.0]}


def test_read_wkt_special_geometries(client):
    text = "POINT EMPTY LINEARRING (0 0, 1 0, 1 1, 0 0)"
    features = client.post("/wkt/read", json={"text": text}).json()["features"]
    assert features[0]["geometry"] is None
    assert features[1]["geometry"]["type"] == "LineString"
    assert features[1]["properties"]["geometry_type"] == "LinearRing"


@pytest.mark.parametrize(
    "text, geometry_type",
    [
        ("GEOMETRYCOLLECTION (POINT EMPTY, POINT (1 2))", "GeometryCollection"),
        ("MULTIPOINT (EMPTY, (1 2))", "MultiPoint"),
        ("GEOMETRYCOLLECTION (LINEARRING (0 0, 1 0, 1 1, 0 0))", "GeometryCollection"),
        ("GEOMETRYCOLLECTION (GEOMETRYCOLLECTION (LINEARRING (0 0, 1 0, 1 1, 0 0), POINT EMPTY))", "GeometryCollection"),
    ],
)
def test_read_wkt_nested_special_geometries(client, text, geometry_type):
    response = client.post("/wkt/read", json={"text": text})
    assert response.status_code == 200
    (feature,) = response.json()["features"]
    assert feature["geometry"]["type"] == geometry_type
    assert "LinearRing" not in json.dumps(feature["geometry"])


def test_file_routes_run_in_threadpool():
    from geotext.routers import wkt

    assert not inspect.iscoroutinefunction(wkt.list_wkt_files)
    assert not inspect.iscoroutinefunction(wkt.read_wkt_file)


@pytest.mark.parametrize(
    "body",
    [
        {"text": "POINT (0 0) POINT (1"},
        {"text": "POINT (0 0)", "limit": -2},
        {"text": "POINT (0 0)", "offset": -1},
    ],
)
def test_read_wkt_rejects_bad_input(client, body):
    assert client.post("/wkt/read", json=body).status_code == 422


def test_list_wkt_files(client, wkt_folder):
    (wkt_folder / "b.wkt").write_text("POINT (0 0)")
    (wkt_folder / "a.WKT").write_text("POINT (0 0)")
    (wkt_folder / "notes.txt").write_text("hello")
    assert client.get("/wkt/files").json() == ["a.WKT", "b.wkt"]


def test_list_wkt_files_missing_folder(client, tmp_path, monkeypatch):
    from geotext.core.settings import Settings

    monkeypatch.setattr(Settings, "WKT_FOLDER", str(tmp_path / "missing"))
    assert client.get("/wkt/files").json() == []


def test_read_wkt_file(client, wkt_folder):
    (wkt_folder / "areas.wkt").write_text("POINT (0 0)\nPOINT (1 1)\nPOINT (2 2)\n")
    response = client.get("/wkt/files/areas.wkt", params={"offset": 1, "limit": 1})
    assert response.status_code == 200
    features = response.json()["features"]
    assert len(features) == 1
    assert features[0]["properties"]["index"] == 1


@pytest.mark.parametrize("filename", ["missing.wkt", "notes.txt"])
def test_read_wkt_file_not_found(client, wkt_folder, filename):
    (wkt_folder / "notes.txt").write_text("POINT (0 0)")
    assert client.get(f"/wkt/files/{filename}").status_code == 404


def test_read_wkt_file_malformed(client, wkt_folder):
    (wkt_folder / "broken.wkt").write_text("POINT (0")
    assert client.get("/wkt/files/broken.wkt").status_code == 422
