from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api import server


@pytest.fixture
def client() -> TestClient:
    app = server.create_app()
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_classify_missing_list(client):
    response = client.post("/api/classify", json={"missing": [1, 4, 5, 12]})
    assert response.status_code == 200

    data = response.json()
    assert data["missing"] == [1, 4, 5, 12]
    assert data["mandibular"] is None
    maxillary = data["maxillary"]
    assert maxillary["arch"] == "maxillary"
    assert maxillary["kennedy_class"] == "Class II"
    assert maxillary["modification"] == 2
    assert maxillary["label"] == "Class II modification 2"
    assert maxillary["gaps"] == [[1], [4, 5], [12]]
    assert data["report"].startswith("Maxillary:\nClass II modification 2")


def test_classify_text(client):
    response = client.post("/api/classify", json={"text": "8, 9, 24,25"})
    assert response.status_code == 200

    data = response.json()
    assert data["maxillary"]["kennedy_class"] == "Class IV"
    assert data["maxillary"]["modification"] is None
    assert data["mandibular"]["kennedy_class"] == "Class IV"


def test_classify_drops_out_of_range(client):
    response = client.post("/api/classify", json={"missing": [0, 4, 5, 40]})
    assert response.status_code == 200
    assert response.json()["missing"] == [4, 5]


def test_classify_nothing_missing(client):
    response = client.post("/api/classify", json={"missing": []})
    assert response.status_code == 200
    data = response.json()
    assert data["maxillary"] is None
    assert data["mandibular"] is None
    assert data["report"] == ""


def test_classify_fully_edentulous(client):
    response = client.post("/api/classify", json={"missing": list(range(17, 33))})
    data = response.json()
    assert data["mandibular"]["kennedy_class"] == "Unspecified"
    assert data["maxillary"] is None


def test_second_molar_flag_is_coupled(client):
    response = client.post(
        "/api/classify",
        json={"missing": [1, 2, 16], "exclude_second_molars": True},
    )
    data = response.json()
    assert data["exclude_third_molars"] is True
    assert data["exclude_second_molars"] is True
    assert data["maxillary"] is None


def test_strict_flags_apply_as_given(client):
    response = client.post(
        "/api/classify",
        json={"missing": [1, 3], "exclude_second_molars": True, "strict_flags": True},
    )
    data = response.json()
    assert data["exclude_third_molars"] is False
    assert data["maxillary"]["kennedy_class"] == "Class II"
    assert data["maxillary"]["gaps"] == [[1, 3]]


@pytest.mark.parametrize(
    "payload",
    [
        {"text": "1,,2"},
        {"missing": [1], "text": "1"},
        {},
    ],
)
def test_classify_rejects_bad_requests(client, payload):
    response = client.post("/api/classify", json=payload)
    assert response.status_code == 400


def test_list_teeth(client):
    response = client.get("/api/teeth")
    assert response.status_code == 200
    items = response.json()["items"]
    assert len(items) == 32
    assert items[0]["position"] == 1
    assert items[0]["type"] == "molar"
    assert items[0]["arch"] == "maxillary"
    assert items[31]["arch"] == "mandibular"


def test_get_tooth(client):
    response = client.get("/api/teeth/24")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Central Incisor (Anterior)"
    assert data["anterior"] is True
    assert data["arch"] == "mandibular"


def test_get_tooth_out_of_range(client):
    response = client.get("/api/teeth/40")
    assert response.status_code == 404
