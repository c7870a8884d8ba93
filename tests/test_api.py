"""API tests. The service is overridden with one backed by a tmp CSV file."""

import pytest
from fastapi.testclient import TestClient

from api import main as api_main
from api.main import app, get_service
from persons.application import PersonService
from persons.infrastructure import CsvPersonRepository


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "persons.csv"
    path.write_text(
        "Müller, Hans, 67742 Lauterecken, 1\nSchmidt, Anna, 10115 Berlin, 4\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def client(csv_path):
    service = PersonService(CsvPersonRepository(csv_path))
    app.dependency_overrides[get_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_persons(client):
    r = client.get("/persons")
    assert r.status_code == 200
    assert r.json() == [
        {"id": 1, "name": "Hans", "lastname": "Müller", "zipcode": "67742", "city": "Lauterecken", "color": "blau"},
        {"id": 2, "name": "Anna", "lastname": "Schmidt", "zipcode": "10115", "city": "Berlin", "color": "rot"},
    ]


def test_get_person_by_id(client):
    r = client.get("/persons/2")
    assert r.status_code == 200
    assert r.json()["name"] == "Anna"


def test_get_person_not_found(client):
    r = client.get("/persons/99")
    assert r.status_code == 404
    assert r.json() == {"detail": "Person not found"}


def test_get_person_non_integer_id(client):
    assert client.get("/persons/abc").status_code == 422


def test_persons_by_color(client):
    r = client.get("/persons/color/BLAU")
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Hans"]

    r = client.get("/persons/color/gelb")
    assert r.status_code == 200
    assert r.json() == []


def test_create_person(client):
    r = client.post(
        "/persons",
        json={"id": 77, "name": "Lisa", "lastname": "Meier", "zipcode": "12345", "city": "Musterstadt", "color": "grün"},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == 3
    assert body["name"] == "Lisa"
    assert r.headers["location"] == "/persons/3"

    assert client.get("/persons/3").json() == body
    assert [p["name"] for p in client.get("/persons").json()] == ["Hans", "Anna", "Lisa"]
    assert [p["name"] for p in client.get("/persons/color/Grün").json()] == ["Lisa"]


def test_create_person_defaults_missing_fields(client):
    r = client.post("/persons", json={"name": "Solo"})
    assert r.status_code == 201
    assert r.json() == {"id": 3, "name": "Solo", "lastname": "", "zipcode": "", "city": "", "color": ""}


def test_default_service_reads_path_from_env(csv_path, monkeypatch):
    monkeypatch.setenv("PERSONS_CSV_PATH", str(csv_path))
    assert api_main.get_csv_path() == csv_path.resolve()

    with TestClient(app) as c:
        r = c.get("/persons")
    assert r.status_code == 200
    assert len(r.json()) == 2


def test_missing_source_serves_empty_list(tmp_path, monkeypatch):
    monkeypatch.setenv("PERSONS_CSV_PATH", str(tmp_path / "missing.csv"))

    with TestClient(app) as c:
        assert c.get("/persons").json() == []
        created = c.post("/persons", json={"name": "Lisa"}).json()
        assert created["id"] == 1
