from fastapi.testclient import TestClient

from api.main import create_people_app
from repositories import PeopleRepository


def test_list_seeded_people(people_client):
    resp = people_client.get("/people")
    assert resp.status_code == 200
    data = resp.json()
    assert [p["id"] for p in data] == ["1", "2", "3", "4"]
    assert data[0]["address"] == {"city": "Dortmund", "country": "Germany"}
    assert data[3]["address"] is None


def test_get_person(people_client):
    resp = people_client.get("/people/2")
    assert resp.status_code == 200
    assert resp.json()["firstname"] == "Sascha Mario"


def test_get_unknown_person_returns_empty_record(people_client):
    resp = people_client.get("/people/42")
    assert resp.status_code == 200
    assert resp.json() == {"id": "", "firstname": "", "lastname": "", "address": None}


def test_create_uses_path_id(people_client):
    resp = people_client.post("/people/5", json={"id": "ignored", "firstname": "Kim", "address": {"city": "Essen"}})
    assert resp.status_code == 200
    created = resp.json()[-1]
    assert created == {"id": "5", "firstname": "Kim", "lastname": "", "address": {"city": "Essen", "country": ""}}
    assert people_client.get("/people/5").json()["firstname"] == "Kim"


def test_create_without_body(people_client):
    resp = people_client.post("/people/6")
    assert resp.status_code == 200
    assert resp.json()[-1] == {"id": "6", "firstname": "", "lastname": "", "address": None}


def test_create_malformed_body(people_client):
    resp = people_client.post("/people/7", content=b"{oops", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert len(people_client.get("/people").json()) == 4


def test_delete_preserves_order(people_client):
    resp = people_client.delete("/people/2")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == ["1", "3", "4"]

    resp = people_client.delete("/people/unknown")
    assert [p["id"] for p in resp.json()] == ["1", "3", "4"]


def test_delete_removes_only_first_match(people_client):
    people_client.post("/people/1", json={"firstname": "Second"})
    resp = people_client.delete("/people/1")
    remaining = resp.json()
    assert [p["id"] for p in remaining] == ["2", "3", "4", "1"]
    assert remaining[-1]["firstname"] == "Second"


def test_apps_do_not_share_state():
    first = TestClient(create_people_app(PeopleRepository()))
    second = TestClient(create_people_app(PeopleRepository()))

    first.post("/people/1", json={"firstname": "Only here"})

    assert len(first.get("/people").json()) == 1
    assert second.get("/people").json() == []
