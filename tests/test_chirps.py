import uuid

import pytest

from models import storage
from models.chirp import Chirp


@pytest.fixture()
def author(login):
    return login()


@pytest.fixture()
def post_chirp(client, bearer):
    def _post(session, body):
        resp = client.post("/api/chirps", json={"body": body}, headers=bearer(session["token"]))
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _post


def test_create_chirp(client, author, bearer):
    resp = client.post(
        "/api/chirps",
        json={"body": "I'm the one who knocks!"},
        headers=bearer(author["token"]),
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["body"] == "I'm the one who knocks!"
    assert body["user_id"] == author["id"]
    assert {"id", "created_at", "updated_at"} <= body.keys()


def test_create_chirp_censors_profanity(author, post_chirp):
    chirp = post_chirp(author, "This is a kerfuffle opinion I need to share with the world")

    assert chirp["body"] == "This is a **** opinion I need to share with the world"


def test_create_chirp_max_length(client, author, bearer, post_chirp):
    post_chirp(author, "a" * 140)

    resp = client.post("/api/chirps", json={"body": "a" * 141}, headers=bearer(author["token"]))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Chirp is too long"


def test_create_chirp_requires_body(client, author, bearer):
    resp = client.post("/api/chirps", json={}, headers=bearer(author["token"]))

    assert resp.status_code == 422


def test_create_chirp_requires_token(client):
    resp = client.post("/api/chirps", json={"body": "hello"})

    assert resp.status_code == 401


@pytest.mark.parametrize("header", ["Bearer", "Bearer ", "garbage", "Bearer not.a.jwt"])
def test_create_chirp_bad_authorization_header(client, header):
    resp = client.post("/api/chirps", json={"body": "hello"}, headers={"Authorization": header})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Unauthorized"


def test_list_chirps_sorted(client, author, post_chirp):
    first = post_chirp(author, "first")
    second = post_chirp(author, "second")
    third = post_chirp(author, "third")

    resp = client.get("/api/chirps")
    assert resp.status_code == 200
    assert [c["id"] for c in resp.get_json()] == [first["id"], second["id"], third["id"]]

    resp = client.get("/api/chirps?sort=desc")
    assert [c["id"] for c in resp.get_json()] == [third["id"], second["id"], first["id"]]


def test_list_chirps_bad_sort(client):
    resp = client.get("/api/chirps?sort=sideways")

    assert resp.status_code == 400


def test_list_chirps_by_author(client, login, post_chirp):
    walt = login()
    jesse = login("jesse@breakingbad.com", "yo")
    post_chirp(walt, "say my name")
    mine = post_chirp(jesse, "yeah science")

    resp = client.get(f"/api/chirps?author_id={jesse['id']}")

    assert resp.status_code == 200
    assert [c["id"] for c in resp.get_json()] == [mine["id"]]


def test_list_chirps_bad_author_id(client):
    resp = client.get("/api/chirps?author_id=not-a-uuid")

    assert resp.status_code == 400


def test_list_chirps_empty(client):
    resp = client.get("/api/chirps")

    assert resp.status_code == 200
    assert resp.get_json() == []


def test_get_chirp(client, author, post_chirp):
    chirp = post_chirp(author, "hello")

    resp = client.get(f"/api/chirps/{chirp['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == chirp


def test_get_chirp_not_found(client):
    resp = client.get(f"/api/chirps/{uuid.uuid4()}")

    assert resp.status_code == 404


def test_get_chirp_bad_id(client):
    resp = client.get("/api/chirps/not-a-uuid")

    assert resp.status_code == 400


def test_delete_chirp(client, author, post_chirp, bearer):
    chirp = post_chirp(author, "delete me")

    resp = client.delete(f"/api/chirps/{chirp['id']}", headers=bearer(author["token"]))

    assert resp.status_code == 204
    assert storage.get(Chirp, chirp["id"]) is None
    assert client.get(f"/api/chirps/{chirp['id']}").status_code == 404


def test_delete_someone_elses_chirp(client, login, post_chirp, bearer):
    walt = login()
    jesse = login("jesse@breakingbad.com", "yo")
    chirp = post_chirp(walt, "mine")

    resp = client.delete(f"/api/chirps/{chirp['id']}", headers=bearer(jesse["token"]))

    assert resp.status_code == 403
    assert storage.get(Chirp, chirp["id"]) is not None


def test_delete_chirp_not_found(client, author, bearer):
    resp = client.delete(f"/api/chirps/{uuid.uuid4()}", headers=bearer(author["token"]))

    assert resp.status_code == 404


def test_delete_chirp_requires_token(client, author, post_chirp):
    chirp = post_chirp(author, "hello")

    resp = client.delete(f"/api/chirps/{chirp['id']}")

    assert resp.status_code == 401
