"""HTTP surface: status codes, bodies and the auth gate."""
from datetime import datetime, timedelta, timezone

from Auth.security import create_access_token, decode_token


def _signup(client, email="owner@x.com", password="pw123", name="Owner"):
    return client.post("/api/auth/signup", json={"email": email, "password": password, "name": name})


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


class TestAuthEndpoints:
    def test_signup_returns_token(self, client):
        response = _signup(client)
        assert response.status_code == 200
        claims = decode_token(response.json()["token"])
        assert claims["email"] == "owner@x.com"
        assert claims["role"] == "owner"

    def test_signup_missing_fields(self, client):
        response = client.post("/api/auth/signup", json={"email": "owner@x.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing email or password"}

    def test_signup_duplicate(self, client):
        _signup(client, email="A@B.com")
        response = _signup(client, email=" a@b.com ")
        assert response.status_code == 400
        assert response.json() == {"error": "User exists"}

    def test_signup_malformed_body(self, client):
        response = client.post("/api/auth/signup", content="not json",
                               headers={"Content-Type": "application/json"})
        assert response.status_code == 400

    def test_login(self, client):
        _signup(client)
        response = client.post("/api/auth/login", json={"email": "OWNER@x.com", "password": "pw123"})
        assert response.status_code == 200
        assert decode_token(response.json()["token"])["id"] == 1

    def test_login_invalid_credentials(self, client):
        _signup(client)
        wrong = client.post("/api/auth/login", json={"email": "owner@x.com", "password": "nope"})
        unknown = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "pw123"})
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json() == {"error": "Invalid credentials"}


class TestFeedbackEndpoints:
    def test_submit(self, client):
        response = client.post("/api/feedback", json={"payload": {"websiteRating": 5}})
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_submit_missing_payload(self, client):
        response = client.post("/api/feedback", json={"email": "user@x.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing payload"}

    def test_submit_non_object_payload(self, client, feedback_store):
        for payload in (["great"], "great"):
            response = client.post("/api/feedback", json={"payload": payload})
            assert response.status_code == 200
        assert [r.payload for r in feedback_store.list_all()] == ["great", ["great"]]

    def test_duplicates_are_distinct_records(self, client, feedback_store):
        for _ in range(2):
            client.post("/api/feedback", json={"payload": {"websiteRating": 5}})
        assert [r.id for r in feedback_store.list_all()] == [2, 1]

    def test_list_requires_token(self, client):
        response = client.get("/api/feedback")
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_list_rejects_bad_token(self, client):
        token = _signup(client).json()["token"]
        bad = token[:-2] + ("yy" if token.endswith("xx") else "xx")
        response = client.get("/api/feedback", headers=_bearer(bad))
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_list_rejects_expired_token(self, client, credentials):
        _signup(client)
        account = credentials.find("owner@x.com")
        stale = create_access_token(account, issued_at=datetime.now(timezone.utc) - timedelta(days=8))
        assert client.get("/api/feedback", headers=_bearer(stale)).status_code == 401

    def test_non_bearer_scheme(self, client):
        token = _signup(client).json()["token"]
        response = client.get("/api/feedback", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401


def test_owner_scenario(client):
    token = _signup(client, "owner@x.com", "pw123", "Owner").json()["token"]

    first = {"websiteRating": 5, "aiRating": 4, "overallExperience": 5, "recommendation": 5}
    second = {"websiteRating": 3, "aiRating": 3, "overallExperience": 2, "recommendation": 4}
    assert client.post("/api/feedback", json={"payload": first, "email": "user@x.com"}).status_code == 200
    assert client.post("/api/feedback", json={"payload": second}).status_code == 200

    response = client.get("/api/feedback", headers=_bearer(token))
    assert response.status_code == 200
    feedback = response.json()["feedback"]
    assert len(feedback) == 2
    assert feedback[0]["userEmail"] is None
    assert feedback[0]["data"] == second
    assert feedback[1]["userEmail"] == "user@x.com"
    assert feedback[1]["data"] == first
    assert set(feedback[0]) == {"id", "userEmail", "data", "createdAt"}


def test_health(client):
    assert client.get("/").json() == {"status": "ok"}
    assert client.get("/health").json()["status"] == "ok"
