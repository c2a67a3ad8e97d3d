"""
HTTP tests for the users router.

They go through the real FastAPI app, services and repositories against a
temporary SQLite database (see conftest.client).
"""


def _register(client, email="a@x.com", name="A", password="p1", confirm="p1"):
    return client.post(
        "/users/register",
        json={"email": email, "name": name, "password": password, "confirm_password": confirm},
    )


def _login(client, email="a@x.com", password="p1"):
    return client.post("/users/login", json={"email": email, "password": password})


def _auth(client, email="a@x.com", password="p1"):
    token = _login(client, email, password).json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestRegister:
    def test_register_returns_created_user(self, client):
        response = _register(client)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["email"] == "a@x.com"
        assert data["name"] == "A"
        assert data["role"] == "ROLE_USER"
        assert "password_hash" not in data

    def test_register_same_email_twice_is_conflict(self, client):
        _register(client)

        response = _register(client)

        assert response.status_code == 409
        assert response.json()["detail"]["error"] == "duplicate_account"

    def test_register_password_mismatch(self, client):
        response = _register(client, confirm="p2")

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "password_mismatch"

    def test_register_missing_fields_is_rejected(self, client):
        response = client.post("/users/register", json={"email": "a@x.com"})
        assert response.status_code == 422


class TestLogin:
    def test_login_returns_bearer_token(self, client):
        _register(client)

        response = _login(client)

        assert response.status_code == 200
        data = response.json()
        assert data["grant_type"] == "Bearer"
        assert data["access_token"]
        assert data["expires_at"]

    def test_login_wrong_password(self, client):
        _register(client)

        response = _login(client, password="nope")

        assert response.status_code == 401
        assert "access_token" not in response.json()

    def test_me_resolves_bearer_token(self, client):
        user_id = _register(client).json()["id"]

        response = client.get("/users/me", headers=_auth(client))

        assert response.status_code == 200
        assert response.json()["id"] == user_id

    def test_me_without_token(self, client):
        assert client.get("/users/me").status_code == 401

    def test_me_with_garbage_token(self, client):
        response = client.get("/users/me", headers={"Authorization": "Bearer not.a.jwt"})
        assert response.status_code == 401


class TestProfile:
    def test_get_user(self, client):
        user_id = _register(client).json()["id"]

        response = client.get(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.json()["email"] == "a@x.com"

    def test_get_missing_user(self, client):
        assert client.get("/users/999").status_code == 404

    def test_patch_name(self, client):
        user_id = _register(client).json()["id"]

        response = client.patch(f"/users/{user_id}", json={"name": "Renamed"}, headers=_auth(client))

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["email"] == "a@x.com"

    def test_patch_password_changes_login(self, client):
        user_id = _register(client).json()["id"]

        client.patch(f"/users/{user_id}", json={"password": "p2"}, headers=_auth(client))

        assert _login(client, password="p1").status_code == 401
        assert _login(client, password="p2").status_code == 200

    def test_patch_unknown_field(self, client):
        user_id = _register(client).json()["id"]

        response = client.patch(f"/users/{user_id}", json={"name": "X", "email": "b@x.com"}, headers=_auth(client))

        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "invalid_field"
        assert client.get(f"/users/{user_id}").json()["name"] == "A"

    def test_patch_deleted_account(self, client):
        user_id = _register(client).json()["id"]
        headers = _auth(client)
        client.delete(f"/users/{user_id}", headers=headers)

        # the token outlives the account it was issued for
        response = client.patch(f"/users/{user_id}", json={"name": "X"}, headers=headers)

        assert response.status_code == 404

    def test_delete_user(self, client):
        user_id = _register(client).json()["id"]

        response = client.delete(f"/users/{user_id}", headers=_auth(client))

        assert response.status_code == 204
        assert client.get(f"/users/{user_id}").status_code == 404

    def test_delete_twice(self, client):
        user_id = _register(client).json()["id"]
        headers = _auth(client)

        assert client.delete(f"/users/{user_id}", headers=headers).status_code == 204
        assert client.delete(f"/users/{user_id}", headers=headers).status_code == 404


class TestAccountOwnership:
    def test_patch_without_token_is_unauthorized(self, client):
        victim_id = _register(client, email="victim@x.com").json()["id"]

        response = client.patch(f"/users/{victim_id}", json={"password": "owned"})

        assert response.status_code == 401
        assert _login(client, email="victim@x.com", password="owned").status_code == 401
        assert _login(client, email="victim@x.com", password="p1").status_code == 200

    def test_delete_without_token_is_unauthorized(self, client):
        victim_id = _register(client, email="victim@x.com").json()["id"]

        assert client.delete(f"/users/{victim_id}").status_code == 401
        assert client.get(f"/users/{victim_id}").status_code == 200

    def test_patch_other_account_is_forbidden(self, client):
        victim_id = _register(client, email="victim@x.com").json()["id"]
        _register(client, email="mallory@x.com")

        response = client.patch(
            f"/users/{victim_id}",
            json={"name": "Owned"},
            headers=_auth(client, email="mallory@x.com"),
        )

        assert response.status_code == 403
        assert client.get(f"/users/{victim_id}").json()["name"] == "A"

    def test_delete_other_account_is_forbidden(self, client):
        victim_id = _register(client, email="victim@x.com").json()["id"]
        _register(client, email="mallory@x.com")

        response = client.delete(f"/users/{victim_id}", headers=_auth(client, email="mallory@x.com"))

        assert response.status_code == 403
        assert client.get(f"/users/{victim_id}").status_code == 200
