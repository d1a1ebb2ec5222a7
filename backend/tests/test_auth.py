"""
Bearer token authentication for the API and session login for the web UI
"""
from datetime import timedelta

from catalog_admin.core.security import create_access_token
from conftest import USER_EMAIL, USER_PASSWORD


class TestApiLogin:

    def test_login_returns_token(self, client, user):
        response = client.post("/api/v1/auth/login", json={"email": USER_EMAIL, "password": USER_PASSWORD})

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == USER_EMAIL

        me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.json()["id"] == user.id

    def test_wrong_password(self, client, user):
        response = client.post("/api/v1/auth/login", json={"email": USER_EMAIL, "password": "nope"})

        assert response.status_code == 401

    def test_inactive_user_cannot_log_in(self, client, test_db, user):
        user.is_active = False
        test_db.commit()

        response = client.post("/api/v1/auth/login", json={"email": USER_EMAIL, "password": USER_PASSWORD})

        assert response.status_code == 401

    def test_invalid_email_is_a_validation_error(self, client):
        response = client.post("/api/v1/auth/login", json={"email": "not-an-email", "password": "x"})

        assert response.status_code == 422
        assert "email" in response.json()["errors"]


class TestApiToken:

    def test_missing_token(self, client):
        response = client.get("/api/v1/suppliers/")

        assert response.status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/api/v1/suppliers/", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    def test_expired_token(self, client, user):
        token = create_access_token(user.id, expires_delta=timedelta(minutes=-1))

        response = client.get("/api/v1/suppliers/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_public_api_needs_no_token(self, client):
        assert client.get("/api/public/products").status_code == 200


class TestWebSession:

    def test_pages_redirect_to_login(self, client):
        response = client.get("/suppliers", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login"

    def test_login_then_logout(self, client, user):
        login = client.post(
            "/login",
            data={"email": USER_EMAIL, "password": USER_PASSWORD},
            follow_redirects=False
        )
        assert login.status_code == 303
        assert login.headers["location"] == "/dashboard"
        assert client.get("/suppliers", follow_redirects=False).status_code == 200

        logout = client.post("/logout", follow_redirects=False)
        assert logout.headers["location"] == "/"
        assert client.get("/suppliers", follow_redirects=False).status_code == 303

    def test_failed_login_goes_back_with_error(self, client, user):
        response = client.post(
            "/login",
            data={"email": USER_EMAIL, "password": "wrong"},
            headers={"referer": "/login"},
            follow_redirects=False
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/login"

        page = client.get("/login", headers={"X-Inertia": "true"}).json()
        assert page["component"] == "auth/login"
        assert page["props"]["errors"] == {"email": ["These credentials do not match our records."]}

    def test_login_page_sends_logged_in_users_to_dashboard(self, web):
        response = web.get("/login", follow_redirects=False)

        assert response.headers["location"] == "/dashboard"
