import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db


def _mk_user(username="client", password="pass", **extra):
    User = get_user_model()
    return User.objects.create_user(username=username, password=password, **extra)


class TestLogin:

    def test_login_returns_token_and_status(self):
        _mk_user(status="approved", name="Acme Ltd")
        resp = APIClient().post("/api/auth/login/", {"username": "client", "password": "pass"}, format="json")
        assert resp.status_code == 200
        body = resp.json()
        assert body["token"]
        assert body["status"] == "approved"
        assert body["role"] == "user"
        assert body["name"] == "Acme Ltd"

    def test_token_authenticates_api_calls(self):
        _mk_user(status="approved")
        client = APIClient()
        token = client.post("/api/auth/login/", {"username": "client", "password": "pass"}, format="json").json()["token"]

        client.credentials(HTTP_AUTHORIZATION=f"Token {token}")
        assert client.get("/api/inventory/").status_code == 200

    def test_bad_credentials(self):
        _mk_user()
        resp = APIClient().post("/api/auth/login/", {"username": "client", "password": "nope"}, format="json")
        assert resp.status_code == 401

    def test_missing_fields(self):
        resp = APIClient().post("/api/auth/login/", {"username": "client"}, format="json")
        assert resp.status_code == 400

    def test_deleted_account(self):
        _mk_user(status="deleted")
        resp = APIClient().post("/api/auth/login/", {"username": "client", "password": "pass"}, format="json")
        assert resp.status_code == 403


class TestRegister:

    def test_register_creates_pending_client(self):
        resp = APIClient().post("/api/auth/register/", {
            "username": "newbie", "password": "secret123", "name": "New Co", "email": "n@example.com",
        }, format="json")
        assert resp.status_code == 201
        assert resp.json()["status"] == "pending"

        user = get_user_model().objects.get(username="newbie")
        assert user.check_password("secret123")
        assert not user.has_profile

    def test_duplicate_username(self):
        _mk_user(username="taken")
        resp = APIClient().post("/api/auth/register/", {"username": "taken", "password": "x"}, format="json")
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Username already exists"}


class TestUserModel:

    def test_has_profile_requires_approved_and_active(self):
        assert _mk_user("a", status="approved").has_profile
        assert not _mk_user("b", status="pending").has_profile
        assert not _mk_user("c", status="approved", is_active=False).has_profile

    def test_display_name_falls_back_to_username(self):
        assert _mk_user("plain").display_name == "plain"
        assert _mk_user("named", first_name="Ada", last_name="Lovelace").display_name == "Ada Lovelace"

    def test_create_test_users_command(self):
        call_command("create_test_users")
        User = get_user_model()
        assert User.objects.get(username="client_user").has_profile
        assert User.objects.get(username="pending_user").status == "pending"


class TestMe:

    def test_me_reports_profile(self):
        user = _mk_user(status="pending", name="Acme Ltd")
        client = APIClient()
        client.force_authenticate(user=user)

        resp = client.get("/api/auth/me/")
        assert resp.status_code == 200
        assert resp.json()["has_profile"] is False
        assert resp.json()["name"] == "Acme Ltd"

    def test_me_requires_login(self):
        assert APIClient().get("/api/auth/me/").status_code in (401, 403)
