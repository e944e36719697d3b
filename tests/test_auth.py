"""Tests for tokens, password hashing and the auth API."""

import unittest

import pytest
from fastapi.testclient import TestClient

from backoffice.api import create_app
from backoffice.auth.context import AuthorizationContext, Role, UserContext
from backoffice.auth.passwords import hash_password, verify_password
from backoffice.auth.tokens import create_token, decode_token
from backoffice.db import reset_db
from backoffice.db.repositories import user_repo
from backoffice.errors import AuthenticationError, ConflictError, ValidationError


def test_token_round_trip():
    token = create_token(7, "alice", "staff")
    ctx = decode_token(token)
    assert ctx == UserContext(user_id=7, username="alice", role="staff")
    assert isinstance(ctx, AuthorizationContext)


def test_expired_token_rejected():
    token = create_token(1, "bob", "admin", minutes=-1)
    with pytest.raises(AuthenticationError, match="expired"):
        decode_token(token)


def test_wrong_secret_rejected():
    token = create_token(1, "bob", "admin", secret="other-secret")
    with pytest.raises(AuthenticationError):
        decode_token(token)


def test_has_role():
    ctx = UserContext(user_id=1, username="a", role="Admin ")
    assert ctx.has_role(Role.ADMIN)
    assert ctx.has_role("admin")
    assert not ctx.has_role(Role.STAFF)


def test_password_hashing():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


class TestUserRepo(unittest.TestCase):
    def setUp(self):
        reset_db()

    def test_create_and_authenticate(self):
        user = user_repo.create_user(" carol ", "pw")
        self.assertEqual(user["username"], "carol")
        self.assertEqual(user["role"], "staff")
        self.assertEqual(user_repo.authenticate("carol", "pw")["id"], user["id"])
        with self.assertRaises(AuthenticationError):
            user_repo.authenticate("carol", "nope")
        with self.assertRaises(AuthenticationError):
            user_repo.authenticate("nobody", "pw")

    def test_duplicate_and_bad_role(self):
        user_repo.create_user("dave", "pw")
        with self.assertRaises(ConflictError):
            user_repo.create_user("dave", "other")
        with self.assertRaises(ValidationError) as ctx:
            user_repo.create_user("erin", "pw", role="owner")
        self.assertEqual(ctx.exception.field, "role")


class TestAuthRoutes(unittest.TestCase):
    def setUp(self):
        reset_db()
        self.client = TestClient(create_app())

    def test_register_login_me(self):
        resp = self.client.post("/api/auth/register", json={"username": "frank", "password": "pw"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["user"]["role"], "staff")

        resp = self.client.post("/api/auth/login", json={"username": "frank", "password": "pw"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["token_type"], "bearer")

        me = self.client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
        self.assertEqual(me.json(), {"id": body["user"]["id"], "username": "frank", "role": "staff"})

    def test_me_for_unknown_user(self):
        token = create_token(4040, "ghost", "staff")
        resp = self.client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["code"], "NOT_FOUND")

    def test_bad_login(self):
        resp = self.client.post("/api/auth/login", json={"username": "ghost", "password": "pw"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["message"], "Invalid credentials.")

    def test_admin_registration_needs_admin(self):
        resp = self.client.post("/api/auth/register", json={"username": "x", "password": "pw", "role": "admin"})
        self.assertEqual(resp.status_code, 403)

        staff = user_repo.create_user("staffer", "pw")
        staff_token = create_token(staff["id"], "staffer", "staff")
        resp = self.client.post(
            "/api/auth/register",
            json={"username": "x", "password": "pw", "role": "admin"},
            headers={"Authorization": f"Bearer {staff_token}"},
        )
        self.assertEqual(resp.status_code, 403)

        admin = user_repo.create_user("root", "pw", Role.ADMIN)
        admin_token = create_token(admin["id"], "root", "admin")
        resp = self.client.post(
            "/api/auth/register",
            json={"username": "x", "password": "pw", "role": "admin"},
            headers={"Authorization": f"Bearer {admin_token}"},
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["user"]["role"], "admin")

    def test_inventory_admin_only_writes(self):
        user_repo.create_user("staffer", "pw")
        staff_token = self.client.post("/api/auth/login", json={"username": "staffer", "password": "pw"}).json()["token"]
        headers = {"Authorization": f"Bearer {staff_token}"}
        self.assertEqual(self.client.post("/api/inventory", json={"name": "Soap"}, headers=headers).status_code, 403)
        self.assertEqual(self.client.get("/api/inventory", headers=headers).json(), [])
