"""Tests for /auth routes."""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from api.tests.support import ApiTestCase, PASSWORD
from api.security import verify_token


class TestRegisterRoute(ApiTestCase):

    def test_register_returns_token_for_username(self):
        token = self.register("alice")

        self.assertEqual(verify_token(token), "alice")
        self.assertIsNotNone(self.users.get_by_username("alice").last_login_at)

    def test_register_response_never_contains_password(self):
        response = self.client.post("/auth/register", json={
            "username": "alice", "password": PASSWORD,
            "first_name": "Alice", "last_name": "Smith", "phone": "555-0100",
        })
        self.assertEqual(set(response.json()), {"token"})
        self.assertNotIn(PASSWORD, response.text)

    def test_register_duplicate_conflict(self):
        self.register("alice")
        response = self.client.post("/auth/register", json={
            "username": "alice", "password": PASSWORD,
            "first_name": "Alice", "last_name": "Smith", "phone": "555-0100",
        })
        self.assertEqual(response.status_code, 409)

    def test_register_weak_password(self):
        response = self.client.post("/auth/register", json={
            "username": "alice", "password": "weak",
            "first_name": "Alice", "last_name": "Smith", "phone": "555-0100",
        })
        self.assertEqual(response.status_code, 400)
        self.assertIn("Password", response.json()["detail"])

    def test_register_overlong_password(self):
        response = self.client.post("/auth/register", json={
            "username": "alice", "password": "Aa1" * 30,
            "first_name": "Alice", "last_name": "Smith", "phone": "555-0100",
        })
        self.assertEqual(response.status_code, 400)

    def test_register_missing_fields(self):
        response = self.client.post("/auth/register", json={"username": "alice"})
        self.assertEqual(response.status_code, 422)


class TestLoginRoute(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.register("alice")

    def test_login_success(self):
        response = self.client.post("/auth/login", json={"username": "alice", "password": PASSWORD})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(verify_token(response.json()["token"]), "alice")

    def test_login_with_overlong_password_is_unauthorized(self):
        response = self.client.post("/auth/login", json={"username": "alice", "password": "A1a" * 30})
        self.assertEqual(response.status_code, 401)

    def test_login_failures_are_indistinguishable(self):
        wrong = self.client.post("/auth/login", json={"username": "alice", "password": "Wrong1234"})
        unknown = self.client.post("/auth/login", json={"username": "nobody", "password": PASSWORD})

        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json(), unknown.json())


if __name__ == '__main__':
    unittest.main()
