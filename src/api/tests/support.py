"""Shared TestClient setup for route tests: fake repositories and token helpers."""

import os
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from fastapi.testclient import TestClient
from api.main import app
from api.dependencies import get_listing_policy, get_message_repo, get_user_repo
from adapter.fake.message_repository import FakeMessageRepository
from adapter.fake.user_repository import FakeUserRepository
from services.access_guard import ListingPolicy

PASSWORD = "Password1"


class ApiTestCase(unittest.TestCase):
    """Route test base: in-memory repositories wired through dependency overrides."""

    policy = ListingPolicy.OPEN

    def setUp(self):
        self.client = TestClient(app)
        self.users = FakeUserRepository()
        self.messages = FakeMessageRepository()
        app.dependency_overrides[get_user_repo] = lambda: self.users
        app.dependency_overrides[get_message_repo] = lambda: self.messages
        app.dependency_overrides[get_listing_policy] = lambda: self.policy

    def tearDown(self):
        app.dependency_overrides.clear()

    def register(self, username: str, password: str = PASSWORD) -> str:
        response = self.client.post("/auth/register", json={
            "username": username,
            "password": password,
            "first_name": username.title(),
            "last_name": "Tester",
            "phone": "555-0100",
        })
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["token"]

    @staticmethod
    def auth(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    def send(self, token: str, to_username: str, body: str = "hi") -> dict:
        response = self.client.post(
            "/messages",
            json={"to_username": to_username, "body": body},
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["message"]
