"""Unit tests for auth_service module."""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import AuthenticationError, DuplicateError
from services import auth_service


class TestSignUp(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()

    def test_sign_up_registers_and_stamps_login(self):
        user = auth_service.sign_up(self.repo, 'alice', 'Password1', 'Alice', 'Smith', '555-0100')

        self.assertEqual(user.username, 'alice')
        self.assertIsNotNone(user.last_login_at)
        self.assertIsNotNone(self.repo.get_by_username('alice').last_login_at)

    def test_sign_up_duplicate(self):
        auth_service.sign_up(self.repo, 'alice', 'Password1', 'Alice', 'Smith', '555-0100')
        with self.assertRaises(DuplicateError):
            auth_service.sign_up(self.repo, 'alice', 'Password2', 'Alice', 'Smith', '555-0100')


class TestLogIn(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()
        self.registered = auth_service.sign_up(self.repo, 'alice', 'Password1', 'Alice', 'Smith', '555-0100')
        self.first_login = self.registered.last_login_at

    def test_log_in_success_updates_last_login(self):
        user = auth_service.log_in(self.repo, 'alice', 'Password1')

        self.assertEqual(user.username, 'alice')
        self.assertGreaterEqual(user.last_login_at, self.first_login)

    def test_wrong_password_and_unknown_user_look_the_same(self):
        with self.assertRaises(AuthenticationError) as wrong:
            auth_service.log_in(self.repo, 'alice', 'Wrong1234')
        with self.assertRaises(AuthenticationError) as unknown:
            auth_service.log_in(self.repo, 'nobody', 'Password1')

        self.assertEqual(str(wrong.exception), str(unknown.exception))


if __name__ == '__main__':
    unittest.main()
