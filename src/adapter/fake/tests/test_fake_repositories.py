"""Unit tests for the in-memory repositories — verifies Port contract compliance."""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from adapter.fake.message_repository import FakeMessageRepository
from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError
from domain.model.message import Message
from domain.model.user import User


class TestFakeUserRepository(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()

    def _create(self, username='alice'):
        return self.repo.create(
            username=username,
            password_hash='hash',
            first_name='First',
            last_name='Last',
            phone='555-0100',
        )

    def test_create_and_get_by_username(self):
        created = self._create()

        user = self.repo.get_by_username('alice')
        self.assertIsInstance(user, User)
        self.assertEqual(user, created)
        self.assertIsNotNone(user.join_at)
        self.assertIsNone(user.last_login_at)

    def test_create_duplicate_raises(self):
        self._create()
        with self.assertRaises(DuplicateError):
            self._create()

    def test_get_by_username_returns_none_for_missing(self):
        self.assertIsNone(self.repo.get_by_username('nobody'))

    def test_get_many_skips_missing(self):
        self._create('alice')
        self._create('bob')

        found = self.repo.get_many(['alice', 'bob', 'carol'])
        self.assertEqual(set(found), {'alice', 'bob'})

    def test_list_all(self):
        self._create('alice')
        self._create('bob')
        self.assertEqual({u.username for u in self.repo.list_all()}, {'alice', 'bob'})

    def test_update_last_login(self):
        self._create()
        stamped = self.repo.update_last_login('alice')

        self.assertIsNotNone(stamped)
        self.assertEqual(self.repo.get_by_username('alice').last_login_at, stamped)

    def test_update_last_login_returns_none_for_missing(self):
        self.assertIsNone(self.repo.update_last_login('nobody'))


class TestFakeMessageRepository(unittest.TestCase):

    def setUp(self):
        self.repo = FakeMessageRepository()

    def test_create_assigns_increasing_ids(self):
        first = self.repo.create('alice', 'bob', 'one')
        second = self.repo.create('bob', 'alice', 'two')

        self.assertIsInstance(first, Message)
        self.assertLess(first.id, second.id)
        self.assertIsNone(first.read_at)
        self.assertIsNotNone(first.sent_at)

    def test_get_by_id(self):
        created = self.repo.create('alice', 'bob', 'hi')
        self.assertEqual(self.repo.get_by_id(created.id), created)
        self.assertIsNone(self.repo.get_by_id(999))

    def test_find_from_and_to(self):
        self.repo.create('alice', 'bob', 'a->b')
        self.repo.create('bob', 'alice', 'b->a')
        self.repo.create('alice', 'carol', 'a->c')

        self.assertEqual([m.body for m in self.repo.find_from('alice')], ['a->b', 'a->c'])
        self.assertEqual([m.body for m in self.repo.find_to('alice')], ['b->a'])
        self.assertEqual(self.repo.find_to('nobody'), [])

    def test_mark_read_sets_read_at_once(self):
        created = self.repo.create('alice', 'bob', 'hi')

        first = self.repo.mark_read(created.id)
        first_read_at = first.read_at
        second = self.repo.mark_read(created.id)

        self.assertIsNotNone(first_read_at)
        self.assertGreaterEqual(first_read_at, created.sent_at)
        self.assertEqual(second.read_at, first_read_at)

    def test_mark_read_returns_none_for_missing(self):
        self.assertIsNone(self.repo.mark_read(42))


if __name__ == '__main__':
    unittest.main()
