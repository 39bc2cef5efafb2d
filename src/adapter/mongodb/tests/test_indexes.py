"""Tests for startup index setup."""

import unittest
from unittest.mock import MagicMock
import sys
from pathlib import Path
from pymongo.errors import OperationFailure

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from adapter.mongodb import MESSAGES_COLLECTION_NAME, USERS_COLLECTION_NAME
from adapter.mongodb.indexes import ensure_all_indexes


class TestEnsureAllIndexes(unittest.TestCase):

    def setUp(self):
        self.collections = {}
        self.db = MagicMock()
        self.db.__getitem__.side_effect = lambda name: self.collections.setdefault(name, MagicMock())

    def test_creates_mailbox_indexes_only(self):
        self.assertTrue(ensure_all_indexes(self.db))

        created = [c[1]['name'] for c in self.collections[MESSAGES_COLLECTION_NAME].create_index.call_args_list]
        self.assertEqual(created, ['idx_messages_from', 'idx_messages_to'])
        self.assertNotIn(USERS_COLLECTION_NAME, self.collections)

    def test_failure_reported(self):
        messages = self.collections.setdefault(MESSAGES_COLLECTION_NAME, MagicMock())
        messages.create_index.side_effect = OperationFailure("not authorized")

        self.assertFalse(ensure_all_indexes(self.db))


if __name__ == '__main__':
    unittest.main()
