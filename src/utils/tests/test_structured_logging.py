"""Tests for the JSON log formatter."""

import json
import logging
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from utils.logging import REDACTED, JSONFormatter


def _record(msg="Message sent", **extra) -> logging.LogRecord:
    record = logging.LogRecord("services.message_service", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):

    def setUp(self):
        self.formatter = JSONFormatter()

    def test_core_fields(self):
        data = json.loads(self.formatter.format(_record()))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "services.message_service")
        self.assertEqual(data["message"], "Message sent")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_extra_fields_included(self):
        data = json.loads(self.formatter.format(_record(messageId=7, toUsername="bob")))

        self.assertEqual(data["messageId"], 7)
        self.assertEqual(data["toUsername"], "bob")

    def test_sensitive_fields_redacted(self):
        data = json.loads(self.formatter.format(_record(password="Password1", token="abc.def")))

        self.assertEqual(data["password"], REDACTED)
        self.assertEqual(data["token"], REDACTED)

    def test_non_json_values_stringified(self):
        from datetime import datetime, timezone
        stamp = datetime(2026, 1, 1, tzinfo=timezone.utc)

        data = json.loads(self.formatter.format(_record(readAt=stamp)))

        self.assertEqual(data["readAt"], str(stamp))


if __name__ == '__main__':
    unittest.main()
