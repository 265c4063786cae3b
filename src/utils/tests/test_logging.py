"""Tests for the structured JSON log formatter."""

import json
import logging
import sys
import unittest

from utils.logging import JSONFormatter


class TestJSONFormatter(unittest.TestCase):
    """Test JSON log records."""

    def _record(self, msg, extra=None, exc_info=None):
        record = logging.LogRecord(
            name="services.lookup_service", level=logging.INFO, pathname=__file__,
            lineno=1, msg=msg, args=(), exc_info=exc_info,
        )
        for key, value in (extra or {}).items():
            setattr(record, key, value)
        return record

    def test_core_fields_and_extra(self):
        """Test timestamp, level, logger, message and extra fields."""
        output = json.loads(JSONFormatter().format(
            self._record("Lookup started", extra={"word": "美しい", "etymology": False}),
        ))

        self.assertEqual(output["level"], "INFO")
        self.assertEqual(output["logger"], "services.lookup_service")
        self.assertEqual(output["message"], "Lookup started")
        self.assertEqual(output["word"], "美しい")
        self.assertFalse(output["etymology"])
        self.assertTrue(output["timestamp"].endswith("Z"))
        self.assertNotIn("pathname", output)

    def test_non_ascii_kept_readable(self):
        line = JSONFormatter().format(self._record("x", extra={"word": "自由"}))
        self.assertIn("自由", line)

    def test_exception_included(self):
        """Test exc_info is rendered into the record."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = self._record("failed", exc_info=sys.exc_info())

        output = json.loads(JSONFormatter().format(record))
        self.assertIn("RuntimeError: boom", output["exception"])

    def test_unserializable_extra_stringified(self):
        output = json.loads(JSONFormatter().format(self._record("x", extra={"ids": {"a"}})))
        self.assertEqual(output["ids"], "{'a'}")


if __name__ == "__main__":
    unittest.main()
