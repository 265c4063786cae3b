"""Tests for CORS origin parsing and preflight handling."""

import unittest

from fastapi.testclient import TestClient

from api.main import app, parse_cors_origins


class TestParseCorsOrigins(unittest.TestCase):
    """Test CORS_ORIGINS parsing."""

    def test_wildcard(self):
        self.assertEqual(parse_cors_origins("*"), ["*"])

    def test_blank_means_any_origin(self):
        self.assertEqual(parse_cors_origins(" , "), ["*"])

    def test_comma_separated_list(self):
        """Whitespace and empty items are dropped."""
        self.assertEqual(
            parse_cors_origins("https://a.example.com, https://b.example.com,"),
            ["https://a.example.com", "https://b.example.com"],
        )


class TestPreflight(unittest.TestCase):
    """Test preflight requests against the default wildcard configuration."""

    def setUp(self):
        self.client = TestClient(app)

    def test_post_allowed(self):
        response = self.client.options("/translate", headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["access-control-allow-origin"], "*")
        self.assertNotIn("access-control-allow-credentials", response.headers)

    def test_delete_rejected(self):
        """Only the methods the API serves pass preflight."""
        response = self.client.options("/lookup", headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "DELETE",
        })
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
