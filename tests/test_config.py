import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from os_list.config import Settings
from os_list.domain.models import QueryParameters


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch("os_list.config.load_dotenv"):
            settings = Settings.from_env()

        self.assertEqual(settings.api_url, "https://api.github.com/graphql")
        self.assertEqual(settings.request_timeout, 60)
        self.assertEqual(settings.log_level, "WARNING")

    def test_reads_environment(self) -> None:
        env = {
            "GITHUB_GRAPHQL_URL": "https://ghe.example.com/api/graphql",
            "OS_LIST_REQUEST_TIMEOUT": "15",
            "OS_LIST_LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=True), patch("os_list.config.load_dotenv"):
            settings = Settings.from_env()

        self.assertEqual(settings.api_url, "https://ghe.example.com/api/graphql")
        self.assertEqual(settings.request_timeout, 15.0)
        self.assertEqual(settings.log_level, "debug")

    def test_token_is_not_a_setting(self) -> None:
        with patch.dict(os.environ, {"GITHUB_TOKEN": "ghp_secret"}, clear=True), patch("os_list.config.load_dotenv"):
            settings = Settings.from_env()

        self.assertNotIn("ghp_secret", settings.model_dump_json())


class TestQueryParameters(unittest.TestCase):
    def test_defaults(self) -> None:
        params = QueryParameters(owner="infinum")

        self.assertEqual(params.count, 10)
        self.assertIsNone(params.topic)
        self.assertIsNone(params.cursor)

    def test_rejects_blank_owner_and_non_positive_count(self) -> None:
        with self.assertRaises(ValidationError):
            QueryParameters(owner="")
        with self.assertRaises(ValidationError):
            QueryParameters(owner="   ")
        with self.assertRaises(ValidationError):
            QueryParameters(owner="infinum", count=0)
