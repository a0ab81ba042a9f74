# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Unit test for configuration and logging helpers """
import logging
import os
import unittest
from unittest.mock import patch

from bookcatalog.app import create_app
from bookcatalog.ratings_client import RatingsClient
from bookcatalog.utils.config import Config
from bookcatalog.utils.log import log_exec_time


class TestConfig(unittest.TestCase):
    """Test cases for Config."""

    def setUp(self):
        self.saved = Config.constants()

    def tearDown(self):
        for name, value in self.saved.items():
            Config.set_value(name, value)

    def test_get_and_set_value(self):
        Config.set_value("RATINGS_TIMEOUT_SECONDS", 1.5)
        self.assertEqual(Config.get_value("RATINGS_TIMEOUT_SECONDS"), 1.5)

    def test_unknown_option_raises(self):
        with self.assertRaises(AttributeError):
            Config.set_value("NOT_A_SETTING", 1)
        with self.assertRaises(AttributeError):
            Config.get_value("NOT_A_SETTING")

    def test_app_reads_prefixed_environment(self):
        """BOOKCATALOG_* variables are parsed into typed app settings."""
        environ = {
            "BOOKCATALOG_RATINGS_SERVICE_URL": "http://ratings:5001",
            "BOOKCATALOG_RATINGS_TIMEOUT_SECONDS": "0.5",
            "BOOKCATALOG_CREATE_TABLES_ON_STARTUP": "false",
        }
        with patch.dict(os.environ, environ):
            app = create_app({
                "TESTING": True,
                "SQLALCHEMY_DATABASE_URI": "sqlite://",
                "LOG_LEVEL": "WARNING",
            })

        self.assertEqual(app.config["RATINGS_SERVICE_URL"], "http://ratings:5001")
        self.assertEqual(app.config["RATINGS_TIMEOUT_SECONDS"], 0.5)
        self.assertIs(app.config["CREATE_TABLES_ON_STARTUP"], False)
        self.assertEqual(app.extensions["ratings_client"].timeout, 0.5)

    def test_overrides_win_over_environment(self):
        with patch.dict(os.environ, {"BOOKCATALOG_RATINGS_TIMEOUT_SECONDS": "0.5"}):
            app = create_app({
                "TESTING": True,
                "SQLALCHEMY_DATABASE_URI": "sqlite://",
                "RATINGS_TIMEOUT_SECONDS": 2.0,
                "LOG_LEVEL": "WARNING",
            })

        self.assertEqual(app.extensions["ratings_client"].timeout, 2.0)

    def test_log_all_constants_masks_secret(self):
        Config.set_value("SECRET_KEY", "hunter2")

        text = Config.log_all_constants()

        self.assertIn("RATINGS_SERVICE_URL: http://localhost:5001", text)
        self.assertNotIn("hunter2", text)

    def test_app_builds_ratings_client_from_config(self):
        app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "RATINGS_SERVICE_URL": "http://ratings.internal:5001/",
            "RATINGS_TIMEOUT_SECONDS": 2.0,
            "LOG_LEVEL": "WARNING",
        })

        client = app.extensions["ratings_client"]
        self.assertIsInstance(client, RatingsClient)
        self.assertEqual(client.base_url, "http://ratings.internal:5001")
        self.assertEqual(client.timeout, 2.0)

    def test_init_db_command(self):
        app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "CREATE_TABLES_ON_STARTUP": False,
            "LOG_LEVEL": "WARNING",
        })

        result = app.test_cli_runner().invoke(args=["init-db"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Initialized the book store.", result.output)


class TestLogExecTime(unittest.TestCase):
    """Test cases for the log_exec_time decorator."""

    def test_logs_duration_and_returns_result(self):
        logger = logging.getLogger("bookcatalog.tests.timing")

        @log_exec_time(logger)
        def add(a, b):
            return a + b

        with self.assertLogs(logger, level="DEBUG") as logs:
            self.assertEqual(add(2, 3), 5)

        self.assertIn("[add] Execution time:", logs.output[0])

    def test_logs_even_when_function_raises(self):
        logger = logging.getLogger("bookcatalog.tests.timing")

        @log_exec_time(logger)
        def fail():
            raise RuntimeError("boom")

        with self.assertLogs(logger, level="DEBUG"):
            with self.assertRaises(RuntimeError):
                fail()


if __name__ == "__main__":
    unittest.main()
