import logging
import os
import unittest
from unittest import mock

from ledger_pro.config import constants
from ledger_pro.config.settings import Settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.api_base_url, constants.DEFAULT_API_BASE_URL)
        self.assertEqual(settings.request_timeout, constants.DEFAULT_REQUEST_TIMEOUT)
        self.assertEqual(settings.state_dir, constants.DEFAULT_STATE_DIR)
        self.assertEqual(settings.auth_username, "ameen")
        self.assertEqual(settings.auth_password, "ameen@123")
        self.assertEqual(settings.log_level_value, logging.INFO)

    def test_overrides(self):
        env = {
            "LEDGER_PRO_API_BASE_URL": "http://localhost:5000/",
            "LEDGER_PRO_REQUEST_TIMEOUT": "2.5",
            "LEDGER_PRO_STATE_DIR": "/tmp/ledger-state",
            "LEDGER_PRO_LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.api_base_url, "http://localhost:5000")
        self.assertEqual(settings.request_timeout, 2.5)
        self.assertEqual(settings.state_dir, "/tmp/ledger-state")
        self.assertEqual(settings.log_level_value, logging.DEBUG)

    def test_state_dir_alias(self):
        env = {"LEDGER_PRO_STATE_DIR": "", "LEDGER_PRO_STORAGE_DIR": "/tmp/alias"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.state_dir, "/tmp/alias")

    def test_invalid_values_fall_back(self):
        env = {"LEDGER_PRO_REQUEST_TIMEOUT": "soon", "LEDGER_PRO_LOG_LEVEL": "loud"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.request_timeout, constants.DEFAULT_REQUEST_TIMEOUT)
        self.assertEqual(settings.log_level, constants.DEFAULT_LOG_LEVEL)


if __name__ == "__main__":
    unittest.main()
