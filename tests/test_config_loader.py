import os
import tempfile
import unittest

from deploy_action import constants
from deploy_action.config_loader import AppConfig


class TestAppConfig(unittest.TestCase):
    def setUp(self):
        AppConfig.reset()

    def tearDown(self):
        AppConfig.reset()

    def test_packaged_defaults(self):
        config = AppConfig()
        self.assertEqual(config.get(constants.POLLER_MAX_ATTEMPTS), 15)
        self.assertEqual(config.get(constants.POLLER_SUCCESS_STATUS), "active")
        self.assertEqual(config.get(constants.ENV_VARIABLE_PREFIX), "TFSO_")
        self.assertEqual(config.get(constants.DEFAULT_DEPLOYMENT_URI), constants.FALLBACK_DEPLOYMENT_URI)

    def test_singleton(self):
        self.assertIs(AppConfig(), AppConfig())

    def test_missing_key_returns_default(self):
        config = AppConfig()
        self.assertIsNone(config.get("poller.unknown"))
        self.assertEqual(config.get("poller.max_attempts.deeper", "fallback"), "fallback")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            AppConfig("/does/not/exist/config.yaml")

    def test_alternate_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_file = os.path.join(tmp_dir, "config.yaml")
            with open(config_file, "w") as f:
                f.write("http:\n  verify_ssl: false\n")
            config = AppConfig(config_file)
            self.assertFalse(config.get(constants.HTTP_VERIFY_SSL, True))
