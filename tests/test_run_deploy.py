import os
import tempfile
import unittest
from functools import partial
from unittest.mock import patch

from deploy_action.config_loader import AppConfig
from run_deploy import input_parser, main
from tests.constants import *
from tests.helper import *


class TestRunDeploy(unittest.TestCase):
    def setUp(self):
        AppConfig.reset()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.environ = read_test_data(ACTION_INPUTS)
        self.environ["DEPLOYMENT_URI"] = BASE_URL
        self.environ["GITHUB_OUTPUT"] = os.path.join(self.tmp_dir.name, "github_output")
        self.sleep = RecordingSleep()

    def tearDown(self):
        self.tmp_dir.cleanup()
        AppConfig.reset()

    def run_main(self, argv, **request_kwargs):
        with patch.dict(os.environ, self.environ, clear=True), \
                patch("run_deploy.setup_logging"), patch("run_deploy.load_dotenv"), \
                patch("time.sleep", new=self.sleep), patch("requests.Session.request") as mq:
            mq.side_effect = partial(mock_request, **request_kwargs)
            return main(argv), mq

    def test_input_parser_defaults(self):
        args = input_parser([])
        self.assertEqual(args.execution_mode, "execute")
        self.assertIsNone(args.config)

    def test_input_parser_rejects_unknown_mode(self):
        with self.assertRaises(SystemExit):
            input_parser(["--execution-mode", "later"])

    def test_successful_run(self):
        return_code, mq = self.run_main([], location=LOCATION, statuses=[ACTIVE])
        self.assertEqual(return_code, 0)
        self.assertEqual(mq.call_count, 2)

    def test_timeout_exit_code(self):
        with self.assertLogs(level='ERROR') as cml:
            return_code, _ = self.run_main([], location=LOCATION, statuses=[PENDING] * 15)
        self.assertEqual(return_code, 1)
        self.assertTrue(any(TIMEOUT_ERROR in line for line in cml.output))

    def test_preview_run(self):
        return_code, mq = self.run_main(["--execution-mode", "preview"])
        self.assertEqual(return_code, 0)
        mq.assert_not_called()

    def test_alternate_config(self):
        config_file = os.path.join(self.tmp_dir.name, "config.yaml")
        with open(config_file, "w") as f:
            f.write("poller:\n  max_attempts: 2\n")
        return_code, mq = self.run_main(["--config", config_file], location=LOCATION, statuses=[PENDING] * 5)
        self.assertEqual(return_code, 1)
        self.assertEqual(self.sleep.delays, [1, 2])


if __name__ == "__main__":
    unittest.main()
