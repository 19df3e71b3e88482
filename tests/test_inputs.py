import os
import unittest
from unittest.mock import patch
from releasebuilder import inputs
from releasebuilder.constants import DEFAULT_COMMIT_EMAIL, DEFAULT_COMMIT_MESSAGE, DEFAULT_COMMIT_NAME

INPUT_VARS = (
    "INPUT_BUILD_COMMAND",
    "INPUT_COMMIT_MESSAGE",
    "INPUT_COMMIT_NAME",
    "INPUT_COMMIT_EMAIL",
    "INPUT_ACCESS_TOKEN",
    "GITHUB_WORKSPACE",
)

class TestInputs(unittest.TestCase):

    def setUp(self):
        patcher = patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        for name in INPUT_VARS:
            os.environ.pop(name, None)

    def test_get_input_from_env(self):
        os.environ["INPUT_BUILD_COMMAND"] = "  yarn build  "
        self.assertEqual(inputs.get_input("BUILD_COMMAND"), "yarn build")
        self.assertEqual(inputs.get_input("build command"), "yarn build")

    def test_get_input_explicit_environ(self):
        self.assertEqual(inputs.get_input("COMMIT_NAME", environ={"INPUT_COMMIT_NAME": "bot"}), "bot")

    def test_get_input_missing(self):
        self.assertEqual(inputs.get_input("BUILD_COMMAND"), "")

    def test_get_input_config_fallback(self):
        conf = {"inputs": {"build_command": "yarn lint"}}
        self.assertEqual(inputs.get_build_command(conf), "yarn lint")
        os.environ["INPUT_BUILD_COMMAND"] = "yarn test"
        self.assertEqual(inputs.get_build_command(conf), "yarn test")

    def test_get_commit_message(self):
        self.assertEqual(inputs.get_commit_message(), DEFAULT_COMMIT_MESSAGE)
        os.environ["INPUT_COMMIT_MESSAGE"] = "test"
        self.assertEqual(inputs.get_commit_message(), "test")

    def test_get_commit_name(self):
        self.assertEqual(inputs.get_commit_name(), DEFAULT_COMMIT_NAME)
        os.environ["INPUT_COMMIT_NAME"] = "test"
        self.assertEqual(inputs.get_commit_name(), "test")

    def test_get_commit_email(self):
        self.assertEqual(inputs.get_commit_email(), DEFAULT_COMMIT_EMAIL)
        os.environ["INPUT_COMMIT_EMAIL"] = "test"
        self.assertEqual(inputs.get_commit_email(), "test")

    def test_get_commit_email_from_config(self):
        self.assertEqual(inputs.get_commit_email({"inputs": {"commit_email": "ci@example.com"}}), "ci@example.com")

    def test_get_workspace(self):
        self.assertEqual(inputs.get_workspace(), "")
        os.environ["GITHUB_WORKSPACE"] = "test"
        self.assertEqual(inputs.get_workspace(), "test")

if __name__ == "__main__":
    unittest.main()
