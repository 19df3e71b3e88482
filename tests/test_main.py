import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from releasebuilder import config
from releasebuilder.cli_logger import logger
from releasebuilder.main import cli

CI_VARS = (
    "INPUT_BUILD_COMMAND",
    "INPUT_ACCESS_TOKEN",
    "INPUT_COMMIT_NAME",
    "GITHUB_WORKSPACE",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_REPOSITORY",
    "GITHUB_SHA",
)

class TestMain(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        env_patcher = patch.dict(os.environ)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)
        for name in CI_VARS:
            os.environ.pop(name, None)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _write_manifest(self, scripts):
        with open(os.path.join(self.test_dir, "package.json"), "w") as f:
            json.dump({"name": "test", "scripts": scripts}, f)

    def _write_event(self, event_name, action):
        event_path = os.path.join(self.test_dir, "event.json")
        with open(event_path, "w") as f:
            json.dump({"action": action}, f)
        os.environ["GITHUB_EVENT_NAME"] = event_name
        os.environ["GITHUB_EVENT_PATH"] = event_path

    def test_plan(self):
        self._write_manifest({"build": "tsc"})
        os.makedirs(os.path.join(self.test_dir, ".github"))
        result = self.runner.invoke(cli, ["--path", self.test_dir, "plan"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.splitlines(), [
            "yarn install",
            "yarn build",
            "yarn install --production",
            "rm -rdf .github",
        ])

    def test_plan_stdout_holds_only_commands(self):
        self._write_manifest({"build": "tsc"})
        config.save_config({"inputs": {"commit_name": "Release Bot"}}, path=self.test_dir)
        result = self.runner.invoke(cli, ["--path", self.test_dir, "plan"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "yarn install\nyarn build\nyarn install --production\n")
        self.assertIn("Loading configuration from", result.stderr)

    def test_detect_stdout_holds_only_script_name(self):
        self._write_manifest({"build": "tsc"})
        result = self.runner.invoke(cli, ["--path", self.test_dir, "detect"])
        self.assertEqual(result.stdout, "build\n")
        self.assertIn("Detected build script 'build': tsc", result.stderr)

    def test_plan_with_build_command_input(self):
        self._write_manifest({"build": "tsc"})
        os.environ["INPUT_BUILD_COMMAND"] = "test"
        result = self.runner.invoke(cli, ["--path", self.test_dir, "plan"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.splitlines(), [
            "yarn install",
            "test",
            "yarn build",
            "yarn install --production",
        ])

    def test_plan_with_build_command_option(self):
        os.environ["INPUT_BUILD_COMMAND"] = "ignored"
        result = self.runner.invoke(cli, ["--path", self.test_dir, "plan", "--build-command", "yarn install && yarn build"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.splitlines(), [
            "yarn install",
            "yarn build",
            "yarn install --production",
        ])

    def test_plan_with_build_command_from_config(self):
        config.save_config({"inputs": {"build_command": "yarn lint"}}, path=self.test_dir)
        result = self.runner.invoke(cli, ["--path", self.test_dir, "plan"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.splitlines(), [
            "yarn install",
            "yarn lint",
            "yarn install --production",
        ])

    def test_plan_uses_workspace(self):
        self._write_manifest({"prod": "webpack"})
        os.environ["GITHUB_WORKSPACE"] = self.test_dir
        result = self.runner.invoke(cli, ["plan"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("yarn prod", result.stdout.splitlines())

    def test_detect(self):
        self._write_manifest({"production": "webpack", "prod": "webpack"})
        result = self.runner.invoke(cli, ["--path", self.test_dir, "detect"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "production\n")

    @patch.object(logger, "warning")
    def test_detect_nothing(self, mock_warning):
        self._write_manifest({"test": "jest"})
        result = self.runner.invoke(cli, ["--path", self.test_dir, "detect"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "")
        mock_warning.assert_called_once_with("No build script found in package.json.")

    @patch.object(logger, "warning")
    def test_detect_without_manifest(self, mock_warning):
        result = self.runner.invoke(cli, ["--path", self.test_dir, "detect"])
        self.assertEqual(result.exit_code, 0)
        mock_warning.assert_called_once()

    @patch("releasebuilder.commands.run.run_commands", return_value=True)
    def test_run(self, mock_run_commands):
        self._write_manifest({"build": "tsc"})
        result = self.runner.invoke(cli, ["--path", self.test_dir, "run"])
        self.assertEqual(result.exit_code, 0)
        mock_run_commands.assert_called_once_with(
            ["yarn install", "yarn build", "yarn install --production"], cwd=self.test_dir
        )

    @patch("releasebuilder.commands.run.run_commands", return_value=False)
    def test_run_failure(self, mock_run_commands):
        result = self.runner.invoke(cli, ["--path", self.test_dir, "run"])
        self.assertEqual(result.exit_code, 1)

    def test_check_event_target(self):
        self._write_event("release", "published")
        result = self.runner.invoke(cli, ["check-event"])
        self.assertEqual(result.exit_code, 0)

    def test_check_event_not_target(self):
        self._write_event("release", "created")
        result = self.runner.invoke(cli, ["check-event"])
        self.assertEqual(result.exit_code, 1)

    def test_context(self):
        os.environ["GITHUB_REPOSITORY"] = "Hello/World"
        os.environ["INPUT_ACCESS_TOKEN"] = "secret"
        os.environ["INPUT_COMMIT_NAME"] = "Release Bot"
        result = self.runner.invoke(cli, ["--path", self.test_dir, "context"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Hello/World", result.stdout)
        self.assertIn("https://***@github.com/Hello/World.git", result.stdout)
        self.assertNotIn("secret", result.stdout)
        self.assertIn("Release Bot", result.stdout)

    @patch("releasebuilder.commands.remote_config.github.get_repository_config", return_value={"branch": "gh-pages"})
    def test_remote_config(self, mock_get_config):
        os.environ["GITHUB_REPOSITORY"] = "Hello/World"
        os.environ["INPUT_ACCESS_TOKEN"] = "secret"
        result = self.runner.invoke(cli, ["--path", self.test_dir, "remote-config", "--file", "release.yml"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.stdout), {"branch": "gh-pages"})
        context = mock_get_config.call_args[0][0]
        self.assertEqual(context.repo, {"owner": "Hello", "repo": "World"})
        self.assertEqual(mock_get_config.call_args[1], {"path": "release.yml", "token": "secret"})

    def test_config_view_not_found(self):
        with patch.object(logger, "error") as mock_error:
            self.runner.invoke(cli, ["--path", self.test_dir, "config", "view"])
        self.assertIn("Error: No releasebuilder.toml found.", mock_error.call_args[0][0])

    def test_config_view(self):
        config.save_config({"inputs": {"commit_name": "Release Bot"}}, path=self.test_dir)
        result = self.runner.invoke(cli, ["--path", self.test_dir, "config", "view"])
        with open(os.path.join(self.test_dir, config.CONFIG_FILE), "r") as f:
            self.assertEqual(result.stdout.strip(), f.read().strip())

if __name__ == "__main__":
    unittest.main()
