import sys
import unittest
import unittest.mock
from contextlib import redirect_stdout
from io import StringIO

from fipctl.cli.main import main
from test_utils import config_env


class CliConfigOutputTests(unittest.TestCase):
    def _run_config(self) -> str:
        buffer = StringIO()
        with (
            unittest.mock.patch.object(sys, "argv", ["fip", "config"]),
            unittest.mock.patch("fipctl.cli.commands.info._supports_color", return_value=False),
            redirect_stdout(buffer),
        ):
            main()
        return buffer.getvalue()

    def test_config_shows_resolved_endpoint(self) -> None:
        yaml_text = "api:\n  host: tcp://10.0.0.9:2375\n  version: '1.23'\n  timeout: 12\n"
        with config_env(yaml_text) as env:
            output = self._run_config()

        self.assertIn(f"- Global config file: {env.config_file.resolve()} (exists: yes)", output)
        self.assertIn("- Host: tcp://10.0.0.9:2375", output)
        self.assertIn("- Version: 1.23", output)
        self.assertIn("- Timeout: 12s", output)
        self.assertIn(f"- State root: {env.state_dir.resolve()} (exists: no)", output)
        self.assertIn(f"- FIPCTL_STATE_DIR={env.state_dir}", output)

    def test_config_without_file_uses_defaults(self) -> None:
        with config_env(extra_env={"FIPCTL_HOST": "unix:///run/hyper.sock"}):
            output = self._run_config()

        self.assertIn("(exists: no)", output)
        self.assertIn("- Host: unix:///run/hyper.sock", output)
        self.assertIn("- Version: (unversioned)", output)
        self.assertIn("- Timeout: 30s", output)
        self.assertIn("- FIPCTL_HOST=unix:///run/hyper.sock", output)

    def test_config_does_not_contact_daemon(self) -> None:
        with (
            config_env(),
            unittest.mock.patch("fipctl.cli.commands.fip._client") as mock_client,
        ):
            self._run_config()
        mock_client.assert_not_called()
