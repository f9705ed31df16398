import os
import sys
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from fipctl.lib.core import config
from test_utils import config_env


class GlobalConfigPathTests(unittest.TestCase):
    def test_env_override_is_returned_even_if_missing(self) -> None:
        with config_env() as env:
            self.assertFalse(env.config_file.exists())
            self.assertEqual(config.global_config_path(), env.config_file.resolve())
            self.assertEqual(config.global_config_search_paths(), [env.config_file.resolve()])

    def test_search_order_without_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with unittest.mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": td}, clear=True):
                paths = config.global_config_search_paths()
        self.assertEqual(
            paths,
            [
                Path(td) / "fipctl" / "config.yml",
                Path(sys.prefix) / "etc" / "fipctl" / "config.yml",
                Path("/etc/fipctl/config.yml"),
            ],
        )

    def test_first_existing_candidate_wins(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            user_cfg = Path(td) / "fipctl" / "config.yml"
            user_cfg.parent.mkdir(parents=True)
            user_cfg.write_text("api:\n  host: tcp://a:1\n", encoding="utf-8")
            with unittest.mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": td}, clear=True):
                self.assertEqual(config.global_config_path(), user_cfg.resolve())


class ApiSettingsTests(unittest.TestCase):
    def test_defaults_without_config(self) -> None:
        with config_env():
            self.assertEqual(config.get_api_host(), config.DEFAULT_HOST)
            self.assertIsNone(config.get_api_version())
            self.assertEqual(config.get_api_timeout(), config.DEFAULT_TIMEOUT)

    def test_values_from_config_file(self) -> None:
        yaml_text = "api:\n  host: tcp://10.0.0.9:2375\n  version: '1.23'\n  timeout: 5\n"
        with config_env(yaml_text):
            self.assertEqual(config.get_api_host(), "tcp://10.0.0.9:2375")
            self.assertEqual(config.get_api_version(), "1.23")
            self.assertEqual(config.get_api_timeout(), 5.0)

    def test_env_overrides_config_file(self) -> None:
        yaml_text = "api:\n  host: tcp://10.0.0.9:2375\n  version: '1.23'\n"
        extra = {"FIPCTL_HOST": "unix:///run/hyper.sock", "FIPCTL_API_VERSION": "1.24"}
        with config_env(yaml_text, extra_env=extra):
            self.assertEqual(config.get_api_host(), "unix:///run/hyper.sock")
            self.assertEqual(config.get_api_version(), "1.24")

    def test_bad_timeout_falls_back_to_default(self) -> None:
        with config_env("api:\n  timeout: soon\n"):
            self.assertEqual(config.get_api_timeout(), config.DEFAULT_TIMEOUT)

    def test_non_dict_section_is_treated_as_empty(self) -> None:
        with config_env("api: oops\n"):
            self.assertEqual(config.get_global_section("api"), {})
            self.assertEqual(config.get_api_host(), config.DEFAULT_HOST)


class StateRootTests(unittest.TestCase):
    def test_env_wins(self) -> None:
        with config_env("paths:\n  state_root: /nowhere\n") as env:
            self.assertEqual(config.state_root(), env.state_dir.resolve())

    def test_config_value_used_without_env(self) -> None:
        with config_env() as env:
            target = env.base / "custom-state"
            env.config_file.write_text(f"paths:\n  state_root: {target}\n", encoding="utf-8")
            with unittest.mock.patch.dict(os.environ):
                del os.environ["FIPCTL_STATE_DIR"]
                self.assertEqual(config.state_root(), target.resolve())


class ConfigDirTests(unittest.TestCase):
    def test_config_dir_candidate_comes_first(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = Path(td) / "config.yml"
            cfg.write_text("api:\n  host: tcp://from-dir:2375\n", encoding="utf-8")
            with unittest.mock.patch.dict(os.environ, {"FIPCTL_CONFIG_DIR": td}, clear=True):
                self.assertEqual(config.global_config_search_paths()[0], cfg.resolve())
                self.assertEqual(config.get_api_host(), "tcp://from-dir:2375")
