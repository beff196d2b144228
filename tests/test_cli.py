"""Tests for argument parsing, YAML config and the run() entry point."""

import os
from unittest.mock import patch

import pytest

from args import parse_args
from cli_config import apply_config_defaults, apply_runtime_overrides, load_config
from common.errors import ConfigurationError, TransportError
from constants import Constants, ExitCodes
from setupjava import resolve_versions, run
from conftest import make_cached_jdk


@pytest.fixture
def clean_java_env(monkeypatch, tmp_path):
    """Let run() export variables without leaking them into other tests."""
    for name in ("JAVA_HOME", "JAVA_HOME_11_X64", "JAVA_HOME_17_X64"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PATH", os.environ.get("PATH", ""))
    env_file = tmp_path / "github_env"
    path_file = tmp_path / "github_path"
    output_file = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_ENV", str(env_file))
    monkeypatch.setenv("GITHUB_PATH", str(path_file))
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    return {"env": env_file, "path": path_file, "output": output_file}


class TestArgs:

    def test_repeated_versions(self):
        args = parse_args(["-v", "11", "--java-version", "17", "-d", "Temurin"])
        assert args.JAVA_VERSION == ["11", "17"]
        assert args.DISTRIBUTION == "temurin"

    def test_defaults(self):
        args = parse_args([])
        assert args.JAVA_VERSION == []
        assert args.CHECK_LATEST is None
        assert args.JAVA_PACKAGE is None

    def test_loglevel_is_case_insensitive(self):
        assert parse_args(["--loglevel", "debug"]).LOG_LEVEL == "DEBUG"

    def test_unknown_distribution_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["-d", "openjdk"])


class TestConfig:

    def test_load_and_apply_defaults(self, tmp_path):
        path = tmp_path / "setup-java.yml"
        path.write_text(
            "java-version: [11, '17']\n"
            "distribution: zulu\n"
            "java-package: jre\n"
            "check-latest: true\n"
        )
        args = parse_args(["--config", str(path), "-p", "jdk"])

        apply_config_defaults(args, load_config(args.CONFIG))

        assert args.JAVA_VERSION == ["11", "17"]
        assert args.DISTRIBUTION == "zulu"
        assert args.JAVA_PACKAGE == "jdk"
        assert args.CHECK_LATEST is True

    def test_no_config_path(self):
        assert load_config(None) == {}

    def test_missing_config(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            load_config(str(tmp_path / "nope.yml"))

    def test_non_mapping_config(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- 11\n- 17\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_config(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("java-version: [11\n")
        with pytest.raises(ConfigurationError, match="Failed to load config"):
            load_config(str(path))

    def test_runtime_overrides(self, monkeypatch):
        monkeypatch.setattr(Constants, "HTTP_RETRY_MAX", 3)
        monkeypatch.setattr(Constants, "REQUEST_TIMEOUT", 30)
        apply_runtime_overrides({"http": {"retry_max": 0, "request_timeout": "60"}})
        assert Constants.HTTP_RETRY_MAX == 1
        assert Constants.REQUEST_TIMEOUT == 60

    def test_invalid_runtime_override(self, monkeypatch):
        monkeypatch.setattr(Constants, "HTTP_RETRY_MAX", 3)
        with pytest.raises(ConfigurationError, match="Invalid http setting"):
            apply_runtime_overrides({"http": {"retry_max": "many"}})

    def test_toolcache_only_when_env_unset(self, monkeypatch, runner_dirs):
        apply_runtime_overrides({"toolcache": "/elsewhere"})
        assert os.environ["RUNNER_TOOL_CACHE"] == runner_dirs["toolcache"]

        monkeypatch.delenv("RUNNER_TOOL_CACHE")
        apply_runtime_overrides({"toolcache": "/elsewhere"})
        assert os.environ["RUNNER_TOOL_CACHE"] == "/elsewhere"


class TestResolveVersions:

    def test_java_version_wins_over_file(self, tmp_path, caplog):
        path = tmp_path / ".java-version"
        path.write_text("21\n")
        args = parse_args(["-v", "17", "--java-version-file", str(path)])
        assert resolve_versions(args) == ["17"]
        assert "only java-version will be used" in caplog.text

    def test_sdkmanrc_sets_distribution(self, tmp_path):
        path = tmp_path / ".sdkmanrc"
        path.write_text("java=17.0.1-zulu\n")
        args = parse_args(["--java-version-file", str(path)])
        assert resolve_versions(args) == ["17.0.1"]
        assert args.DISTRIBUTION == "zulu"

    def test_explicit_distribution_kept(self, tmp_path):
        path = tmp_path / ".sdkmanrc"
        path.write_text("java=17.0.1-zulu\n")
        args = parse_args(["--java-version-file", str(path), "-d", "temurin"])
        resolve_versions(args)
        assert args.DISTRIBUTION == "temurin"

    def test_nothing_requested(self):
        with pytest.raises(ConfigurationError, match="java-version or java-version-file input expected"):
            resolve_versions(parse_args(["-d", "temurin"]))


class TestRun:

    def test_installs_cached_versions_last_is_default(self, runner_dirs, clean_java_env):
        root = runner_dirs["toolcache"]
        jdk11 = make_cached_jdk(root, "Java_Temurin-Hotspot_jdk", "11.0.13-8", "x64")
        jdk17 = make_cached_jdk(root, "Java_Temurin-Hotspot_jdk", "17.0.1-12", "x64")

        exit_code = run(parse_args(["-v", "11", "-v", "17", "-d", "temurin", "-a", "x64"]))

        assert exit_code == ExitCodes.SUCCESS.value
        assert os.environ["JAVA_HOME"] == jdk17
        assert os.environ["JAVA_HOME_11_X64"] == jdk11
        assert os.environ["PATH"].startswith(os.path.join(jdk17, "bin"))
        env_text = clean_java_env["env"].read_text()
        assert "JAVA_HOME_17_X64<<ghadelimiter_" in env_text
        assert clean_java_env["path"].read_text().splitlines() == [
            os.path.join(jdk11, "bin"),
            os.path.join(jdk17, "bin"),
        ]
        assert "version<<ghadelimiter_" in clean_java_env["output"].read_text()

    def test_config_supplies_inputs(self, tmp_path, runner_dirs, clean_java_env):
        cached = make_cached_jdk(runner_dirs["toolcache"], "Java_Zulu_jdk", "17.0.1-12", "x64")
        config = tmp_path / "setup-java.yml"
        config.write_text("java-version: 17\ndistribution: zulu\narchitecture: x64\n")

        assert run(parse_args(["--config", str(config)])) == ExitCodes.SUCCESS.value
        assert os.environ["JAVA_HOME"] == cached

    def test_missing_distribution(self, clean_java_env):
        assert run(parse_args(["-v", "17"])) == ExitCodes.CONFIG_ERROR.value

    def test_invalid_version(self, clean_java_env):
        assert run(parse_args(["-v", "a.b", "-d", "temurin"])) == ExitCodes.CONFIG_ERROR.value

    def test_local_file_error(self, clean_java_env, tmp_path):
        args = parse_args(["-v", "17", "-d", "jdkfile", "--jdk-file", str(tmp_path / "missing.tar.gz")])
        assert run(args) == ExitCodes.SETUP_FAILED.value

    @patch('distributions._adoptium.get_json')
    def test_transport_error(self, mock_get_json, clean_java_env):
        mock_get_json.side_effect = TransportError("Request failed", 503)
        assert run(parse_args(["-v", "17", "-d", "temurin", "-a", "x64"])) == ExitCodes.CONNECTION_ERROR.value
        assert "JAVA_HOME" not in os.environ
