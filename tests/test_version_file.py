"""Tests for version file parsing."""

import logging
import os

import pytest

from common.errors import ConfigurationError
from versioning.version_file import coerce, get_version_from_file_content, read_version_file


class TestJavaVersionFile:
    """Plain ``.java-version`` files."""

    @pytest.mark.parametrize("content,expected", [
        ("17\n", "17"),
        ("11.0.2\n", "11.0.2"),
        ("1.8\n", "8"),
        ("openjdk64-17.0.2\n", "17.0.2"),
        ("11.0.3-ea\n", "11.0.3-ea"),
        ("17.0.1.12\n", "17.0.1"),
        ("21\nsome trailing line\n", "21"),
    ])
    def test_first_line_version(self, content, expected):
        version, distribution = get_version_from_file_content(content, "temurin", ".java-version")
        assert version == expected
        assert distribution is None

    def test_empty_file(self):
        assert get_version_from_file_content("", "temurin", ".java-version") == (None, None)

    def test_corretto_keeps_major_only(self):
        version, _ = get_version_from_file_content("11.0.13\n", "corretto", ".java-version")
        assert version == "11"


class TestToolVersions:

    @pytest.mark.parametrize("content,expected", [
        ("java temurin-17.0.1+12\n", "17.0.1+12"),
        ("nodejs 18.0.0\njava 21\n", "21"),
        ("java openjdk-11.0.2\n", "11.0.2"),
    ])
    def test_java_entry(self, content, expected):
        version, _ = get_version_from_file_content(content, "temurin", "/repo/.tool-versions")
        assert version == expected

    def test_no_java_entry(self):
        assert get_version_from_file_content("python 3.11.0\n", "temurin", ".tool-versions") == (None, None)


class TestSdkmanrc:

    @pytest.mark.parametrize("content,version,distribution", [
        ("java=17.0.1-tem\n", "17.0.1", "temurin"),
        ("java=21.0.2-graalce\n", "21.0.2", "graalvm"),
        ("java=11.0.22-sem\n", "11.0.22", "semeru"),
        ("java=11.0.10-amzn\n", "11", "corretto"),
        ("# comment\njava=8.0.402-zulu\n", "8.0.402", "zulu"),
    ])
    def test_identifier_sets_distribution(self, content, version, distribution):
        assert get_version_from_file_content(content, None, ".sdkmanrc") == (version, distribution)

    def test_unknown_identifier_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = get_version_from_file_content("java=17.0.1-xyz\n", None, ".sdkmanrc")
        assert result == ("17.0.1", None)
        assert "Unknown sdkman java identifier 'xyz'" in caplog.text


class TestReadVersionFile:

    def test_reads_file(self, tmp_path):
        path = tmp_path / ".java-version"
        path.write_text("17\n")
        assert read_version_file(str(path), "temurin") == ("17", None)

    def test_missing_file(self, tmp_path):
        missing = os.path.join(str(tmp_path), ".java-version")
        with pytest.raises(ConfigurationError) as exc:
            read_version_file(missing, "temurin")
        assert str(exc.value) == f"The specified java version file at: {missing} does not exist"

    def test_file_without_version(self, tmp_path):
        path = tmp_path / ".tool-versions"
        path.write_text("nodejs 18.0.0\n")
        with pytest.raises(ConfigurationError, match="No supported version was found in file"):
            read_version_file(str(path), "temurin")


def test_coerce():
    assert coerce("17") == "17.0.0"
    assert coerce("v11.0") == "11.0.0"
    assert coerce("abc") is None
