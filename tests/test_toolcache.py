"""Tests for the directory-based toolcache."""

import os

import pytest

from common import toolcache
from common.errors import SetupJavaError
from conftest import make_cached_jdk


class TestToolcacheLookup:
    """find_all_versions / get_toolcache_path / find."""

    def test_root_follows_environment(self, runner_dirs):
        assert toolcache.toolcache_root() == runner_dirs["toolcache"]

    def test_lists_only_completed_entries(self, runner_dirs):
        root = runner_dirs["toolcache"]
        make_cached_jdk(root, "Java_Zulu_jdk", "11.0.2-7", "x64")
        make_cached_jdk(root, "Java_Zulu_jdk", "17.0.1-12", "x64")
        make_cached_jdk(root, "Java_Zulu_jdk", "8.0.292", "x64", with_marker=False)
        make_cached_jdk(root, "Java_Zulu_jdk", "16.0.1", "arm64")

        assert toolcache.find_all_versions("Java_Zulu_jdk", "x64") == ["11.0.2-7", "17.0.1-12"]

    def test_unknown_tool(self):
        assert toolcache.find_all_versions("Java_Nothing_jdk", "x64") == []
        assert toolcache.get_toolcache_path("Java_Nothing_jdk", "11.0.2", "x64") is None

    def test_find_picks_highest_satisfying(self, runner_dirs):
        root = runner_dirs["toolcache"]
        make_cached_jdk(root, "Java_Temurin-Hotspot_jdk", "11.0.2", "x64")
        expected = make_cached_jdk(root, "Java_Temurin-Hotspot_jdk", "11.0.10", "x64")
        make_cached_jdk(root, "Java_Temurin-Hotspot_jdk", "17.0.1", "x64")

        assert toolcache.find("Java_Temurin-Hotspot_jdk", "11", "x64") == expected
        assert toolcache.find("Java_Temurin-Hotspot_jdk", "12", "x64") == ""


class TestCacheDir:
    """cache_dir copies the tree and writes the marker."""

    def test_caches_directory(self, tmp_path, runner_dirs):
        source = tmp_path / "jdk-17"
        (source / "bin").mkdir(parents=True)
        (source / "bin" / "java").write_text("#!/bin/sh\n")

        dest = toolcache.cache_dir(str(source), "Java_Zulu_jdk", "17.0.1-12", "x64")

        assert dest == os.path.join(runner_dirs["toolcache"], "Java_Zulu_jdk", "17.0.1-12", "x64")
        assert os.path.isfile(os.path.join(dest, "bin", "java"))
        assert os.path.isfile(f"{dest}.complete")
        assert toolcache.get_toolcache_path("Java_Zulu_jdk", "17.0.1-12", "x64") == dest

    def test_replaces_existing_entry(self, tmp_path, runner_dirs):
        stale = make_cached_jdk(runner_dirs["toolcache"], "Java_Zulu_jdk", "17.0.1-12", "x64")
        with open(os.path.join(stale, "stale.txt"), "w", encoding="utf-8") as fh:
            fh.write("old")
        source = tmp_path / "fresh"
        source.mkdir()
        (source / "release").write_text("JAVA_VERSION=17")

        dest = toolcache.cache_dir(str(source), "Java_Zulu_jdk", "17.0.1-12", "x64")

        assert not os.path.exists(os.path.join(dest, "stale.txt"))
        assert os.path.isfile(os.path.join(dest, "release"))

    def test_rejects_missing_source(self, tmp_path):
        with pytest.raises(SetupJavaError, match="sourceDir is not a directory"):
            toolcache.cache_dir(str(tmp_path / "missing"), "Java_Zulu_jdk", "17.0.1", "x64")
