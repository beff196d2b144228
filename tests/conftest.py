"""Shared fixtures: an isolated toolcache and temp dir for every test."""

import os

import pytest


@pytest.fixture(autouse=True)
def runner_dirs(tmp_path, monkeypatch):
    """Point RUNNER_TOOL_CACHE and RUNNER_TEMP at per-test directories."""
    toolcache = tmp_path / "toolcache"
    temp = tmp_path / "temp"
    toolcache.mkdir()
    temp.mkdir()
    monkeypatch.setenv("RUNNER_TOOL_CACHE", str(toolcache))
    monkeypatch.setenv("RUNNER_TEMP", str(temp))
    for name in ("GITHUB_ENV", "GITHUB_PATH", "GITHUB_OUTPUT", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    return {"toolcache": str(toolcache), "temp": str(temp)}


def make_cached_jdk(toolcache_root, folder, version_name, arch, with_marker=True):
    """Create a toolcache entry and return its directory."""
    path = os.path.join(toolcache_root, folder, version_name, arch)
    os.makedirs(os.path.join(path, "bin"), exist_ok=True)
    if with_marker:
        with open(f"{path}.complete", "w", encoding="utf-8"):
            pass
    return path
