"""Directory-based toolcache shared by every installation in a CI job.

Layout: ``<root>/<tool name>/<version>/<arch>`` with a sibling
``<arch>.complete`` marker written once the copy has finished. Only entries
carrying the marker are visible to lookups.
"""
from __future__ import annotations

import logging
import os
import shutil
from functools import cmp_to_key
from typing import List, Optional

from constants import Constants
from common.errors import SetupJavaError
from versioning.semver import compare_build, is_valid_version, satisfies

logger = logging.getLogger(__name__)


def toolcache_root() -> str:
    """Return the toolcache root, honoring ``RUNNER_TOOL_CACHE``."""
    return os.environ.get(Constants.ENV_TOOLCACHE) or Constants.DEFAULT_TOOLCACHE_DIR


def _entry_path(tool_name: str, version: str, arch: str) -> str:
    return os.path.join(toolcache_root(), tool_name, version, arch)


def _is_complete(path: str) -> bool:
    return os.path.isdir(path) and os.path.isfile(f"{path}.complete")


def get_toolcache_path(tool_name: str, version: str, arch: str) -> Optional[str]:
    """Return the directory of a completed entry, or None."""
    path = _entry_path(tool_name, version, arch)
    return path if _is_complete(path) else None


def find_all_versions(tool_name: str, arch: str) -> List[str]:
    """List every completed version directory name for ``tool_name``/``arch``."""
    tool_dir = os.path.join(toolcache_root(), tool_name)
    if not os.path.isdir(tool_dir):
        return []
    versions = [
        name for name in sorted(os.listdir(tool_dir))
        if _is_complete(os.path.join(tool_dir, name, arch))
    ]
    logger.debug("Toolcache versions for %s/%s: %s", tool_name, arch, versions)
    return versions


def find(tool_name: str, version_spec: str, arch: str) -> str:
    """Return the path of the best cached version satisfying ``version_spec``, or ''."""
    exact = get_toolcache_path(tool_name, version_spec, arch)
    if exact:
        return exact

    matching = [
        v for v in find_all_versions(tool_name, arch)
        if is_valid_version(v) and satisfies(version_spec, v)
    ]
    if not matching:
        return ""
    matching.sort(key=cmp_to_key(compare_build), reverse=True)
    return get_toolcache_path(tool_name, matching[0], arch) or ""


def cache_dir(source_dir: str, tool_name: str, version: str, arch: str) -> str:
    """Copy ``source_dir`` into the toolcache and mark the entry complete.

    An existing entry with the same key is replaced.
    """
    if not os.path.isdir(source_dir):
        raise SetupJavaError(f"sourceDir is not a directory: {source_dir}")

    dest = _entry_path(tool_name, version, arch)
    marker = f"{dest}.complete"
    logger.debug("Caching tool %s %s %s from %s", tool_name, version, arch, source_dir)

    if os.path.exists(marker):
        os.remove(marker)
    if os.path.isdir(dest):
        shutil.rmtree(dest)
    os.makedirs(os.path.dirname(dest), exist_ok=True)
    shutil.copytree(source_dir, dest, symlinks=True)

    with open(marker, "w", encoding="utf-8"):
        pass
    return dest
