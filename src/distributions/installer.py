"""Installer lifecycle shared by every distribution.

``Start -> CacheLookup -> Found -> SetDefault`` or
``Start -> CacheLookup -> RemoteResolve -> Download -> Extract -> CacheStore -> SetDefault``.
The result carries an ``EnvironmentChange``; nothing here touches the process
environment.
"""
from __future__ import annotations

import logging
import os
from functools import cmp_to_key
from typing import Optional

from constants import Constants
from common import archive, http_client, toolcache
from common.errors import SetupJavaError
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from distributions.base import (
    JavaResolver,
    download_archive_extension,
    parse_toolcache_version,
    toolcache_folder_name,
    toolcache_version_name,
)
from versioning.models import Candidate, EnvironmentChange, InstallResult
from versioning.semver import compare_build, get_major, satisfies

logger = logging.getLogger(__name__)

_KNOWN_EXTENSIONS = ("tar.gz", "tar", "zip", "7z")


def extracted_jdk_root(extracted: str) -> str:
    """Return the first top-level entry of an extracted JDK archive, which must be a directory."""
    entries = sorted(os.listdir(extracted))
    if not entries:
        raise SetupJavaError(f"JDK archive extracted to '{extracted}' is empty")
    root = os.path.join(extracted, entries[0])
    if not os.path.isdir(root):
        raise SetupJavaError(f"Expected a JDK directory at the top of the archive, found file '{entries[0]}'")
    return root


class JavaInstaller:
    """Runs the install lifecycle for one resolver."""

    def __init__(self, resolver: JavaResolver):
        self.resolver = resolver

    @property
    def distribution(self) -> str:
        return self.resolver.distribution

    @property
    def toolcache_folder_name(self) -> str:
        return toolcache_folder_name(self.resolver.distribution, self.resolver.package_type)

    def setup_java(self) -> InstallResult:
        """Install (or reuse) the JDK and compute its environment change."""
        resolver = self.resolver
        found = self.find_in_toolcache()
        if found and not resolver.options.check_latest:
            logger.info("Resolved Java %s from tool-cache", found.version)
        else:
            logger.info("Trying to resolve the latest version from remote")
            release = resolver.find_package_for_download(resolver.version)
            logger.info("Resolved latest version as %s", release.version)
            if found and found.version == release.version:
                logger.info("Resolved Java %s from tool-cache", found.version)
            else:
                logger.info("Trying to download...")
                found = self.download_tool(release)
                logger.info("Java %s was downloaded", found.version)

        found.path = self._macos_home(found.path)
        logger.info("Setting Java %s as the default", found.version)
        found.environment = self.environment_change(found.version, found.path)
        return found

    def find_in_toolcache(self) -> Optional[InstallResult]:
        """Best cached version matching the range and stability, or None."""
        resolver = self.resolver
        folder = self.toolcache_folder_name
        matching = []
        for name in toolcache.find_all_versions(folder, resolver.architecture):
            stable = "-ea" not in name
            version = parse_toolcache_version(name)
            if stable != resolver.stable or not satisfies(resolver.version, version):
                continue
            path = toolcache.get_toolcache_path(folder, name, resolver.architecture)
            if path:
                matching.append(InstallResult(version=version, path=path))

        if is_debug_enabled(logger):
            logger.debug(
                "Toolcache lookup",
                extra=extra_context(
                    event="toolcache_lookup",
                    component="installer",
                    target=folder,
                    count=len(matching),
                ),
            )
        if not matching:
            return None
        matching.sort(key=cmp_to_key(lambda a, b: compare_build(a.version, b.version)), reverse=True)
        return matching[0]

    def download_tool(self, release: Candidate) -> InstallResult:
        """Download, extract and cache ``release``."""
        resolver = self.resolver
        logger.info("Downloading Java %s (%s) from %s ...", release.version, self.distribution, safe_url(release.url))
        archive_path = http_client.download_tool(release.url)

        extension = archive.archive_extension(release.url.split("?", 1)[0])
        if extension not in _KNOWN_EXTENSIONS:
            extension = download_archive_extension(resolver.platform)
        extracted = archive.extract_jdk_file(archive_path, extension)

        java_path = toolcache.cache_dir(
            extracted_jdk_root(extracted),
            self.toolcache_folder_name,
            toolcache_version_name(release.version, resolver.stable),
            resolver.architecture,
        )
        return InstallResult(version=release.version, path=java_path)

    def _macos_home(self, path: str) -> str:
        # JDK bundles on macOS keep the home under Contents/Home
        nested = os.path.join(path, Constants.MACOS_JAVA_CONTENT_POSTFIX)
        if self.resolver.platform == "darwin" and os.path.isdir(nested):
            return nested
        return path

    def environment_change(self, version: str, path: str) -> EnvironmentChange:
        major = get_major(version)
        arch = self.resolver.architecture.upper()
        return EnvironmentChange(
            variables={
                "JAVA_HOME": path,
                f"JAVA_HOME_{major}_{arch}": path,
            },
            path_entries=(os.path.join(path, "bin"),),
            outputs={
                "distribution": self.distribution,
                "path": path,
                "version": version,
            },
        )
