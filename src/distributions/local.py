"""Install a JDK from an archive supplied by the caller."""
from __future__ import annotations

import logging
import os
from typing import List, Optional

from common import archive, toolcache
from common.errors import LocalFileError
from distributions.base import JavaResolver, toolcache_version_name
from distributions.installer import JavaInstaller, extracted_jdk_root
from versioning.models import Candidate, InstallerOptions, InstallResult

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED_MESSAGE = "This method should not be implemented in local file provider"


class LocalJavaResolver(JavaResolver):
    """Placeholder resolver; a local archive is never resolved remotely."""

    distribution = "jdkfile"

    def get_available_versions(self) -> List[Candidate]:
        raise LocalFileError(NOT_IMPLEMENTED_MESSAGE)

    def find_package_for_download(self, version_range: str) -> Candidate:
        raise LocalFileError(NOT_IMPLEMENTED_MESSAGE)


class LocalJavaInstaller(JavaInstaller):
    """Unpacks ``jdk_file`` into the toolcache unless the version is cached already."""

    def __init__(self, options: InstallerOptions, jdk_file: Optional[str] = None, *, platform: Optional[str] = None):
        super().__init__(LocalJavaResolver(options, platform=platform))
        self.jdk_file = jdk_file

    def setup_java(self) -> InstallResult:
        resolver = self.resolver
        found = self.find_in_toolcache()
        if found:
            logger.info("Resolved Java %s from tool-cache", found.version)
        else:
            logger.info("Java %s was not found in tool-cache. Trying to unpack JDK file...", resolver.version)
            found = self._install_from_file()

        found.path = self._macos_home(found.path)
        logger.info("Setting Java %s as default", found.version)
        found.environment = self.environment_change(found.version, found.path)
        return found

    def _install_from_file(self) -> InstallResult:
        if not self.jdk_file:
            raise LocalFileError("'jdkFile' is not specified")
        jdk_file_path = os.path.abspath(self.jdk_file)
        if not os.path.exists(jdk_file_path):
            raise LocalFileError(f"JDK file was not found in path '{jdk_file_path}'")
        if not os.path.isfile(jdk_file_path):
            raise LocalFileError(f"JDK file was not found in path '{jdk_file_path}' (path is a directory)")

        logger.info("Extracting Java from '%s'", jdk_file_path)
        extracted = archive.extract_jdk_file(jdk_file_path)
        version = self.resolver.version
        java_path = toolcache.cache_dir(
            extracted_jdk_root(extracted),
            self.toolcache_folder_name,
            toolcache_version_name(version, self.resolver.stable),
            self.resolver.architecture,
        )
        return InstallResult(version=version, path=java_path)

    def download_tool(self, release: Candidate) -> InstallResult:
        raise LocalFileError(NOT_IMPLEMENTED_MESSAGE)
