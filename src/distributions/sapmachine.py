"""SAP Machine, resolved from sapmachine-releases-all.json."""
from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, List, Optional

from constants import Constants
from common.errors import ConfigurationError, ResolutionError, TransportError
from common.http_client import get_json, github_headers
from distributions.base import JavaResolver, distribution_architecture
from versioning.models import Candidate
from versioning.semver import convert_version_to_semver, find_best_candidate, is_valid_version

logger = logging.getLogger(__name__)

ALPINE_RELEASE_FILE = "/etc/alpine-release"


def sapmachine_version(build_name: str) -> Optional[str]:
    """``sapmachine-17.0.2+8`` -> ``17.0.2+8``; None for unparseable names."""
    version = build_name.replace("sapmachine-", "", 1)
    if "." not in version:
        # 21+35 -> 21.0.0+35
        version = re.sub(r"^(\d+)(\+.*)?$", lambda m: f"{m.group(1)}.0.0{m.group(2) or ''}", version)
    if len(version.split(".")) > 3:
        version = version.replace("+", ".", 1)
    version = convert_version_to_semver(version)
    return version if is_valid_version(version) else None


class SapMachineResolver(JavaResolver):
    """Resolver for SapMachine (jdk and jre), including musl builds on Alpine."""

    distribution = "SapMachine"

    def _platform_option(self) -> str:
        if self.platform == "win32":
            return "windows"
        if self.platform == "darwin":
            return "macos"
        if self.platform == "linux" and os.path.exists(ALPINE_RELEASE_FILE):
            return "linux-musl"
        return self.platform

    def _fetch_releases(self, url: str, headers: Optional[Dict[str, str]] = None) -> Optional[Dict[str, Any]]:
        logger.debug("Trying to fetch available SapMachine versions info from the url: %s", url)
        try:
            _, _, data = get_json(url, headers=headers)
        except TransportError as exc:
            logger.debug("Fetching SapMachine versions info from the link: %s ended up with the error: %s", url, exc)
            return None
        return data

    def get_available_versions(self) -> List[Candidate]:
        releases = self._fetch_releases(Constants.SAPMACHINE_PRIMARY_URL)
        if not releases:
            releases = self._fetch_releases(Constants.SAPMACHINE_BACKUP_URL, github_headers())
        if not releases:
            raise TransportError("Couldn't fetch SapMachine versions information from both primary and backup urls")

        platform = self._platform_option()
        arch = distribution_architecture(self.architecture)
        expected_key = f"linux-{arch}-musl" if platform == "linux-musl" else f"{platform}-{arch}"

        candidates = []
        for major_info in releases.values():
            for builds in (major_info.get("updates") or {}).values():
                for build_name, build in builds.items():
                    version = sapmachine_version(build_name)
                    if version is None:
                        logger.debug("Invalid version: %s", build_name)
                        continue
                    if self.stable and build.get("ea") == "true":
                        continue
                    archives = (build.get("assets") or {}).get(self.package_type, {}).get(expected_key, {})
                    for content_type, asset in archives.items():
                        if content_type in ("tar.gz", "zip"):
                            candidates.append(Candidate(version=version, url=asset["url"]))
        return candidates

    def find_package_for_download(self, version_range: str) -> Candidate:
        if self.package_type not in ("jdk", "jre"):
            raise ConfigurationError("SapMachine provides only the `jdk` and `jre` package type")

        best = find_best_candidate(version_range, self.get_available_versions())
        if best is None:
            raise ResolutionError(
                "Couldn't find any satisfied version for the specified java-version: "
                f'"{version_range}" and architecture: "{self.architecture}".'
            )
        return best
