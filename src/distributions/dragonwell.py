"""Alibaba Dragonwell, resolved from the dragonwell-jdk.io checksum map.

The map is keyed ``[major][jdk version][os][arch][edition]``. A GitHub mirror
of the same file is used when the primary site cannot be reached.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from constants import Constants
from common.errors import ConfigurationError, ResolutionError, TransportError
from common.http_client import get_json, github_headers
from distributions.base import JavaResolver, distribution_architecture, download_archive_extension
from versioning.models import Candidate
from versioning.semver import convert_version_to_semver, find_best_candidate, get_major, is_valid_version

logger = logging.getLogger(__name__)


def preferred_edition(major: int) -> str:
    """Edition picked when a version is published as both Extended and Standard."""
    return "Extended" if major in (8, 11) else "Standard"


class DragonwellResolver(JavaResolver):
    """Resolver for Dragonwell; stable jdk builds only."""

    distribution = "Dragonwell"

    def _platform_option(self) -> str:
        return {"win32": "windows", "darwin": "macos"}.get(self.platform, self.platform)

    def _fetch_catalog(self) -> Dict[str, Any]:
        try:
            _, _, data = get_json(Constants.DRAGONWELL_PRIMARY_URL)
            if data:
                return data
        except TransportError as exc:
            logger.debug("Fetching Dragonwell versions from primary url failed: %s", exc)

        logger.debug("Trying backup url %s", Constants.DRAGONWELL_BACKUP_URL)
        try:
            _, _, data = get_json(Constants.DRAGONWELL_BACKUP_URL, headers=github_headers())
        except TransportError as exc:
            raise TransportError(
                "Couldn't fetch Dragonwell versions information from both primary and backup urls"
            ) from exc
        if not data:
            raise TransportError("Couldn't fetch Dragonwell versions information from both primary and backup urls")
        return data

    def get_available_versions(self) -> List[Candidate]:
        platform = self._platform_option()
        arch = distribution_architecture(self.architecture)
        extension = download_archive_extension(self.platform)

        preferred: List[Candidate] = []
        others: List[Candidate] = []
        for major_key, versions in self._fetch_catalog().items():
            for jdk_version, platforms in versions.items():
                if jdk_version == "latest":
                    continue
                editions = (platforms.get(platform) or {}).get(arch)
                if not editions:
                    continue
                if jdk_version.count(".") >= 3:
                    # 17.0.4.0.4+8 -> 17.0.4+0.4.8
                    jdk_version = jdk_version.replace("+", ".")
                version = convert_version_to_semver(jdk_version)
                if not is_valid_version(version):
                    logger.debug("Skipping unparseable Dragonwell version %s", jdk_version)
                    continue
                for edition, details in editions.items():
                    url = details.get("download_url", "")
                    if not url.endswith(extension):
                        continue
                    bucket = preferred if edition == preferred_edition(get_major(version)) else others
                    bucket.append(Candidate(version=version, url=url))
        # Ties on version keep catalog order, with the preferred edition first
        return preferred + others

    def find_package_for_download(self, version_range: str) -> Candidate:
        if self.package_type != "jdk":
            raise ConfigurationError("Dragonwell provides only the `jdk` package type")
        if not self.stable:
            raise ConfigurationError("Early access versions are not supported")

        best = find_best_candidate(version_range, self.get_available_versions())
        if best is None:
            raise ResolutionError(
                "Couldn't find any satisfied version for the specified java-version: "
                f'"{version_range}" and architecture: "{self.architecture}".'
            )
        return best
