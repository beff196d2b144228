"""Azul Zulu builds from the Azul community bundles API."""
from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Dict, List
from urllib.parse import urlencode

from constants import Constants
from common.http_client import get_json
from common.logging_utils import safe_url
from distributions.base import JavaResolver, distribution_architecture, download_archive_extension
from versioning.models import Candidate
from versioning.semver import compare_build, convert_version_to_semver

logger = logging.getLogger(__name__)


def _jdk_version(numbers: List[int]) -> str:
    # Azul reports [11, 0, 2, 1]; anything past the fourth number is not valid semver
    return convert_version_to_semver(numbers[:4])


class ZuluResolver(JavaResolver):
    """Resolver for Zulu. Equal JDK versions are ordered by ``zulu_version``."""

    distribution = "Zulu"

    def _architecture_options(self) -> Dict[str, str]:
        arch = distribution_architecture(self.architecture)
        if arch == "x64":
            return {"arch": "x86", "hw_bitness": "64"}
        if arch == "x86":
            return {"arch": "x86", "hw_bitness": "32"}
        if arch in ("aarch64", "arm64"):
            return {"arch": "arm", "hw_bitness": "64"}
        return {"arch": arch, "hw_bitness": ""}

    def _platform_option(self) -> str:
        return {"darwin": "macos", "win32": "windows"}.get(self.platform, self.platform)

    def available_versions_url(self) -> str:
        bundle_type, _, features = self.package_type.partition("+")
        params = {
            "os": self._platform_option(),
            "ext": download_archive_extension(self.platform),
            "bundle_type": bundle_type,
            "javafx": "true" if "fx" in features else "false",
        }
        params.update(self._architecture_options())
        params["release_status"] = "ga" if self.stable else "ea"
        if features:
            params["features"] = features
        return f"{Constants.ZULU_API_URL}?{urlencode(params)}"

    def get_available_versions(self) -> List[Candidate]:
        url = self.available_versions_url()
        logger.debug("Gathering available versions from '%s'", safe_url(url))
        _, _, data = get_json(url)
        bundles = data or []

        # Newest zulu_version first so the stable sort on jdk_version keeps it on ties
        bundles = sorted(
            bundles,
            key=cmp_to_key(lambda a, b: compare_build(_jdk_version(a["zulu_version"]), _jdk_version(b["zulu_version"]))),
            reverse=True,
        )
        candidates = [Candidate(version=_jdk_version(item["jdk_version"]), url=item["url"]) for item in bundles]
        logger.debug("Available versions: [%d]", len(candidates))
        return candidates
