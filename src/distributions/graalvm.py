"""Oracle GraalVM for JDK 17+.

GA builds are located by probing download.oracle.com with HEAD requests;
early-access builds are described by JSON files in the
``graalvm/oracle-graalvm-ea-builds`` repository.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from constants import Constants
from common.errors import ConfigurationError, ResolutionError, TransportError
from common.http_client import get_json, github_headers, head
from distributions.base import JavaResolver, distribution_architecture, download_archive_extension
from versioning.models import Candidate
from versioning.semver import encode_version_for_url, get_major

logger = logging.getLogger(__name__)


def required_major(version_range: str, product: str) -> int:
    try:
        return get_major(version_range)
    except ValueError:
        raise ConfigurationError(f"{product} requires a major version, got '{version_range}'") from None


def oracle_platform(platform: str) -> str:
    """Platform token used in download.oracle.com file names."""
    try:
        return {"darwin": "macos", "win32": "windows", "linux": "linux"}[platform]
    except KeyError:
        raise ConfigurationError(
            f"Platform '{platform}' is not supported. Supported platforms: 'linux', 'macos', 'windows'"
        ) from None


class GraalVMResolver(JavaResolver):
    """Resolver for Oracle GraalVM (jdk, x64/aarch64)."""

    distribution = "GraalVM"

    def get_available_versions(self) -> List[Candidate]:
        """Probe the download for the requested range; GA builds are not listed."""
        return self.probe_candidates(self.version)

    def ga_url(self, version_range: str) -> str:
        """``/latest`` for a bare major, ``/archive`` for a full version."""
        arch = distribution_architecture(self.architecture)
        platform = oracle_platform(self.platform)
        extension = download_archive_extension(self.platform)
        major = required_major(version_range, "GraalVM")
        file_name = f"graalvm-jdk-{encode_version_for_url(version_range)}_{platform}-{arch}_bin.{extension}"
        if "." in version_range:
            return f"{Constants.GRAALVM_DL_BASE}/{major}/archive/{file_name}"
        return f"{Constants.GRAALVM_DL_BASE}/{version_range}/latest/{file_name}"

    def probe_candidates(self, version_range: str) -> List[Candidate]:
        if not self.stable:
            return [self.find_ea_build(f"{version_range}-ea")]

        file_url = self.ga_url(version_range)
        status = head(file_url)
        if status == 404:
            logger.debug("GraalVM not found at %s", file_url)
            return []
        if status != 200:
            raise TransportError(f"Http request for GraalVM failed with status code: {status}", status_code=status)
        return [Candidate(version=version_range, url=file_url)]

    def find_package_for_download(self, version_range: str) -> Candidate:
        arch = distribution_architecture(self.architecture)
        if arch not in ("x64", "aarch64"):
            raise ConfigurationError(f"Unsupported architecture: {self.architecture}")

        if self.stable:
            if self.package_type != "jdk":
                raise ConfigurationError("GraalVM provides only the `jdk` package type")
            if required_major(version_range, "GraalVM") < 17:
                raise ConfigurationError("GraalVM is only supported for JDK 17 and later")

        candidates = self.probe_candidates(version_range)
        if not candidates:
            raise ResolutionError(f"Could not find GraalVM for SemVer {version_range}")
        return candidates[0]

    def _fetch_ea_json(self, java_ea_version: str) -> List[Dict[str, Any]]:
        url = (
            f"{Constants.GITHUB_API_BASE}/repos/{Constants.GRAALVM_EA_REPO}"
            f"/contents/versions/{java_ea_version}.json?ref=main"
        )
        logger.debug("Trying to fetch available version info for GraalVM EA builds from '%s'", url)
        try:
            _, _, data = get_json(url, headers=github_headers())
        except TransportError as exc:
            raise TransportError(
                f"Fetching version info for GraalVM EA builds from '{url}' failed with the error: {exc}"
            ) from exc
        if data is None:
            raise ResolutionError(f"No GraalVM EA build found for version '{java_ea_version}'")
        return data

    def find_ea_build(self, java_ea_version: str) -> Candidate:
        versions = self._fetch_ea_json(java_ea_version)
        latest = next((v for v in versions if v.get("latest")), None)
        if latest is None:
            raise ResolutionError(f"Unable to find latest version for '{java_ea_version}'")

        arch = distribution_architecture(self.architecture)
        platform = "windows" if self.platform == "win32" else self.platform
        file_info = next(
            (f for f in latest.get("files", []) if f.get("arch") == arch and f.get("platform") == platform),
            None,
        )
        if not file_info or not file_info.get("filename", "").startswith("graalvm-jdk-"):
            raise ResolutionError(f"Unable to find file metadata for '{java_ea_version}'")
        return Candidate(version=latest["version"], url=f"{latest['download_base_url']}{file_info['filename']}")
