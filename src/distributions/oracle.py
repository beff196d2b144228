"""Oracle JDK 17+ from download.oracle.com, located by HEAD probes."""
from __future__ import annotations

import logging
from typing import List

from constants import Constants
from common.errors import ConfigurationError, ResolutionError, TransportError
from common.http_client import head
from distributions.base import JavaResolver, distribution_architecture, download_archive_extension
from distributions.graalvm import oracle_platform, required_major
from versioning.models import Candidate
from versioning.semver import encode_version_for_url

logger = logging.getLogger(__name__)


class OracleResolver(JavaResolver):
    """Resolver for Oracle JDK (stable jdk, x64/aarch64)."""

    distribution = "Oracle"

    def get_available_versions(self) -> List[Candidate]:
        """Candidates for the requested range that answer a HEAD with 200, ``/latest`` first."""
        return self.probe_candidates(self.version)

    def candidate_urls(self, version_range: str) -> List[str]:
        """``/latest`` first for a bare major, then ``/archive``."""
        arch = distribution_architecture(self.architecture)
        platform = oracle_platform(self.platform)
        extension = download_archive_extension(self.platform)
        major = required_major(version_range, "Oracle JDK")

        urls = []
        if "." not in version_range:
            urls.append(f"{Constants.ORACLE_DL_BASE}/{major}/latest/jdk-{major}_{platform}-{arch}_bin.{extension}")
        urls.append(
            f"{Constants.ORACLE_DL_BASE}/{major}/archive/"
            f"jdk-{encode_version_for_url(version_range)}_{platform}-{arch}_bin.{extension}"
        )
        return urls

    def probe_candidates(self, version_range: str) -> List[Candidate]:
        candidates = []
        for url in self.candidate_urls(version_range):
            status = head(url)
            if status == 200:
                candidates.append(Candidate(version=version_range, url=url))
            elif status == 404:
                logger.debug("Oracle JDK not found at %s", url)
            else:
                raise TransportError(f"Http request for Oracle JDK failed with status code: {status}", status_code=status)
        return candidates

    def find_package_for_download(self, version_range: str) -> Candidate:
        arch = distribution_architecture(self.architecture)
        if arch not in ("x64", "aarch64"):
            raise ConfigurationError(f"Unsupported architecture: {self.architecture}")
        if not self.stable:
            raise ConfigurationError("Early access versions are not supported")
        if self.package_type != "jdk":
            raise ConfigurationError("Oracle JDK provides only the `jdk` package type")
        if required_major(version_range, "Oracle JDK") < 17:
            raise ConfigurationError("Oracle JDK is only supported for JDK 17 and later")

        candidates = self.probe_candidates(version_range)
        if not candidates:
            raise ResolutionError(f"Could not find Oracle JDK for SemVer {version_range}")
        return candidates[0]
