"""Tencent Kona JDK, resolved from kona-v1.json."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from constants import Constants
from common.errors import ConfigurationError, ResolutionError, TransportError
from common.http_client import get_json
from distributions.base import JavaResolver
from versioning.models import Candidate
from versioning.semver import find_best_candidate

logger = logging.getLogger(__name__)


class KonaResolver(JavaResolver):
    """Resolver for Kona; only releases flagged ``latest`` are offered."""

    distribution = "Kona"

    def kona_os(self) -> str:
        return {"darwin": "macos", "win32": "windows"}.get(self.platform, self.platform)

    def kona_arch(self) -> str:
        return {"arm64": "aarch64", "x64": "x86_64"}.get(self.architecture, self.architecture)

    def _fetch_release_info(self) -> Dict[str, Any]:
        url = Constants.KONA_RELEASES_URL
        logger.debug("Fetching Kona release info from URL: %s", url)
        try:
            _, _, data = get_json(url)
        except TransportError as exc:
            raise TransportError("Couldn't fetch Kona release information") from exc
        if not data:
            raise TransportError("Couldn't fetch Kona release information")
        return data

    def get_available_versions(self) -> List[Candidate]:
        os_name, arch = self.kona_os(), self.kona_arch()
        candidates = []
        for releases in self._fetch_release_info().values():
            for release in releases:
                if not release.get("latest"):
                    continue
                for file_info in release.get("files", []):
                    if file_info.get("os") == os_name and file_info.get("arch") == arch:
                        candidates.append(
                            Candidate(version=release["version"], url=f"{release['baseUrl']}{file_info['filename']}")
                        )
                        break
        logger.debug("Available releases: %s", ", ".join(c.version for c in candidates))
        return candidates

    def find_package_for_download(self, version_range: str) -> Candidate:
        if not self.stable:
            raise ConfigurationError("Kona provides stable releases only")
        if self.package_type != "jdk":
            raise ConfigurationError("Kona provides jdk only")

        best = find_best_candidate(version_range, self.get_available_versions())
        if best is None:
            raise ResolutionError(
                f'No Kona release for the specified version "{version_range}" '
                f'on OS "{self.kona_os()}" and arch "{self.kona_arch()}".'
            )
        return best
