"""Microsoft Build of OpenJDK, resolved from the version manifest hosted on GitHub."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from constants import Constants
from common.errors import ConfigurationError, TransportError
from common.http_client import get_json, github_headers
from distributions.base import JavaResolver, distribution_architecture, download_archive_extension
from versioning.models import Candidate

logger = logging.getLogger(__name__)

MANIFEST_URL = (
    f"{Constants.GITHUB_API_BASE}/repos/{Constants.MICROSOFT_MANIFEST_REPO}"
    f"/contents/{Constants.MICROSOFT_MANIFEST_PATH}?ref={Constants.MICROSOFT_MANIFEST_REF}"
)


class MicrosoftResolver(JavaResolver):
    """Resolver for the Microsoft Build of OpenJDK (stable jdk, x64/aarch64)."""

    distribution = "Microsoft"

    def find_package_for_download(self, version_range: str) -> Candidate:
        if distribution_architecture(self.architecture) not in ("x64", "aarch64"):
            raise ConfigurationError(f"Unsupported architecture: {self.architecture}")
        if not self.stable:
            raise ConfigurationError("Early access versions are not supported")
        if self.package_type != "jdk":
            raise ConfigurationError("Microsoft Build of OpenJDK provides only the `jdk` package type")
        return super().find_package_for_download(version_range)

    def _matching_file(self, entry: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        arch = distribution_architecture(self.architecture)
        extension = download_archive_extension(self.platform)
        for item in entry.get("files") or []:
            if (
                item.get("arch") == arch
                and item.get("platform") == self.platform
                and item.get("filename", "").endswith(extension)
            ):
                return item
        return None

    def get_available_versions(self) -> List[Candidate]:
        logger.debug("Gathering available versions from '%s'", MANIFEST_URL)
        _, _, manifest = get_json(MANIFEST_URL, headers=github_headers())
        if not manifest:
            raise TransportError("Could not load manifest for Microsoft Build of OpenJDK")

        candidates = []
        for entry in manifest:
            if not entry.get("stable", True):
                continue
            file_info = self._matching_file(entry)
            if file_info:
                candidates.append(Candidate(version=entry["version"], url=file_info["download_url"]))
        return candidates
