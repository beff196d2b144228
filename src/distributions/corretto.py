"""Amazon Corretto, resolved from the ``latest_links`` index map.

The index is keyed ``[os][arch][image type][major][file type]`` and only
lists the newest release per major, so only major versions can be requested.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Tuple

from constants import Constants
from common.errors import ConfigurationError, ResolutionError, TransportError
from common.http_client import get_json
from distributions.base import JavaResolver, distribution_architecture, download_archive_extension
from versioning.models import Candidate
from versioning.semver import convert_version_to_semver, sort_candidates_descending

logger = logging.getLogger(__name__)

_CORRETTO_VERSION_RE = re.compile(r"(\d+.+)\/")


def corretto_version(resource: str) -> str:
    """``/downloads/resources/17.0.2.8.1/amazon-corretto-...`` -> ``17.0.2.8.1``."""
    match = _CORRETTO_VERSION_RE.search(resource)
    if match is None:
        raise TransportError(f"Could not parse corretto version from {resource}")
    return match.group(1)


class CorrettoResolver(JavaResolver):
    """Resolver for Corretto; stable major versions only."""

    distribution = "Corretto"

    def _platform_option(self) -> str:
        return {"darwin": "macos", "win32": "windows"}.get(self.platform, self.platform)

    def _catalog(self) -> List[Tuple[str, Candidate]]:
        url = Constants.CORRETTO_INDEX_URL
        _, _, data = get_json(url)
        if not data:
            raise TransportError(f"Could not fetch latest corretto versions from {url}")

        eligible: Dict[str, Any] = (
            data.get(self._platform_option(), {})
            .get(distribution_architecture(self.architecture), {})
            .get(self.package_type, {})
        )
        extension = download_archive_extension(self.platform)
        catalog = []
        for major, file_types in eligible.items():
            details = file_types.get(extension)
            if not details:
                continue
            version = convert_version_to_semver(corretto_version(details["resource"]))
            catalog.append((major, Candidate(version=version, url=f"{Constants.CORRETTO_DOWNLOAD_BASE}{details['resource']}")))
        logger.debug("Available versions: %s", ", ".join(f"{m}: {c.version}" for m, c in catalog))
        return catalog

    def get_available_versions(self) -> List[Candidate]:
        return [candidate for _, candidate in self._catalog()]

    def find_package_for_download(self, version_range: str) -> Candidate:
        if not self.stable:
            raise ConfigurationError("Early access versions are not supported")
        if "." in version_range:
            raise ConfigurationError("Only major versions are supported")

        catalog = self._catalog()
        if version_range.strip() in ("", "x", "X", "*"):
            matching = [candidate for _, candidate in catalog]
        else:
            matching = [candidate for major, candidate in catalog if major == version_range]
        if not matching:
            options = ", ".join(major for major, _ in catalog)
            message = f"\nAvailable versions: {options}" if options else ""
            raise ResolutionError(f"Could not find satisfied version for SemVer '{version_range}'. {message}")
        return sort_candidates_descending(matching)[0]
