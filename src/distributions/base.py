"""Resolver contract and the helpers every distribution shares."""
from __future__ import annotations

import logging
import platform as platform_module
import sys
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from constants import Constants
from common.errors import ResolutionError
from versioning.models import Candidate, InstallerOptions, VersionRange
from versioning.semver import find_best_candidate

logger = logging.getLogger(__name__)

_MACHINE_ARCHITECTURES = {
    "x86_64": "x64",
    "amd64": "x64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64",
    "s390x": "s390x",
}


def host_platform() -> str:
    """``linux``, ``darwin`` or ``win32``."""
    return sys.platform


def default_architecture() -> str:
    """Host CPU architecture in runner notation (``x64``, ``arm64``, ...)."""
    machine = platform_module.machine().lower()
    return _MACHINE_ARCHITECTURES.get(machine, machine)


def distribution_architecture(architecture: str) -> str:
    """Map runner architecture names to the names most vendor APIs use."""
    return {"amd64": "x64", "ia32": "x86", "arm64": "aarch64"}.get(architecture, architecture)


def download_archive_extension(platform: Optional[str] = None) -> str:
    return "zip" if (platform or host_platform()) == "win32" else "tar.gz"


def toolcache_folder_name(distribution: str, package_type: str) -> str:
    return f"{Constants.TOOLCACHE_PREFIX}_{distribution}_{package_type}"


def toolcache_version_name(version: str, stable: bool) -> str:
    """Directory name of a version inside the toolcache.

    Stable: ``11.0.2+7`` -> ``11.0.2-7``. Early access: ``11.0.2+7`` ->
    ``11.0.2-ea.7`` and ``11.0.2`` -> ``11.0.2-ea``.
    """
    if not stable:
        if "+" in version:
            return version.replace("+", "-ea.", 1)
        return f"{version}-ea"
    return version.replace("+", "-", 1)


def parse_toolcache_version(name: str) -> str:
    """Inverse of ``toolcache_version_name``."""
    version = name.replace("-ea.", "+", 1)
    if version.endswith("-ea"):
        version = version[: -len("-ea")]
    return version.replace("-", "+", 1)


def raise_no_satisfied_version(version_range: str, available: Iterable[str]) -> None:
    """Raise the resolution error listing what the catalog offered."""
    options = ", ".join(available)
    message = f"\nAvailable versions: {options}" if options else ""
    raise ResolutionError(f"Could not find satisfied version for SemVer '{version_range}'. {message}")


class JavaResolver(ABC):
    """Turns a version range into one downloadable ``Candidate`` for a vendor.

    Subclasses set ``distribution`` (the name used for the toolcache folder
    and the ``distribution`` output) and implement ``get_available_versions``.
    Vendor pre-checks belong in ``find_package_for_download`` before the
    catalog is fetched.
    """

    distribution: str = ""

    def __init__(self, options: InstallerOptions, *, platform: Optional[str] = None):
        self.options = options
        self.range = VersionRange.parse(options.version)
        self.architecture = options.architecture or default_architecture()
        self.package_type = options.package_type
        self.platform = platform or host_platform()

    @property
    def version(self) -> str:
        return self.range.version

    @property
    def stable(self) -> bool:
        return self.range.stable

    @abstractmethod
    def get_available_versions(self) -> List[Candidate]:
        """Fetch the vendor catalog and project it into candidates."""

    def find_package_for_download(self, version_range: str) -> Candidate:
        """Pick the newest candidate satisfying ``version_range``.

        Raises:
            ResolutionError: when nothing in the catalog matches.
        """
        candidates = self.get_available_versions()
        best = find_best_candidate(version_range, candidates)
        if best is None:
            raise_no_satisfied_version(version_range, [c.version for c in candidates])
        logger.debug("%s resolved %s to %s", self.distribution, version_range, best.version)
        return best
