"""AdoptOpenJDK builds from api.adoptopenjdk.net (HotSpot and OpenJ9)."""
from __future__ import annotations

from typing import List

from constants import Constants
from distributions import _adoptium
from distributions.base import JavaResolver
from versioning.models import Candidate


class AdoptResolver(JavaResolver):
    """Resolver for AdoptOpenJDK; ``jvm_impl`` selects HotSpot or OpenJ9."""

    def __init__(self, options, *, jvm_impl: str = "hotspot", platform=None):
        super().__init__(options, platform=platform)
        self.jvm_impl = jvm_impl
        self.distribution = "Adopt-OpenJ9" if jvm_impl == "openj9" else "Adopt-Hotspot"

    def get_available_versions(self) -> List[Candidate]:
        releases = _adoptium.fetch_assets(
            Constants.ADOPTOPENJDK_API_BASE,
            {
                "vendor": "adoptopenjdk",
                "jvm_impl": self.jvm_impl,
                "os": _adoptium.adoptium_platform(self.platform),
                "architecture": self.architecture,
                "image_type": self.package_type,
                "release_type": "ga" if self.stable else "ea",
            },
        )
        return _adoptium.project_candidates(releases, stable=True)
