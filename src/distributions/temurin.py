"""Eclipse Temurin builds from api.adoptium.net."""
from __future__ import annotations

from typing import List

from constants import Constants
from distributions import _adoptium
from distributions.base import JavaResolver, distribution_architecture
from versioning.models import Candidate


class TemurinResolver(JavaResolver):
    """Resolver for Temurin (HotSpot)."""

    distribution = "Temurin-Hotspot"
    jvm_impl = "hotspot"

    def get_available_versions(self) -> List[Candidate]:
        releases = _adoptium.fetch_assets(
            Constants.ADOPTIUM_API_BASE,
            {
                "vendor": "adoptium",
                "os": _adoptium.adoptium_platform(self.platform),
                "architecture": distribution_architecture(self.architecture),
                "image_type": self.package_type,
                "release_type": "ga" if self.stable else "ea",
                "jvm_impl": self.jvm_impl,
            },
        )
        return _adoptium.project_candidates(releases, stable=self.stable)
