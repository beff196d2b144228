"""IBM Semeru (OpenJ9) builds published through the AdoptOpenJDK API."""
from __future__ import annotations

from typing import List

from constants import Constants
from common.errors import ConfigurationError
from distributions import _adoptium
from distributions.base import JavaResolver
from versioning.models import Candidate

SUPPORTED_ARCHITECTURES = ["x64", "x86", "ppc64le", "ppc64", "s390x", "aarch64"]


class SemeruResolver(JavaResolver):
    """Resolver for IBM Semeru; stable jdk/jre builds only."""

    distribution = "IBM_Semeru"

    def find_package_for_download(self, version_range: str) -> Candidate:
        if self.architecture not in SUPPORTED_ARCHITECTURES:
            raise ConfigurationError(
                f"Unsupported architecture for IBM Semeru: {self.architecture}, "
                f"the following are supported: {', '.join(SUPPORTED_ARCHITECTURES)}"
            )
        if not self.stable:
            raise ConfigurationError("IBM Semeru does not provide builds for early access versions")
        if self.package_type not in ("jdk", "jre"):
            raise ConfigurationError("IBM Semeru only provide `jdk` and `jre` package types")
        return super().find_package_for_download(version_range)

    def get_available_versions(self) -> List[Candidate]:
        releases = _adoptium.fetch_assets(
            Constants.ADOPTOPENJDK_API_BASE,
            {
                "vendor": "ibm",
                "jvm_impl": "openj9",
                "os": _adoptium.adoptium_platform(self.platform),
                "architecture": self.architecture,
                "image_type": self.package_type,
                "release_type": "ga",
            },
        )
        return _adoptium.project_candidates(releases, stable=True)
