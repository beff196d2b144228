"""BellSoft Liberica builds from api.bell-sw.com."""
from __future__ import annotations

import logging
from typing import Any, Dict, List
from urllib.parse import urlencode

from constants import Constants
from common.errors import ConfigurationError
from common.http_client import get_json
from common.logging_utils import safe_url
from distributions.base import JavaResolver, distribution_architecture
from versioning.models import Candidate

logger = logging.getLogger(__name__)

SUPPORTED_PLATFORMS = "'linux', 'linux-musl', 'macos', 'solaris', 'windows'"
SUPPORTED_ARCHITECTURES = "'x86', 'x64', 'armv7', 'aarch64', 'ppc64le'"

_ARCHITECTURE_OPTIONS = {
    "x86": {"bitness": "32", "arch": "x86"},
    "x64": {"bitness": "64", "arch": "x86"},
    "armv7": {"bitness": "32", "arch": "arm"},
    "aarch64": {"bitness": "64", "arch": "arm"},
    "ppc64le": {"bitness": "64", "arch": "ppc"},
}

_PLATFORMS = {
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
    "linux": "linux",
    "sunos5": "solaris",
}


def liberica_version(item: Dict[str, Any]) -> str:
    main = f"{item['featureVersion']}.{item['interimVersion']}.{item['updateVersion']}"
    if item.get("buildVersion", 0) != 0:
        return f"{main}+{item['buildVersion']}"
    return main


class LibericaResolver(JavaResolver):
    """Resolver for Liberica; ``+fx`` package types map to the ``-full`` bundles."""

    distribution = "Liberica"

    def _architecture_options(self) -> Dict[str, str]:
        arch = distribution_architecture(self.architecture)
        if arch == "arm":
            arch = "armv7"
        try:
            return _ARCHITECTURE_OPTIONS[arch]
        except KeyError:
            raise ConfigurationError(
                f"Architecture '{self.architecture}' is not supported. "
                f"Supported architectures: {SUPPORTED_ARCHITECTURES}"
            ) from None

    def _platform_option(self) -> str:
        try:
            return _PLATFORMS[self.platform]
        except KeyError:
            raise ConfigurationError(
                f"Platform '{self.platform}' is not supported. Supported platforms: {SUPPORTED_PLATFORMS}"
            ) from None

    def _bundle_type(self) -> str:
        bundle_type, _, feature = self.package_type.partition("+")
        return f"{bundle_type}-full" if "fx" in feature else bundle_type

    def available_versions_url(self) -> str:
        params = {"os": self._platform_option(), "bundle-type": self._bundle_type()}
        params.update(self._architecture_options())
        params.update({
            "build-type": "all" if self.stable else "ea",
            "installation-type": "archive",
            "fields": "downloadUrl,version,featureVersion,interimVersion,updateVersion,buildVersion",
        })
        return f"{Constants.LIBERICA_API_URL}?{urlencode(params)}"

    def get_available_versions(self) -> List[Candidate]:
        url = self.available_versions_url()
        logger.debug("Gathering available versions from '%s'", safe_url(url))
        _, _, data = get_json(url)
        return [Candidate(version=liberica_version(item), url=item["downloadUrl"]) for item in data or []]
