"""Read the requested Java version from ``.java-version``, ``.tool-versions`` or ``.sdkmanrc``."""
from __future__ import annotations

import logging
import os
import re
from typing import Optional, Tuple

from common.errors import ConfigurationError
from versioning.semver import get_major, is_valid_range

logger = logging.getLogger(__name__)

# Distributions whose catalogs are keyed by major version only
MAJOR_ONLY_DISTRIBUTIONS = ("corretto",)

# sdkman candidate suffix -> distribution name
SDKMAN_IDENTIFIERS = {
    "tem": "temurin",
    "zulu": "zulu",
    "amzn": "corretto",
    "graal": "graalvm",
    "graalce": "graalvm",
    "librca": "liberica",
    "ms": "microsoft",
    "oracle": "oracle",
    "sapmchn": "sapmachine",
    "jbr": "jetbrains",
    "sem": "semeru",
    "dragonwell": "dragonwell",
    "kona": "kona",
}

_TOOL_VERSIONS_RE = re.compile(
    r"^java\s+(?:\S*-)?v?(?P<version>\d+(?:\.\d+)?(?:\.\d+)?(?:\+\d+)?(?:-ea(?:\.\d+)?)?)\s*$",
    re.MULTILINE,
)
_SDKMANRC_RE = re.compile(r"^java\s*=\s*(?P<version>[^\s-]+(?:-ea(?:\.\d+)?)?)(?:-(?P<identifier>\S+))?\s*$", re.MULTILINE)
_JAVA_VERSION_RE = re.compile(r"(?:^|\s|-)(?P<version>\d+\S*)(?:\s|$)")
_COERCE_RE = re.compile(r"(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def avoid_old_notation(version: str) -> str:
    """``1.8`` -> ``8``."""
    return version[2:] if version.startswith("1.") else version


def coerce(version: str) -> Optional[str]:
    """Extract the first ``major[.minor[.patch]]`` and pad it to three components."""
    match = _COERCE_RE.search(version)
    if not match:
        return None
    return ".".join(part or "0" for part in match.groups())


def get_version_from_file_content(
    content: str, distribution: Optional[str], file_name: str
) -> Tuple[Optional[str], Optional[str]]:
    """Parse a version file.

    Returns:
        Tuple of (version_or_none, distribution_named_by_the_file_or_none).
    """
    base_name = os.path.basename(file_name)
    file_distribution = None

    if base_name == ".tool-versions":
        match = _TOOL_VERSIONS_RE.search(content)
    elif base_name == ".sdkmanrc":
        match = _SDKMANRC_RE.search(content)
        if match and match.group("identifier"):
            identifier = match.group("identifier")
            file_distribution = SDKMAN_IDENTIFIERS.get(identifier)
            if file_distribution is None:
                logger.warning("Unknown sdkman java identifier '%s' in %s", identifier, file_name)
    else:
        first_line = content.strip().splitlines()[0] if content.strip() else ""
        match = _JAVA_VERSION_RE.search(first_line)

    if not match:
        logger.debug("No java version found in %s", file_name)
        return None, file_distribution

    captured = match.group("version").strip()
    logger.debug("Parsed version '%s' from file '%s'", captured, file_name)
    tentative = avoid_old_notation(captured)
    raw_version = tentative.split("-", 1)[0]
    version = tentative if is_valid_range(raw_version) else coerce(tentative)
    if version is None:
        return None, file_distribution

    if (distribution or file_distribution) in MAJOR_ONLY_DISTRIBUTIONS:
        version = str(get_major(version))
    return version, file_distribution


def read_version_file(path: str, distribution: Optional[str]) -> Tuple[str, Optional[str]]:
    """Read and parse ``path``.

    Raises:
        ConfigurationError: when the file is missing or holds no version.
    """
    if not os.path.isfile(path):
        raise ConfigurationError(f"The specified java version file at: {path} does not exist")
    with open(path, "r", encoding="utf-8") as fh:
        content = fh.read()
    version, file_distribution = get_version_from_file_content(content, distribution, path)
    if not version:
        raise ConfigurationError(f"No supported version was found in file {path}")
    return version, file_distribution
