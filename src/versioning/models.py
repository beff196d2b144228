"""Data models for Java version resolution and installation."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from common.errors import ConfigurationError
from versioning.semver import is_valid_range


@dataclass(frozen=True)
class VersionRange:
    """Caller version constraint, normalized once.

    ``version`` is the range handed to the comparator; ``stable`` is False
    when an early-access build was requested.
    """
    raw: str
    version: str
    stable: bool = True

    @classmethod
    def parse(cls, raw: str) -> "VersionRange":
        """Normalize ``raw`` (``17``, ``11.0.3-ea.2``, ``21-ea``, ``x``, ...).

        Raises:
            ConfigurationError: when the result is not a valid semver range.
        """
        version = (raw or "").strip()
        stable = True
        if version.endswith("-ea"):
            version = version[: -len("-ea")]
            stable = False
        elif "-ea." in version:
            # 11.0.3-ea.2 -> 11.0.3+2
            version = version.replace("-ea.", "+", 1)
            stable = False

        if not is_valid_range(version):
            raise ConfigurationError(
                f"The string '{version}' is not valid SemVer notation for a Java version. "
                "Please check README file for code snippets and more detailed information"
            )
        return cls(raw=raw, version=version, stable=stable)


@dataclass(frozen=True)
class Candidate:
    """One downloadable release from a vendor catalog."""
    version: str
    url: str


@dataclass(frozen=True)
class InstallerOptions:
    """Installation request shared by every distribution."""
    version: str
    architecture: str
    package_type: str = "jdk"
    check_latest: bool = False


@dataclass(frozen=True)
class EnvironmentChange:
    """Variables, PATH entries and step outputs that make a JDK the default."""
    variables: Dict[str, str] = field(default_factory=dict)
    path_entries: Tuple[str, ...] = ()
    outputs: Dict[str, str] = field(default_factory=dict)


@dataclass
class InstallResult:
    """Installed JDK location plus the environment change that activates it."""
    version: str
    path: str
    environment: Optional[EnvironmentChange] = None
