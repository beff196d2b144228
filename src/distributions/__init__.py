"""Java distributions: one resolver per vendor plus the shared installer."""

from .base import JavaResolver
from .installer import JavaInstaller
from .factory import get_java_distribution

__all__ = [
    "JavaResolver",
    "JavaInstaller",
    "get_java_distribution",
]
