"""Tests for distribution name to installer mapping."""

import pytest

from constants import Constants
from distributions import JavaInstaller, get_java_distribution
from distributions.adopt import AdoptResolver
from distributions.local import LocalJavaInstaller
from distributions.temurin import TemurinResolver
from versioning.models import InstallerOptions

OPTIONS = InstallerOptions(version="11", architecture="x64", package_type="jdk")


class TestFactory:

    @pytest.mark.parametrize("name", [n for n in Constants.SUPPORTED_DISTRIBUTIONS if n != "jdkfile"])
    def test_every_supported_name_has_an_installer(self, name):
        installer = get_java_distribution(name, OPTIONS, platform="linux")
        assert isinstance(installer, JavaInstaller)
        assert installer.distribution

    def test_unknown_name_returns_none(self):
        assert get_java_distribution("not-a-jdk", OPTIONS) is None

    def test_jdkfile_gets_local_installer(self):
        installer = get_java_distribution("jdkfile", OPTIONS, "/tmp/jdk.tar.gz")
        assert isinstance(installer, LocalJavaInstaller)
        assert installer.jdk_file == "/tmp/jdk.tar.gz"

    @pytest.mark.parametrize("name,expected", [
        ("adopt", "Adopt-Hotspot"),
        ("adopt-hotspot", "Adopt-Hotspot"),
        ("adopt-openj9", "Adopt-OpenJ9"),
    ])
    def test_adopt_aliases(self, name, expected):
        installer = get_java_distribution(name, OPTIONS, platform="linux")
        assert isinstance(installer.resolver, AdoptResolver)
        assert installer.distribution == expected

    def test_platform_is_passed_through(self):
        installer = get_java_distribution("temurin", OPTIONS, platform="darwin")
        assert isinstance(installer.resolver, TemurinResolver)
        assert installer.resolver.platform == "darwin"
        assert installer.toolcache_folder_name == "Java_Temurin-Hotspot_jdk"
