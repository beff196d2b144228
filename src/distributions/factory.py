"""Map a distribution name to a ready-to-run installer."""
from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Optional

from constants import JavaDistribution
from distributions.adopt import AdoptResolver
from distributions.base import JavaResolver
from distributions.corretto import CorrettoResolver
from distributions.dragonwell import DragonwellResolver
from distributions.graalvm import GraalVMResolver
from distributions.installer import JavaInstaller
from distributions.jetbrains import JetBrainsResolver
from distributions.kona import KonaResolver
from distributions.liberica import LibericaResolver
from distributions.local import LocalJavaInstaller
from distributions.microsoft import MicrosoftResolver
from distributions.oracle import OracleResolver
from distributions.sapmachine import SapMachineResolver
from distributions.semeru import SemeruResolver
from distributions.temurin import TemurinResolver
from distributions.zulu import ZuluResolver
from versioning.models import InstallerOptions

RESOLVERS: Dict[str, Callable[..., JavaResolver]] = {
    JavaDistribution.ADOPT.value: partial(AdoptResolver, jvm_impl="hotspot"),
    JavaDistribution.ADOPT_HOTSPOT.value: partial(AdoptResolver, jvm_impl="hotspot"),
    JavaDistribution.ADOPT_OPENJ9.value: partial(AdoptResolver, jvm_impl="openj9"),
    JavaDistribution.TEMURIN.value: TemurinResolver,
    JavaDistribution.ZULU.value: ZuluResolver,
    JavaDistribution.LIBERICA.value: LibericaResolver,
    JavaDistribution.MICROSOFT.value: MicrosoftResolver,
    JavaDistribution.SEMERU.value: SemeruResolver,
    JavaDistribution.CORRETTO.value: CorrettoResolver,
    JavaDistribution.ORACLE.value: OracleResolver,
    JavaDistribution.DRAGONWELL.value: DragonwellResolver,
    JavaDistribution.SAPMACHINE.value: SapMachineResolver,
    JavaDistribution.GRAALVM.value: GraalVMResolver,
    JavaDistribution.JETBRAINS.value: JetBrainsResolver,
    JavaDistribution.KONA.value: KonaResolver,
}


def get_java_distribution(
    distribution_name: str,
    options: InstallerOptions,
    jdk_file: Optional[str] = None,
    *,
    platform: Optional[str] = None,
) -> Optional[JavaInstaller]:
    """Return the installer for ``distribution_name`` or None when it is unknown."""
    if distribution_name == JavaDistribution.JDK_FILE.value:
        return LocalJavaInstaller(options, jdk_file, platform=platform)
    factory = RESOLVERS.get(distribution_name)
    if factory is None:
        return None
    return JavaInstaller(factory(options, platform=platform))
