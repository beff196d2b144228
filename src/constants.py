"""Constants used in the project."""

import os
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    SETUP_FAILED = 1
    CONNECTION_ERROR = 2
    CONFIG_ERROR = 3


class JavaDistribution(Enum):
    """Distribution names accepted by the distribution factory.

    Args:
        Enum (string): Distribution names accepted on the command line.
    """

    ADOPT = "adopt"
    ADOPT_HOTSPOT = "adopt-hotspot"
    ADOPT_OPENJ9 = "adopt-openj9"
    TEMURIN = "temurin"
    ZULU = "zulu"
    LIBERICA = "liberica"
    JDK_FILE = "jdkfile"
    MICROSOFT = "microsoft"
    SEMERU = "semeru"
    CORRETTO = "corretto"
    ORACLE = "oracle"
    DRAGONWELL = "dragonwell"
    SAPMACHINE = "sapmachine"
    GRAALVM = "graalvm"
    JETBRAINS = "jetbrains"
    KONA = "kona"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SUPPORTED_DISTRIBUTIONS = [d.value for d in JavaDistribution]
    SUPPORTED_PACKAGE_TYPES = ["jdk", "jre", "jdk+fx", "jre+fx", "jdk+crac", "jre+crac"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "SETUP_JAVA_LOG_LEVEL"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    DOWNLOAD_TIMEOUT = 300
    DOWNLOAD_CHUNK_SIZE = 1024 * 1024
    USER_AGENT = "setup-java-py"

    HTTP_RETRY_MAX = int(os.environ.get("SETUP_JAVA_HTTP_RETRY_MAX", "3"))
    HTTP_RETRY_BASE_DELAY_SEC = 0.3

    # Toolcache layout
    ENV_TOOLCACHE = "RUNNER_TOOL_CACHE"
    ENV_TEMP = "RUNNER_TEMP"
    DEFAULT_TOOLCACHE_DIR = os.path.join(os.path.expanduser("~"), ".setup-java", "toolcache")
    TOOLCACHE_PREFIX = "Java"
    MACOS_JAVA_CONTENT_POSTFIX = os.path.join("Contents", "Home")

    # GitHub
    GITHUB_API_BASE = "https://api.github.com"
    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
    GITHUB_RAW_ACCEPT = "application/vnd.github.VERSION.raw"
    GITHUB_PER_PAGE = 100

    # Vendor catalogs
    ADOPTIUM_API_BASE = "https://api.adoptium.net/v3"
    ADOPTOPENJDK_API_BASE = "https://api.adoptopenjdk.net/v3"
    ADOPTIUM_PAGE_SIZE = 20
    ADOPTIUM_VERSION_RANGE = "[1.0,100.0]"
    ZULU_API_URL = "https://api.azul.com/zulu/download/community/v1.0/bundles/"
    LIBERICA_API_URL = "https://api.bell-sw.com/v1/liberica/releases"
    MICROSOFT_MANIFEST_REPO = "actions/setup-java"
    MICROSOFT_MANIFEST_PATH = "src/distributions/microsoft/microsoft-openjdk-versions.json"
    MICROSOFT_MANIFEST_REF = "main"
    CORRETTO_INDEX_URL = "https://corretto.github.io/corretto-downloads/latest_links/indexmap_with_checksum.json"
    CORRETTO_DOWNLOAD_BASE = "https://corretto.aws"
    DRAGONWELL_PRIMARY_URL = "https://dragonwell-jdk.io/map_with_checksum.json"
    DRAGONWELL_BACKUP_URL = (
        "https://api.github.com/repos/dragonwell-releng/dragonwell-setup-java/contents/releases.json?ref=main"
    )
    GRAALVM_DL_BASE = "https://download.oracle.com/graalvm"
    GRAALVM_EA_REPO = "graalvm/oracle-graalvm-ea-builds"
    ORACLE_DL_BASE = "https://download.oracle.com/java"
    JETBRAINS_RELEASES_URL = "https://api.github.com/repos/JetBrains/JetBrainsRuntime/releases"
    JETBRAINS_DOWNLOAD_BASE = "https://cache-redirector.jetbrains.com/intellij-jbr"
    KONA_RELEASES_URL = "https://tencent.github.io/konajdk/releases/kona-v1.json"
    SAPMACHINE_PRIMARY_URL = "https://sap.github.io/SapMachine/assets/data/sapmachine-releases-all.json"
    SAPMACHINE_BACKUP_URL = (
        "https://api.github.com/repos/SAP/SapMachine/contents/assets/data/sapmachine-releases-all.json?ref=gh-pages"
    )
