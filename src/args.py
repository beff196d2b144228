"""Argument parsing functionality for setup-java-py."""

import argparse
from constants import Constants


def build_parser():
    """Build the argument parser (separated from parsing for tests)."""
    parser = argparse.ArgumentParser(
        prog="setup-java-py",
        description="Install a Java Development Kit distribution on a CI runner",
        add_help=True,
    )

    parser.add_argument("-v", "--java-version",
                        dest="JAVA_VERSION",
                        help="Java version range to install, i.e: 17, 11.0.x, 21-ea. Repeat to install several versions; the last one becomes the default.",
                        action="append", type=str,
                        default=[])
    parser.add_argument("--java-version-file",
                        dest="JAVA_VERSION_FILE",
                        help="Read the version from .java-version, .tool-versions or .sdkmanrc",
                        action="store",
                        type=str)
    parser.add_argument("-d", "--distribution",
                        dest="DISTRIBUTION",
                        help="Java distribution, i.e: temurin, zulu, corretto",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_DISTRIBUTIONS)
    parser.add_argument("-p", "--java-package",
                        dest="JAVA_PACKAGE",
                        help="Package type (default: jdk)",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_PACKAGE_TYPES)
    parser.add_argument("-a", "--architecture",
                        dest="ARCHITECTURE",
                        help="Architecture of the package (default: host architecture)",
                        action="store",
                        type=str)
    parser.add_argument("--jdk-file",
                        dest="JDK_FILE",
                        help="Path to a local JDK archive; requires --distribution jdkfile",
                        action="store",
                        type=str)
    parser.add_argument("--check-latest",
                        dest="CHECK_LATEST",
                        help="Always resolve the newest matching version remotely, even if one is cached.",
                        action="store_true",
                        default=None)
    parser.add_argument("--config",
                        dest="CONFIG",
                        help="Path to a YAML file providing defaults for these options",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
