"""setup-java-py: install JDK distributions on a CI runner.

Resolves each requested version with the selected distribution, installs it
into the toolcache and applies the resulting environment change. Versions are
installed in the order given, so the last one becomes the default JDK.
"""

import logging
import sys
from typing import List

from args import parse_args
from cli_config import apply_config_defaults, apply_runtime_overrides, load_config
from constants import ExitCodes
from common.environment import apply_environment_change
from common.errors import ConfigurationError, SetupJavaError, TransportError
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from distributions.factory import get_java_distribution
from versioning.models import InstallerOptions, InstallResult
from versioning.version_file import read_version_file

logger = logging.getLogger(__name__)


def resolve_versions(args) -> List[str]:
    """Versions from ``--java-version``, falling back to ``--java-version-file``.

    A distribution named by an ``.sdkmanrc`` file is used when none was given.
    """
    versions = [v for v in (args.JAVA_VERSION or []) if v and v.strip()]
    if versions:
        if args.JAVA_VERSION_FILE:
            logger.warning("Both java-version and java-version-file inputs are specified, only java-version will be used")
        return versions

    if args.JAVA_VERSION_FILE:
        version, file_distribution = read_version_file(args.JAVA_VERSION_FILE, args.DISTRIBUTION)
        if not args.DISTRIBUTION and file_distribution:
            args.DISTRIBUTION = file_distribution
        return [version]

    raise ConfigurationError("java-version or java-version-file input expected")


def install_version(args, version: str) -> InstallResult:
    """Install one version and apply its environment change."""
    options = InstallerOptions(
        version=version,
        architecture=args.ARCHITECTURE or "",
        package_type=args.JAVA_PACKAGE or "jdk",
        check_latest=bool(args.CHECK_LATEST),
    )
    installer = get_java_distribution(args.DISTRIBUTION, options, args.JDK_FILE)
    if installer is None:
        raise ConfigurationError(f"No supported distribution was found for input {args.DISTRIBUTION}")

    result = installer.setup_java()
    apply_environment_change(result.environment)

    logger.info("")
    logger.info("Java configuration:")
    logger.info("  Distribution: %s", args.DISTRIBUTION)
    logger.info("  Version: %s", result.version)
    logger.info("  Path: %s", result.path)
    logger.info("")
    return result


def run(args) -> int:
    """Install every requested version; returns the process exit code."""
    try:
        config = load_config(args.CONFIG)
        apply_config_defaults(args, config)
        apply_runtime_overrides(config)

        versions = resolve_versions(args)
        if not args.DISTRIBUTION:
            raise ConfigurationError("distribution input expected")

        for version in versions:
            install_version(args, version)
    except ConfigurationError as e:
        logging.error("%s", e)
        return ExitCodes.CONFIG_ERROR.value
    except TransportError as e:
        logging.error("%s", e)
        return ExitCodes.CONNECTION_ERROR.value
    except SetupJavaError as e:
        logging.error("%s", e)
        return ExitCodes.SETUP_FAILED.value
    return ExitCodes.SUCCESS.value


def main():
    """Main function of the program."""
    args = parse_args()
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    exit_code = run(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="main",
                outcome="success" if exit_code == ExitCodes.SUCCESS.value else "failure"
            )
        )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
