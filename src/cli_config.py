"""YAML configuration support for the CLI.

A ``--config`` file supplies defaults for the command line inputs and may
tune runtime constants. Precedence: CLI flags, then the YAML file, then the
environment and built-in defaults held by ``Constants``. The ``toolcache``
key is only used when ``RUNNER_TOOL_CACHE`` is unset.

Example::

    java-version: ["11", "17"]
    distribution: temurin
    java-package: jdk
    check-latest: false
    http:
      retry_max: 5
      request_timeout: 60
    toolcache: /opt/hostedtoolcache
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from common.errors import ConfigurationError

logger = logging.getLogger(__name__)

# YAML key -> argparse dest
_INPUT_KEYS = {
    "java-version": "JAVA_VERSION",
    "java-version-file": "JAVA_VERSION_FILE",
    "distribution": "DISTRIBUTION",
    "java-package": "JAVA_PACKAGE",
    "architecture": "ARCHITECTURE",
    "jdk-file": "JDK_FILE",
    "check-latest": "CHECK_LATEST",
}


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML config file; an absent path yields an empty mapping.

    Raises:
        ConfigurationError: when the file is missing, unreadable or not a mapping.
    """
    if not config_path:
        return {}
    if not os.path.isfile(config_path):
        raise ConfigurationError(f"Config file not found: {config_path}")
    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to load config {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    logger.debug("Loaded config from %s", config_path)
    return data


def apply_config_defaults(args, config: Dict[str, Any]) -> None:
    """Fill CLI inputs the user did not pass from ``config``."""
    for key, dest in _INPUT_KEYS.items():
        if key not in config:
            continue
        current = getattr(args, dest, None)
        if current not in (None, [], ""):
            continue
        value = config[key]
        if dest == "JAVA_VERSION":
            value = [str(v) for v in value] if isinstance(value, list) else [str(value)]
        elif dest == "CHECK_LATEST":
            value = bool(value)
        else:
            value = str(value)
        setattr(args, dest, value)


def apply_runtime_overrides(config: Dict[str, Any]) -> None:
    """Apply tunables from the ``http`` section and the ``toolcache`` root."""
    http_cfg = config.get("http") or {}
    try:
        if http_cfg.get("retry_max") is not None:
            Constants.HTTP_RETRY_MAX = max(1, int(http_cfg["retry_max"]))
        if http_cfg.get("request_timeout") is not None:
            Constants.REQUEST_TIMEOUT = int(http_cfg["request_timeout"])
        if http_cfg.get("download_timeout") is not None:
            Constants.DOWNLOAD_TIMEOUT = int(http_cfg["download_timeout"])
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid http setting in config: {exc}") from exc

    toolcache = config.get("toolcache")
    if toolcache and not os.environ.get(Constants.ENV_TOOLCACHE):
        os.environ[Constants.ENV_TOOLCACHE] = str(toolcache)
