"""Apply an EnvironmentChange to the current process and the CI runner.

On GitHub Actions the change is written through the file commands named by
``GITHUB_ENV``, ``GITHUB_PATH`` and ``GITHUB_OUTPUT``; the current process
environment is updated in every case.
"""
from __future__ import annotations

import logging
import os
import uuid

from versioning.models import EnvironmentChange

logger = logging.getLogger(__name__)


def _append_key_value(file_path: str, key: str, value: str) -> None:
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(file_path, "a", encoding="utf-8") as fh:
        fh.write(f"{key}<<{delimiter}{os.linesep}{value}{os.linesep}{delimiter}{os.linesep}")


def export_variable(name: str, value: str) -> None:
    os.environ[name] = value
    env_file = os.environ.get("GITHUB_ENV")
    if env_file:
        _append_key_value(env_file, name, value)


def add_path(entry: str) -> None:
    path_file = os.environ.get("GITHUB_PATH")
    if path_file:
        with open(path_file, "a", encoding="utf-8") as fh:
            fh.write(f"{entry}{os.linesep}")
    os.environ["PATH"] = f"{entry}{os.pathsep}{os.environ.get('PATH', '')}"


def set_output(name: str, value: str) -> None:
    output_file = os.environ.get("GITHUB_OUTPUT")
    if output_file:
        _append_key_value(output_file, name, value)
    else:
        logger.debug("Output %s=%s", name, value)


def apply_environment_change(change: EnvironmentChange) -> None:
    """Export variables, prepend path entries and set step outputs."""
    for name, value in change.variables.items():
        export_variable(name, value)
    for entry in change.path_entries:
        add_path(entry)
    for name, value in change.outputs.items():
        set_output(name, value)
