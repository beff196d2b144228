"""Unpacking of downloaded JDK archives."""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tarfile
import uuid
import zipfile
from typing import Optional

from common.errors import SetupJavaError
from common.http_client import temp_directory

logger = logging.getLogger(__name__)


def archive_extension(path: str) -> str:
    """Infer the archive type from a file name (``tar.gz``, ``zip``, ...)."""
    lowered = path.lower()
    if lowered.endswith(".tar.gz") or lowered.endswith(".tgz"):
        return "tar.gz"
    ext = os.path.splitext(lowered)[1]
    return ext[1:] if ext.startswith(".") else ext


def _extract_tar(path: str, dest: str) -> None:
    with tarfile.open(path, "r:*") as tar:
        if hasattr(tarfile, "tar_filter"):
            tar.extractall(dest, filter="tar")
        else:
            tar.extractall(dest)


def _extract_zip(path: str, dest: str) -> None:
    with zipfile.ZipFile(path) as zf:
        for info in zf.infolist():
            extracted = zf.extract(info, dest)
            # zipfile drops unix permissions; restore the executable bits
            mode = (info.external_attr >> 16) & 0o777
            if mode and not info.is_dir():
                os.chmod(extracted, mode)


def _extract_7z(path: str, dest: str) -> None:
    seven_zip = shutil.which("7z") or shutil.which("7za")
    if not seven_zip:
        raise SetupJavaError("7z executable was not found on PATH")
    try:
        subprocess.run([seven_zip, "x", path, f"-o{dest}", "-y"], check=True, capture_output=True)
    except subprocess.CalledProcessError as exc:
        raise SetupJavaError(f"Failed to extract {path} with 7z (exit code {exc.returncode})") from exc


_EXTRACTORS = {
    "tar": _extract_tar,
    "tar.gz": _extract_tar,
    "zip": _extract_zip,
    "7z": _extract_7z,
}


def extract_jdk_file(tool_path: str, extension: Optional[str] = None) -> str:
    """Extract ``tool_path`` into a fresh directory under the runner temp dir.

    Args:
        tool_path: Archive on disk.
        extension: Archive type; inferred from the file name when omitted.

    Returns:
        Path of the directory the archive was extracted into.

    Raises:
        SetupJavaError: for unknown archive types or a failing extractor.
    """
    extension = extension or archive_extension(tool_path)
    extractor = _EXTRACTORS.get(extension)
    if extractor is None:
        raise SetupJavaError(f"Unknown archive type {extension}")

    dest = os.path.join(temp_directory(), str(uuid.uuid4()))
    os.makedirs(dest, exist_ok=True)
    logger.info("Extracting Java archive...")
    logger.debug("Extracting %s (%s) to %s", tool_path, extension, dest)
    extractor(tool_path, dest)
    return dest
