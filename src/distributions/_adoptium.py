"""Paged catalog client for the Adoptium-style v3 assets API.

Temurin (api.adoptium.net), AdoptOpenJDK and IBM Semeru (api.adoptopenjdk.net)
share this API. It exposes no page count, so pages are requested until one
comes back empty.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List
from urllib.parse import quote, urlencode

from constants import Constants
from common.http_client import get_json
from common.logging_utils import Timer, safe_url
from versioning.models import Candidate

logger = logging.getLogger(__name__)


def adoptium_platform(platform: str) -> str:
    return {"darwin": "mac", "win32": "windows"}.get(platform, platform)


def fetch_assets(api_base: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
    """Collect every release entry of ``/assets/version/[1.0,100.0]``."""
    query = {
        "project": "jdk",
        "heap_size": "normal",
        "sort_method": "DEFAULT",
        "sort_order": "DESC",
    }
    query.update(params)
    base_url = f"{api_base}/assets/version/{quote(Constants.ADOPTIUM_VERSION_RANGE)}"

    releases: List[Dict[str, Any]] = []
    page = 0
    with Timer() as t:
        while True:
            url = f"{base_url}?{urlencode({**query, 'page_size': Constants.ADOPTIUM_PAGE_SIZE, 'page': page})}"
            if page == 0:
                logger.debug("Gathering available versions from '%s'", safe_url(url))
            _, _, data = get_json(url)
            if not data:
                break
            releases.extend(data)
            page += 1
    logger.debug("Retrieved %d releases from %s in %d ms", len(releases), api_base, t.duration_ms())
    return releases


def project_candidates(releases: List[Dict[str, Any]], *, stable: bool) -> List[Candidate]:
    """Keep releases that ship binaries; the first binary's package is used."""
    candidates = []
    for item in releases:
        binaries = item.get("binaries") or []
        if not binaries:
            continue
        version = item["version_data"]["semver"]
        if not stable:
            # 17.0.0-beta+33.0.202107301459 -> 17.0.0+33.0.202107301459
            version = version.replace("-beta+", "+")
        candidates.append(Candidate(version=version, url=binaries[0]["package"]["link"]))
    return candidates
