"""JetBrains Runtime, resolved from the GitHub releases of JetBrains/JetBrainsRuntime."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional
from urllib.parse import urlencode

import requests

from constants import Constants
from common.http_client import get_json, github_headers
from common.logging_utils import Timer
from distributions.base import JavaResolver, distribution_architecture, raise_no_satisfied_version
from versioning.models import Candidate
from versioning.semver import find_best_candidate

logger = logging.getLogger(__name__)


def parse_tag(tag: str) -> Optional[Dict[str, str]]:
    """Split a release tag into ``semver`` and ``build``.

    Tags come in three shapes: ``jbr-release-21.0.3b465.3``,
    ``jb11_0_11-b87.7`` and ``jbr11_0_15b2043.56``.
    """
    dashes = tag.count("-")
    if dashes == 2:
        vstring = tag[tag.rfind("-") + 1:]
    elif dashes == 1:
        vstring = tag[2:].replace("-", "").replace("_", ".")
    elif dashes == 0:
        vstring = tag[3:]
    else:
        return None

    semver, _, build = vstring.partition("b")
    if not build:
        return None
    return {"semver": semver.replace("_", "."), "build": build}


def next_page_url(headers: Dict[str, str]) -> Optional[str]:
    """URL of the ``rel="next"`` entry of a GitHub ``Link`` header."""
    link = headers.get("Link") or headers.get("link")
    if not link:
        return None
    for entry in requests.utils.parse_header_links(link):
        if entry.get("rel") == "next":
            return entry.get("url")
    return None


class JetBrainsResolver(JavaResolver):
    """Resolver for the JetBrains Runtime (JBR with JCEF)."""

    distribution = "JetBrains"

    def _platform_option(self) -> str:
        return {"darwin": "osx", "win32": "windows"}.get(self.platform, self.platform)

    def _fetch_releases(self) -> List[Dict]:
        url: Optional[str] = f"{Constants.JETBRAINS_RELEASES_URL}?{urlencode({'per_page': Constants.GITHUB_PER_PAGE, 'page': 1})}"
        logger.debug("Gathering available versions from '%s'", url)
        releases: List[Dict] = []
        with Timer() as t:
            while url:
                _, headers, page = get_json(url, headers=github_headers("application/vnd.github+json"))
                if not page:
                    break
                releases.extend(page)
                url = next_page_url(headers)
        logger.debug("Retrieving available versions for JBR took %d ms", t.duration_ms())
        return releases

    def _versions(self) -> List[Dict[str, str]]:
        platform = self._platform_option()
        arch = distribution_architecture(self.architecture)
        versions = []
        for release in self._fetch_releases():
            tag = release.get("tag_name", "")
            parsed = parse_tag(tag)
            if parsed is None:
                logger.debug("Skipping unrecognized tag_name: %s", tag)
                continue
            semver, build = parsed["semver"], parsed["build"]
            versions.append({
                "tag_name": tag,
                "version": f"{semver}+{build}",
                "url": (
                    f"{Constants.JETBRAINS_DOWNLOAD_BASE}/jbrsdk_jcef-{semver}-{platform}-{arch}-b{build}.tar.gz"
                ),
            })
        return versions

    def get_available_versions(self) -> List[Candidate]:
        return [Candidate(version=v["version"], url=v["url"]) for v in self._versions()]

    def find_package_for_download(self, version_range: str) -> Candidate:
        versions = self._versions()
        candidates = [Candidate(version=v["version"], url=v["url"]) for v in versions]
        best = find_best_candidate(version_range, candidates)
        if best is None:
            raise_no_satisfied_version(version_range, [v["tag_name"] for v in versions])
        return best
