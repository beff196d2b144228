"""Semantic version helpers with npm range semantics and build-metadata ordering.

Java vendors publish versions such as ``11.0.3+7`` or ``17.0.1.12.1`` whose
build part matters when picking a release. ``semantic_version`` ignores build
metadata for precedence, so ``compare_build`` restores the total order used to
rank candidates.
"""
from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable, List, Optional, Sequence, TypeVar, Union

import semantic_version

T = TypeVar("T")

_NUMERIC = re.compile(r"^\d+$")


def parse_version(version: str) -> Optional[semantic_version.Version]:
    """Parse a full ``major.minor.patch[-pre][+build]`` version or return None."""
    try:
        return semantic_version.Version(str(version).strip())
    except ValueError:
        return None


def is_valid_version(version: str) -> bool:
    return parse_version(version) is not None


def _normalize_range(version_range: str) -> str:
    text = (version_range or "").strip()
    return text or "*"


def is_valid_range(version_range: str) -> bool:
    """True when ``version_range`` is usable as an npm-style range."""
    if parse_version(version_range or "") is not None:
        return True
    try:
        semantic_version.NpmSpec(_normalize_range(version_range))
    except ValueError:
        return False
    return True


def _strip_build(version: semantic_version.Version) -> semantic_version.Version:
    return version.truncate("prerelease")


def satisfies(version_range: str, version: str) -> bool:
    """Check ``version`` against ``version_range``.

    An exact range carrying build metadata (``11.0.2+7``) only matches the
    very same build; every other range follows npm semantics with the build
    part of ``version`` ignored. Invalid input never matches.
    """
    parsed = parse_version(version)
    if parsed is None:
        return False

    exact = parse_version(version_range) if version_range else None
    if exact is not None and exact.build:
        return compare_build(exact, parsed) == 0

    try:
        spec = semantic_version.NpmSpec(_normalize_range(version_range))
    except ValueError:
        return False
    return spec.match(_strip_build(parsed))


def _compare_identifiers(left: Sequence[str], right: Sequence[str]) -> int:
    for a, b in zip(left, right):
        a_num, b_num = bool(_NUMERIC.match(a)), bool(_NUMERIC.match(b))
        if a_num and b_num:
            diff = int(a) - int(b)
            if diff:
                return 1 if diff > 0 else -1
        elif a_num != b_num:
            return -1 if a_num else 1
        elif a != b:
            return 1 if a > b else -1
    return (len(left) > len(right)) - (len(left) < len(right))


def compare_build(
    a: Union[str, semantic_version.Version],
    b: Union[str, semantic_version.Version],
) -> int:
    """Total ordering of two versions including their build metadata.

    Returns -1, 0 or 1. Invalid versions raise ``ValueError``.
    """
    va = a if isinstance(a, semantic_version.Version) else semantic_version.Version(a)
    vb = b if isinstance(b, semantic_version.Version) else semantic_version.Version(b)

    main_a, main_b = (va.major, va.minor, va.patch), (vb.major, vb.minor, vb.patch)
    if main_a != main_b:
        return 1 if main_a > main_b else -1

    if va.prerelease != vb.prerelease:
        if not va.prerelease:
            return 1
        if not vb.prerelease:
            return -1
        result = _compare_identifiers(va.prerelease, vb.prerelease)
        if result:
            return result

    if va.build == vb.build:
        return 0
    if not va.build:
        return -1
    if not vb.build:
        return 1
    return _compare_identifiers(va.build, vb.build)


def convert_version_to_semver(version: Union[str, Iterable[int]]) -> str:
    """Fold a fourth and later numeric component into build metadata.

    ``11.0.3.2.1231421`` becomes ``11.0.3+2.1231421``; a list of numbers such
    as ``[11, 0, 2, 1]`` is joined first. Leading zeros of the main
    components are dropped (``8.312.07.1`` -> ``8.312.7+1``).
    """
    if not isinstance(version, str):
        version = ".".join(str(part) for part in version)
    parts = version.split(".")
    main = ".".join(str(int(p)) if p.isdigit() else p for p in parts[:3])
    if len(parts) > 3:
        return f"{main}+{'.'.join(parts[3:])}"
    return main


def encode_version_for_url(version: str) -> str:
    return version.replace("+", "%2B")


def get_major(version: str) -> int:
    """Leading integer of a version or range (``'17.0.2'`` -> 17)."""
    match = re.match(r"^\D*(\d+)", str(version))
    if not match:
        raise ValueError(f"No major version in '{version}'")
    return int(match.group(1))


def sort_candidates_descending(candidates: List[T], key=lambda c: c.version) -> List[T]:
    """Sort candidates newest first using ``compare_build`` on ``key(candidate)``."""
    return sorted(
        candidates,
        key=cmp_to_key(lambda x, y: compare_build(key(x), key(y))),
        reverse=True,
    )


def find_best_candidate(version_range: str, candidates: List[T], key=lambda c: c.version) -> Optional[T]:
    """Return the newest candidate satisfying ``version_range``, or None."""
    matching = [c for c in candidates if satisfies(version_range, key(c))]
    if not matching:
        return None
    return sort_candidates_descending(matching, key=key)[0]
