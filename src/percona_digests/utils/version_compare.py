"""Ordering for the mixed version formats found in Percona release notes.

Versions such as ``8.0.42-33.1``, ``2.8.15`` or
``2.7.0-ppg17.5.2-postgres-gis3.3.8`` are neither PEP 440 nor strict semver,
so they are ordered segment by segment instead.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SEGMENT_SPLIT = re.compile(r"[-.]")

# Versions are padded to at least this many segments before comparison.
MIN_SEGMENTS = 10

SegmentKey = tuple[int, int | str]

# Numeric zero; sorts below every textual segment.
_PAD: SegmentKey = (0, 0)


def segment_key(segment: str) -> SegmentKey:
    """Numeric segments sort as ``(0, n)``, everything else as ``(1, text)``."""
    if segment.isdigit() and segment.isascii():
        return (0, int(segment))
    return (1, segment)


def version_key(version: str) -> tuple[SegmentKey, ...]:
    """Return the comparable key for a version string.

    >>> version_key("8.0.42-33.1")[:6]
    ((0, 8), (0, 0), (0, 42), (0, 33), (0, 1), (0, 0))
    """
    keys = [segment_key(part) for part in _SEGMENT_SPLIT.split(version)]
    keys.extend([_PAD] * (MIN_SEGMENTS - len(keys)))
    return tuple(keys)


def latest_version(versions: Iterable[str]) -> str | None:
    """Return the greatest version, or None for an empty input.

    Versions with identical keys (``1.0`` and ``1.0.0``) are ordered by their
    raw string so the result does not depend on input order.
    """
    candidates = list(versions)
    if not candidates:
        return None
    return max(candidates, key=lambda v: (version_key(v), v))


def sort_versions(versions: Iterable[str]) -> list[str]:
    return sorted(versions, key=lambda v: (version_key(v), v))
