"""Renovate allowedVersions regex helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable


def allowed_versions_pattern(versions: Iterable[str]) -> str:
    """Build a slash-delimited, anchored alternation of literal versions.

    Renovate treats a value wrapped in ``/.../`` as a regular expression.

    >>> allowed_versions_pattern(["2.8.15", "2.7.0"])
    '/^(2\\\\.8\\\\.15|2\\\\.7\\\\.0)$/'
    """
    escaped = "|".join(re.escape(v) for v in versions)
    return f"/^({escaped})$/"


def union_pattern(version_groups: Iterable[Iterable[str]]) -> str:
    """Pattern for the sorted, deduplicated union of several version lists."""
    merged = sorted({v for group in version_groups for v in group})
    return allowed_versions_pattern(merged)
