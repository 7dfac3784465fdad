"""npm semver range satisfaction."""

from __future__ import annotations

import nodesemver


def satisfies(version: str | None, range_expr: str) -> bool:
    """Whether *version* lies within the npm range *range_expr*.

    Follows npm's ``semver.satisfies``: caret, tilde, X-ranges, hyphen
    ranges, comparator sets joined with ``||``, exact versions and ``*``.
    A missing or unparsable version, or a range npm cannot parse (git
    URLs, tags, ``file:`` specs), never satisfies.
    """
    if not version:
        return False
    try:
        return bool(nodesemver.satisfies(version, range_expr))
    except (TypeError, ValueError):
        return False
