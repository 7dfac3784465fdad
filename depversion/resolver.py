"""Resolve the latest version of every dependency referenced by the requested packages."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from depversion.fetcher import gather_fail_fast
from depversion.models import PackageManifest, VersionTable
from depversion.registry_client import RegistryClient

log = structlog.get_logger("depversion.resolver")


def seed_version_table(manifests: Sequence[PackageManifest]) -> VersionTable:
    """Start the table with the requested packages' own, already known versions."""
    return {manifest.name: manifest.version for manifest in manifests}


def mark_unresolved(manifests: Sequence[PackageManifest], table: VersionTable) -> VersionTable:
    """Add a ``None`` placeholder for each referenced name that is not a key yet."""
    for manifest in manifests:
        for name in manifest.dependency_names():
            table.setdefault(name, None)
    return table


def unresolved_names(table: VersionTable) -> list[str]:
    return [name for name, version in table.items() if version is None]


async def resolve_versions(
    client: RegistryClient, manifests: Sequence[PackageManifest]
) -> VersionTable:
    """Build the complete name -> latest version table.

    Each distinct dependency name is fetched exactly once, and packages that
    were themselves requested are never fetched again.
    """
    table = mark_unresolved(manifests, seed_version_table(manifests))
    pending = unresolved_names(table)
    log.debug("resolver.pending", requested=len(manifests), pending=len(pending))

    versions = await gather_fail_fast(client.fetch_latest_version(name) for name in pending)
    table.update(zip(pending, versions))

    log.info("resolver.resolved", count=len(table))
    return table
