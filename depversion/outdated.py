"""Compare declared ranges against resolved latest versions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from depversion.models import OutdatedEntry, PackageManifest, Report, VersionTable
from depversion.ranges import satisfies


def outdated_entries(
    declared: Mapping[str, str] | None, table: VersionTable
) -> list[OutdatedEntry]:
    """Entries for each declared dependency whose latest version is out of range."""
    entries: list[OutdatedEntry] = []
    for name, range_expr in (declared or {}).items():
        latest = table.get(name)
        if latest is None:
            raise KeyError(f"no resolved version for dependency {name!r}")
        if satisfies(latest, range_expr):
            continue
        entries.append(OutdatedEntry(name=name, using=range_expr, latest=latest))
    return entries


def check_outdated(manifests: Sequence[PackageManifest], table: VersionTable) -> Report:
    """Build the report. Packages with nothing outdated are left out."""
    report: Report = {}
    for manifest in manifests:
        entries = outdated_entries(manifest.dependencies, table)
        entries.extend(outdated_entries(manifest.dev_dependencies, table))
        if entries:
            report[manifest.name] = entries
    return report
