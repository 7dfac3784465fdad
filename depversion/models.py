"""Data models for the dependency version checker."""

from __future__ import annotations

from dataclasses import dataclass

# Dependency name -> latest version; None marks a name not resolved yet.
VersionTable = dict[str, str | None]


@dataclass(frozen=True)
class PackageManifest:
    """The latest published manifest of a requested package."""

    name: str
    version: str
    dependencies: dict[str, str] | None = None
    dev_dependencies: dict[str, str] | None = None

    def dependency_names(self) -> list[str]:
        """Names of dependencies followed by dev dependencies, in manifest order."""
        names = list(self.dependencies or {})
        names.extend(self.dev_dependencies or {})
        return names


@dataclass(frozen=True)
class OutdatedEntry:
    """A declared dependency whose latest version falls outside its range."""

    name: str
    using: str
    latest: str

    def as_dict(self) -> dict[str, dict[str, str]]:
        return {self.name: {"using": self.using, "latest": self.latest}}


# Requested package name -> outdated entries (dependencies first, then dev).
Report = dict[str, list[OutdatedEntry]]
