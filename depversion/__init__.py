"""Dependency version checker — find npm dependencies that fell behind their latest release."""

from depversion.checker import DependencyVersionChecker, check
from depversion.core.config import CheckerConfig
from depversion.exceptions import (
    DependencyCheckError,
    HttpStatusError,
    ManifestNotFoundError,
    NetworkError,
    ParseError,
)
from depversion.models import OutdatedEntry, PackageManifest, Report, VersionTable

__all__ = [
    "CheckerConfig",
    "DependencyCheckError",
    "DependencyVersionChecker",
    "HttpStatusError",
    "ManifestNotFoundError",
    "NetworkError",
    "OutdatedEntry",
    "PackageManifest",
    "ParseError",
    "Report",
    "VersionTable",
    "check",
]
