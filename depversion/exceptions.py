"""Custom exceptions for the dependency version checker."""

from __future__ import annotations


class DependencyCheckError(Exception):
    """Base exception for all dependency check errors."""


class NetworkError(DependencyCheckError):
    """Raised when the registry cannot be reached (connect, read, timeout)."""

    def __init__(self, package_name: str, url: str, reason: str):
        self.package_name = package_name
        self.url = url
        self.reason = reason
        super().__init__(f"could not reach {url} for '{package_name}': {reason}")


class HttpStatusError(DependencyCheckError):
    """Raised when the registry answers with anything other than 200."""

    def __init__(self, package_name: str, status_code: int, message: str | None = None):
        self.package_name = package_name
        self.status_code = status_code
        super().__init__(message or f"registry returned HTTP {status_code} for '{package_name}'")


class ParseError(DependencyCheckError):
    """Raised when a manifest is not JSON or lacks the expected structure."""

    def __init__(self, package_name: str, detail: str):
        self.package_name = package_name
        self.detail = detail
        super().__init__(f"invalid manifest for '{package_name}': {detail}")


class ManifestNotFoundError(HttpStatusError):
    """Raised when no package names are given and there is no local package.json."""

    def __init__(self, path: str):
        self.path = path
        super().__init__("package.json", 404, f"no package.json found at {path}")
