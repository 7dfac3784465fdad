"""Async npm registry client — one GET per package, no retries."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from depversion.core.config import DEFAULT_REGISTRY, DEFAULT_TIMEOUT
from depversion.exceptions import HttpStatusError, NetworkError, ParseError
from depversion.models import PackageManifest

log = structlog.get_logger("depversion.registry")


class RegistryClient:
    """Thin async wrapper around ``GET {registry}/{package}``."""

    def __init__(
        self,
        registry: str = DEFAULT_REGISTRY,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.registry = registry.rstrip("/")
        self._client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RegistryClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    def package_url(self, package_name: str) -> str:
        """URL of a package document; scoped names keep the ``@`` but escape the ``/``."""
        return f"{self.registry}/{quote(package_name, safe='@')}"

    async def fetch_document(self, package_name: str) -> dict[str, Any]:
        """GET the full registry document of *package_name* and parse its JSON body."""
        url = self.package_url(package_name)
        log.debug("registry.fetch", package=package_name, url=url)
        try:
            response = await self._client.get(url)
        except httpx.TransportError as exc:
            log.warning("registry.unreachable", package=package_name, error=str(exc))
            raise NetworkError(package_name, url, str(exc) or type(exc).__name__) from exc

        if response.status_code != 200:
            log.warning("registry.bad_status", package=package_name, status=response.status_code)
            raise HttpStatusError(package_name, response.status_code)

        try:
            document = response.json()
        except ValueError as exc:
            raise ParseError(package_name, "response body is not valid JSON") from exc
        if not isinstance(document, dict):
            raise ParseError(package_name, "response body is not a JSON object")
        return document

    async def fetch_latest_version(self, package_name: str) -> str:
        """Return the version the ``latest`` dist-tag points at."""
        document = await self.fetch_document(package_name)
        return self._latest_version(package_name, document)

    async def fetch_manifest(self, package_name: str) -> PackageManifest:
        """Return the manifest of the latest published version of *package_name*."""
        document = await self.fetch_document(package_name)
        latest = self._latest_version(package_name, document)

        versions = document.get("versions")
        if not isinstance(versions, dict) or not isinstance(versions.get(latest), dict):
            raise ParseError(package_name, f"'versions' has no entry for latest version {latest}")
        info = versions[latest]

        return PackageManifest(
            name=package_name,
            version=latest,
            dependencies=self._dependency_map(package_name, info, "dependencies"),
            dev_dependencies=self._dependency_map(package_name, info, "devDependencies"),
        )

    # ── internal ───────────────────────────────────────────────────────────

    @staticmethod
    def _latest_version(package_name: str, document: dict[str, Any]) -> str:
        dist_tags = document.get("dist-tags")
        latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
        if not isinstance(latest, str) or not latest:
            raise ParseError(package_name, "missing 'dist-tags.latest'")
        return latest

    @staticmethod
    def _dependency_map(
        package_name: str, info: dict[str, Any], field: str
    ) -> dict[str, str] | None:
        """Copy a dependency mapping, keeping manifest order. Absent → None."""
        deps = info.get(field)
        if deps is None:
            return None
        if not isinstance(deps, dict) or not all(isinstance(v, str) for v in deps.values()):
            raise ParseError(package_name, f"'{field}' is not a name -> range mapping")
        return dict(deps)
