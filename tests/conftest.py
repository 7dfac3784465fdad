"""Shared pytest fixtures: an in-memory npm registry served through httpx.MockTransport."""

from __future__ import annotations

import asyncio
from collections import Counter
from typing import Any

import httpx
import pytest

REGISTRY_URL = "https://registry.test"


def package_document(
    name: str,
    version: str,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
) -> dict[str, Any]:
    """A registry document whose ``latest`` tag points at *version*."""
    info: dict[str, Any] = {"name": name, "version": version}
    if dependencies is not None:
        info["dependencies"] = dependencies
    if dev_dependencies is not None:
        info["devDependencies"] = dev_dependencies
    return {"name": name, "dist-tags": {"latest": version}, "versions": {version: info}}


class FakeRegistry:
    """Serves published documents and records how often each package was requested."""

    def __init__(self) -> None:
        self.documents: dict[str, Any] = {}
        self.responses: dict[str, httpx.Response] = {}
        self.unreachable: set[str] = set()
        self.hanging: set[str] = set()
        self.requests: Counter[str] = Counter()

    def publish(
        self,
        name: str,
        version: str,
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
    ) -> None:
        self.documents[name] = package_document(name, version, dependencies, dev_dependencies)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        name = request.url.path.lstrip("/")
        self.requests[name] += 1
        if name in self.hanging:
            await asyncio.Event().wait()
        if name in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if name in self.responses:
            return self.responses[name]
        if name in self.documents:
            return httpx.Response(200, json=self.documents[name])
        return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()
