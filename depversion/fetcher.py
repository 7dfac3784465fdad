"""Concurrent manifest fetching with an all-or-nothing join."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from typing import TypeVar

import structlog

from depversion.models import PackageManifest
from depversion.registry_client import RegistryClient

log = structlog.get_logger("depversion.fetcher")

T = TypeVar("T")


async def gather_fail_fast(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Run *aws* concurrently and return their results in order.

    The first failure is re-raised as soon as it happens. Siblings still
    in flight at that point are cancelled and awaited, so no request
    outlives the call.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        pending = [t for t in tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            log.debug("fetcher.cancelled_siblings", count=len(pending))
            await asyncio.gather(*pending, return_exceptions=True)
        raise


async def fetch_all(client: RegistryClient, package_names: Iterable[str]) -> list[PackageManifest]:
    """Fetch the latest manifest of every requested package in parallel.

    Repeated names are fetched once; the result follows first-occurrence order.
    """
    names = list(dict.fromkeys(package_names))
    manifests = await gather_fail_fast(client.fetch_manifest(name) for name in names)
    log.info("fetcher.fetched", count=len(manifests))
    return manifests
