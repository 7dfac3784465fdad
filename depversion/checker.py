"""DependencyVersionChecker — fetch manifests, resolve versions, report outdated ranges."""

from __future__ import annotations

from collections.abc import Sequence

import httpx
import structlog

from depversion.core.config import CheckerConfig
from depversion.fetcher import fetch_all
from depversion.models import Report
from depversion.outdated import check_outdated
from depversion.registry_client import RegistryClient
from depversion.resolver import resolve_versions

log = structlog.get_logger("depversion.checker")


class DependencyVersionChecker:
    """Reports which dependencies of npm packages are behind their latest release."""

    def __init__(
        self,
        config: CheckerConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or CheckerConfig()
        self._transport = transport

    async def check(self, *package_names: str) -> Report:
        """Pipeline: fetch manifests -> resolve latest versions -> compare ranges.

        The first error from any stage propagates; there is no partial report.
        Without package names the report is empty and nothing is fetched.
        """
        if not package_names:
            log.info("checker.no_packages")
            return {}

        log.info("checker.start", packages=list(package_names), registry=self.config.registry)
        async with RegistryClient(
            self.config.registry,
            timeout=self.config.timeout,
            transport=self._transport,
        ) as client:
            manifests = await fetch_all(client, package_names)
            table = await resolve_versions(client, manifests)

        report = check_outdated(manifests, table)
        log.info(
            "checker.done",
            packages=len(manifests),
            outdated=sum(len(entries) for entries in report.values()),
        )
        return report


async def check(package_names: Sequence[str], config: CheckerConfig | None = None) -> Report:
    """Convenience wrapper around :meth:`DependencyVersionChecker.check`."""
    return await DependencyVersionChecker(config).check(*package_names)
