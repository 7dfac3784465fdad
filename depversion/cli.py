"""CLI entry point: dvc.

Usage:
    dvc                                  # check the package.json in the cwd
    dvc express koa                      # check published packages
    dvc --registry https://r.example.com left-pad
    dvc --json express
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click
import structlog

from depversion.checker import DependencyVersionChecker
from depversion.core.config import CheckerConfig
from depversion.core.logging import setup_logging
from depversion.exceptions import (
    DependencyCheckError,
    HttpStatusError,
    ManifestNotFoundError,
    NetworkError,
    ParseError,
)
from depversion.report import render_json, render_text

log = structlog.get_logger("depversion.cli")

_USAGE = (
    "usage:\n"
    "  dvc [--registry <url>] [<pkg-name>[ <pkg-name>]]\n"
    "  or call it within a node module"
)

_ERROR_LABELS: dict[type[DependencyCheckError], str] = {
    NetworkError: "network error",
    HttpStatusError: "registry error",
    ParseError: "invalid response",
}


def _read_local_package_name(directory: Path) -> str:
    """Return ``name`` from ``package.json`` in *directory*."""
    path = directory / "package.json"
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise ManifestNotFoundError(str(path)) from None
    except OSError as exc:
        raise ParseError(str(path), f"could not be read ({exc.strerror or exc})") from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ParseError(str(path), "not valid UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise ParseError(str(path), f"not valid JSON ({exc.msg})") from exc
    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name:
        raise ParseError(str(path), "missing 'name'")
    return name


def _error_label(exc: DependencyCheckError) -> str:
    for cls in type(exc).__mro__:
        if cls in _ERROR_LABELS:
            return _ERROR_LABELS[cls]
    return "error"


@click.command()
@click.argument("packages", nargs=-1)
@click.option("--registry", default=None, help="Registry URL (default: $DEPVERSION_REGISTRY or npm)")
@click.option("--timeout", type=float, default=None, help="Per-request timeout in seconds")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    packages: tuple[str, ...],
    registry: str | None,
    timeout: float | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Report dependencies whose latest release is outside the declared range."""
    setup_logging("DEBUG" if verbose else None)

    try:
        config = CheckerConfig.from_env(registry=registry, timeout=timeout)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    try:
        names = list(packages) or [_read_local_package_name(Path.cwd())]
    except ManifestNotFoundError:
        click.echo(_USAGE, err=True)
        sys.exit(2)
    except DependencyCheckError as exc:
        click.echo(f"Error ({_error_label(exc)}): {exc}", err=True)
        sys.exit(1)

    click.echo(f"Checking the dependencies of: {', '.join(names)}", err=True)

    try:
        report = asyncio.run(DependencyVersionChecker(config).check(*names))
    except DependencyCheckError as exc:
        log.debug("cli.failed", error=str(exc), kind=type(exc).__name__)
        click.echo(f"Error ({_error_label(exc)}): {exc}", err=True)
        sys.exit(1)

    click.echo(render_json(report) if as_json else render_text(report))


if __name__ == "__main__":
    main()
