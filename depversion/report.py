"""Console and JSON rendering of a report."""

from __future__ import annotations

import json

from depversion.models import Report


def render_text(report: Report) -> str:
    if not report:
        return "All dependencies are up to date."

    lines: list[str] = []
    for package_name, entries in report.items():
        lines.append(f"+ {package_name}:")
        for entry in entries:
            lines.append(f"| + {entry.name}")
            lines.append(f"| | + using: {entry.using}")
            lines.append(f"| | + latest: {entry.latest}")
    return "\n".join(lines)


def render_json(report: Report) -> str:
    """``{package: [{dependency: {"using": ..., "latest": ...}}, ...]}``"""
    rows = {
        package_name: [entry.as_dict() for entry in entries]
        for package_name, entries in report.items()
    }
    return json.dumps(rows, indent=2)
