"""Tests for the outdated comparison stage (pure, no network)."""

from __future__ import annotations

import pytest

from depversion.models import OutdatedEntry, PackageManifest
from depversion.outdated import check_outdated, outdated_entries


def _manifest(name: str, deps=None, dev=None) -> PackageManifest:
    return PackageManifest(name=name, version="1.0.0", dependencies=deps, dev_dependencies=dev)


class TestOutdatedEntries:
    def test_none_declared(self):
        assert outdated_entries(None, {}) == []

    def test_only_out_of_range_reported(self):
        table = {"lodash": "4.17.21", "left-pad": "2.0.0"}
        entries = outdated_entries({"lodash": "^4.0.0", "left-pad": "^1.0.0"}, table)
        assert entries == [OutdatedEntry(name="left-pad", using="^1.0.0", latest="2.0.0")]

    def test_unresolved_name_is_an_error(self):
        with pytest.raises(KeyError, match="chalk"):
            outdated_entries({"chalk": "^4.0.0"}, {"chalk": None})


class TestCheckOutdated:
    def test_package_without_dependencies_omitted(self):
        assert check_outdated([_manifest("a")], {"a": "1.0.0"}) == {}

    def test_package_with_nothing_outdated_omitted(self):
        manifests = [_manifest("a", deps={"lodash": "^4.0.0"})]
        assert check_outdated(manifests, {"a": "1.0.0", "lodash": "4.17.21"}) == {}

    def test_dependencies_before_dev_dependencies_in_manifest_order(self):
        manifests = [
            _manifest(
                "a",
                deps={"zeta": "^1.0.0", "alpha": "^1.0.0"},
                dev={"mocha": "^9.0.0", "chai": "^3.0.0"},
            )
        ]
        table = {"a": "1.0.0", "zeta": "2.0.0", "alpha": "3.0.0", "mocha": "10.2.0", "chai": "4.3.0"}
        report = check_outdated(manifests, table)
        assert [e.name for e in report["a"]] == ["zeta", "alpha", "mocha", "chai"]

    def test_same_name_in_both_sections_reported_twice(self):
        manifests = [_manifest("a", deps={"x": "^1.0.0"}, dev={"x": "^1.0.0"})]
        report = check_outdated(manifests, {"a": "1.0.0", "x": "2.0.0"})
        assert len(report["a"]) == 2

    def test_each_package_evaluated_independently(self):
        manifests = [
            _manifest("a", deps={"chalk": "^4.0.0"}),
            _manifest("b", deps={"chalk": "^5.0.0"}),
        ]
        report = check_outdated(manifests, {"a": "1.0.0", "b": "1.0.0", "chalk": "5.3.0"})
        assert report == {"a": [OutdatedEntry(name="chalk", using="^4.0.0", latest="5.3.0")]}

    def test_entry_as_dict(self):
        entry = OutdatedEntry(name="left-pad", using="^1.0.0", latest="2.0.0")
        assert entry.as_dict() == {"left-pad": {"using": "^1.0.0", "latest": "2.0.0"}}
