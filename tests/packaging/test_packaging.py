"""Packaging correctness verification for json-field-filter.

Tests validate:
- Top-level import and the documented public API
- py.typed marker is shipped with the package
- Pytest plugin entry point is registered
- Package metadata is correct
"""

from __future__ import annotations

import importlib
from importlib.metadata import entry_points
from pathlib import Path


class TestPublicApi:
    def test_import_json_field_filter(self) -> None:
        import json_field_filter

        assert hasattr(json_field_filter, "apply_inclusion")
        assert hasattr(json_field_filter, "apply_exclusion")
        assert hasattr(json_field_filter, "select_filter")

    def test_version(self) -> None:
        import json_field_filter

        assert json_field_filter.__version__ == "0.1.0"

    def test_all_exports(self) -> None:
        import json_field_filter

        expected = {
            "ExclusionFilter",
            "FilterType",
            "InclusionFilter",
            "Node",
            "NodeMerger",
            "ParserConfig",
            "PathParseError",
            "PathParser",
            "apply_exclusion",
            "apply_inclusion",
            "create_filter",
            "filter_json",
            "parse_paths",
            "select_filter",
        }
        actual = set(json_field_filter.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )

    def test_all_names_resolve(self) -> None:
        import json_field_filter

        for name in json_field_filter.__all__:
            assert getattr(json_field_filter, name) is not None


class TestPackageData:
    def test_py_typed_marker_present(self) -> None:
        import json_field_filter

        package_dir = Path(json_field_filter.__file__).parent
        assert (package_dir / "py.typed").exists()


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self) -> None:
        """pytest11 entry point must be registered for json-field-filter."""
        eps = [
            ep
            for ep in entry_points(group="pytest11")
            if "json_field_filter" in str(ep.value)
        ]
        assert eps, "No pytest11 entry point found for json-field-filter."

    def test_fixture_available(self) -> None:
        mod = importlib.import_module("json_field_filter.integrations._pytest_plugin")
        assert hasattr(mod, "assert_json_filtered")
        assert callable(mod.assert_json_filtered)
