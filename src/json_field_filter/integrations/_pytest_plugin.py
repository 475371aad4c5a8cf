"""Fixtures that assert on filtered JSON inside a test suite.

Registered under the ``pytest11`` entry point, so installing json-field-filter
is enough to make ``assert_json_filtered`` available in every test module.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_field_filter import FilterType, filter_json


@pytest.fixture(scope="session")
def assert_json_filtered() -> Any:
    """Return a helper that filters a document and compares it with ``expected``.

    One helper serves the whole session: each call goes through
    ``filter_json``, which builds its own filter and parser.

    Example::

        def test_public_fields(assert_json_filtered):
            assert_json_filtered({"id": 1, "secret": "x"}, "id", {"id": 1})

        def test_redaction(assert_json_filtered):
            assert_json_filtered(
                {"id": 1, "secret": "x"}, "secret", {"id": 1},
                filter_type=FilterType.EXCLUSION,
            )

    Returns:
        A callable ``_assert(source, expression, expected, filter_type=INCLUSION)``
        that raises ``AssertionError`` when the filtered value differs from
        ``expected``.
    """

    def _assert(
        source: Any,
        expression: str | None,
        expected: Any,
        filter_type: FilterType | str = FilterType.INCLUSION,
    ) -> None:
        """Assert that filtering ``source`` by ``expression`` yields ``expected``.

        Raises:
            AssertionError: When the filtered value differs, with a message
                including the filter type, expression, source, actual and
                expected values.
        """
        actual = filter_json(source, expression, filter_type=filter_type)
        if actual != expected:
            raise AssertionError(
                f"Filtered JSON does not match: "
                f"filter={filter_type} expression={expression!r}\n"
                f"  source:   {source}\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
