import pytest

from boe_iadb.domain.iadb.catalog import (
    SERIES_CATALOG,
    UnknownSeriesCodeError,
    canonical_code,
    describe,
    is_known_code,
)


def test_describe_known_code():
    assert describe("IUDSOIA") == "Daily Sterling overnight index average (SONIA) rate"


def test_canonical_code_is_identifier_text():
    assert canonical_code("XUDLUSS") == "XUDLUSS"
    assert canonical_code("  xudluss ") == "XUDLUSS"


def test_unknown_code_raises_key_error():
    assert not is_known_code("NOPE123")
    with pytest.raises(UnknownSeriesCodeError):
        describe("NOPE123")
    with pytest.raises(KeyError):
        canonical_code("NOPE123")


def test_catalog_entries_are_non_empty():
    assert len(SERIES_CATALOG) > 200
    for code, desc in SERIES_CATALOG.items():
        assert code == code.strip().upper()
        assert desc.strip()
