import dataclasses

import pytest

from boe_iadb.domain.iadb.models import IadbDataPoint, IadbSeries


def _series():
    return IadbSeries(
        name="IUDSOIA",
        data=(IadbDataPoint("01/Jan/2000", 1.5), IadbDataPoint("02/Jan/2000", 2.25)),
    )


def test_series_str_lists_points():
    assert str(_series()) == (
        "IADB Series (IUDSOIA)\n"
        "IADB Data Point (01/Jan/2000): 1.5\n"
        "IADB Data Point (02/Jan/2000): 2.25\n"
    )


def test_series_is_immutable():
    s = _series()
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.name = "X"  # type: ignore[misc]


def test_len_and_iter():
    s = _series()
    assert len(s) == 2
    assert [p.value for p in s] == [1.5, 2.25]


def test_to_frame_keeps_order_and_types():
    df = _series().to_frame()

    assert list(df.columns) == ["date", "value"]
    assert df["date"].tolist() == ["01/Jan/2000", "02/Jan/2000"]
    assert df["value"].tolist() == [1.5, 2.25]
    assert str(df["value"].dtype) == "float64"


def test_to_frame_empty_series():
    df = IadbSeries(name="IUDSOIA").to_frame()

    assert df.empty
    assert list(df.columns) == ["date", "value"]
    assert str(df["value"].dtype) == "float64"
