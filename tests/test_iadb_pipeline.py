import pandas as pd
import pytest

from boe_iadb.domain.iadb.models import IadbDataPoint, IadbSeries
from boe_iadb.domain.iadb.validate import DataQualityError
from boe_iadb.pipeline_registry import register_pipelines
from boe_iadb.pipelines.raw.iadb import nodes
from boe_iadb.pipelines.raw.iadb.pipeline import create_pipeline


class FakeExtractor:
    def __init__(self, by_code):
        self.by_code = by_code
        self.calls = []

    def get_data(self, series_code, date_from, date_to, additional_params=None):
        self.calls.append((series_code, date_from, date_to))
        return IadbSeries(name=series_code, data=self.by_code[series_code])


PARAMS = {
    "date_from": "01/Jan/2000",
    "date_to": "02/Jan/2000",
    "series_codes": ["IUDSOIA", "XUDLUSS"],
}


def test_build_points_long_format(monkeypatch):
    fake = FakeExtractor(
        {
            "IUDSOIA": (IadbDataPoint("01/Jan/2000", 5.9), IadbDataPoint("02/Jan/2000", 5.8)),
            "XUDLUSS": (IadbDataPoint("01/Jan/2000", 1.6),),
        }
    )
    monkeypatch.setattr(nodes, "_make_extractor", lambda params: fake)

    df = nodes.build_iadb_points_raw(PARAMS)

    assert list(df.columns) == ["series_code", "date", "value"]
    assert df["series_code"].tolist() == ["IUDSOIA", "IUDSOIA", "XUDLUSS"]
    assert df["value"].tolist() == [5.9, 5.8, 1.6]
    assert fake.calls == [
        ("IUDSOIA", "01/Jan/2000", "02/Jan/2000"),
        ("XUDLUSS", "01/Jan/2000", "02/Jan/2000"),
    ]
    # passa no gate de qualidade
    assert nodes.validate_iadb_points(df) is df


def test_build_points_without_codes_gives_empty_frame(monkeypatch):
    monkeypatch.setattr(nodes, "_make_extractor", lambda params: FakeExtractor({}))

    df = nodes.build_iadb_points_raw({"date_from": "a", "date_to": "b", "series_codes": []})

    assert df.empty
    assert list(df.columns) == ["series_code", "date", "value"]
    nodes.validate_iadb_points(df)


def test_validate_rejects_duplicates():
    df = pd.DataFrame(
        {"series_code": ["A", "A"], "date": ["01/Jan/2000", "01/Jan/2000"], "value": [1.0, 1.0]}
    )
    with pytest.raises(DataQualityError):
        nodes.validate_iadb_points(df)


def test_validate_rejects_missing_columns_and_non_float_values():
    with pytest.raises(DataQualityError):
        nodes.validate_iadb_points(pd.DataFrame({"date": ["x"], "value": [1.0]}))

    with pytest.raises(DataQualityError):
        nodes.validate_iadb_points(
            pd.DataFrame({"series_code": ["A"], "date": ["x"], "value": ["1.0"]})
        )


def test_pipeline_and_registry():
    pipeline = create_pipeline()
    names = {n.name for n in pipeline.nodes}
    assert names == {"raw_iadb_build_points", "raw_iadb_validate_points"}

    pipelines = register_pipelines()
    assert set(pipelines) == {"raw_iadb", "__default__"}
