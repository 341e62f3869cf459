from __future__ import annotations

from typing import Any, List, Mapping

import pandas as pd

from boe_iadb.domain.iadb.validate import validate_iadb_points as _validate_points
from boe_iadb.extractors.iadb_raw import IadbSeriesExtractor
from boe_iadb.utils.io.http import HTTPConfig, RequestsTransport

POINT_COLUMNS = ["series_code", "date", "value"]


def _make_extractor(params: Mapping[str, Any]) -> IadbSeriesExtractor:
    http = RequestsTransport(HTTPConfig(timeout_sec=int(params.get("timeout_sec", 30))))
    return IadbSeriesExtractor(http)


def build_iadb_points_raw(params: Mapping[str, Any]) -> pd.DataFrame:
    """Uma requisição por código; saída em formato longo (series_code, date, value)."""
    extractor = _make_extractor(params)

    frames: List[pd.DataFrame] = []
    for code in params.get("series_codes", []):
        series = extractor.get_data(str(code), params["date_from"], params["date_to"])
        df = series.to_frame()
        df.insert(0, "series_code", series.name)
        frames.append(df)

    if not frames:
        return pd.DataFrame(
            {
                "series_code": pd.Series(dtype="object"),
                "date": pd.Series(dtype="object"),
                "value": pd.Series(dtype="float64"),
            }
        )

    return pd.concat(frames, ignore_index=True)[POINT_COLUMNS]


def validate_iadb_points(df: pd.DataFrame) -> pd.DataFrame:
    _validate_points(df)
    return df
