from __future__ import annotations

import pandas as pd
from pandas.api.types import is_float_dtype


class DataQualityError(RuntimeError):
    pass


def validate_iadb_points(df: pd.DataFrame) -> None:
    required = ["series_code", "date", "value"]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise DataQualityError(f"Missing columns in points: {missing}")

    if df["series_code"].isna().any():
        raise DataQualityError("series_code has nulls in points")
    if df["date"].isna().any():
        raise DataQualityError("date has nulls in points")

    if not is_float_dtype(df["value"]):
        raise DataQualityError(f"value must be float, got {df['value'].dtype}")

    # a série em si não deduplica; aqui é o gate de qualidade
    if df.duplicated(subset=["series_code", "date"]).any():
        raise DataQualityError("Duplicates on (series_code, date) in points")
