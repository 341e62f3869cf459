# src/boe_iadb/pipeline_registry.py
from __future__ import annotations

from kedro.pipeline import Pipeline

from boe_iadb.pipelines.raw.iadb.pipeline import create_pipeline as iadb_raw


def register_pipelines() -> dict[str, Pipeline]:
    raw_iadb = iadb_raw()

    pipelines = {
        "raw_iadb": raw_iadb,
    }
    pipelines["__default__"] = pipelines["raw_iadb"]

    return pipelines
