from __future__ import annotations

from kedro.pipeline import Pipeline, node

from boe_iadb.pipelines.raw.iadb.nodes import build_iadb_points_raw, validate_iadb_points


def create_pipeline(**kwargs) -> Pipeline:
    return Pipeline(
        [
            node(
                func=build_iadb_points_raw,
                inputs="params:iadb",
                outputs="iadb_points_raw__pre",
                name="raw_iadb_build_points",
            ),
            node(
                func=validate_iadb_points,
                inputs="iadb_points_raw__pre",
                outputs="iadb_points_raw",
                name="raw_iadb_validate_points",
            ),
        ]
    )
