from __future__ import annotations

from pathlib import Path

from boe_iadb.domain.iadb.catalog import describe
from boe_iadb.errors import IadbError
from boe_iadb.extractors.iadb_raw import IadbSeriesExtractor
from boe_iadb.utils.io.http import HTTPConfig, RequestsTransport
from boe_iadb.utils.json_logging import build_logger


def main():
    logger = build_logger("iadb_run", Path("data/99_logs/iadb/run.jsonl"))

    http = RequestsTransport(HTTPConfig(timeout_sec=60))
    iadb = IadbSeriesExtractor(http)

    date_from = "01/Jan/2000"
    date_to = "01/Oct/2018"

    for code in ("IUDSOIA", "IUDBEDR", "XUDLUSS"):
        try:
            series = iadb.get_data(code, date_from, date_to)
        except IadbError as exc:
            logger.error("series failed", extra={"series_code": code, "error": str(exc)})
            continue

        logger.info(
            "series fetched",
            extra={"series_code": code, "description": describe(code), "points": len(series)},
        )
        print(series)

    http.close()


if __name__ == "__main__":
    main()
