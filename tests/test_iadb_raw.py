from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from boe_iadb.errors import ParseError, TransportError
from boe_iadb.extractors import iadb_raw
from boe_iadb.extractors.iadb_raw import IadbConfig, IadbSeriesExtractor, get_data
from boe_iadb.extractors.iadb_specs import DEFAULT_USER_AGENT, IadbQuerySpec


# ---------- fakes ----------
class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP error {self.status_code}")


class FakeTransport:
    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[Exception] = None):
        self.response = response
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params=None, headers=None):
        self.calls.append({"url": url, "params": params, "headers": headers})
        if self.exc is not None:
            raise self.exc
        return self.response


SONIA_CSV = "DATE,IUDSOIA\n04 Jan 2000,5.9\n05 Jan 2000,5.84\n"


# ---------- tests ----------
def test_get_data_builds_url_sends_user_agent_and_parses():
    transport = FakeTransport(FakeResponse(SONIA_CSV))
    extractor = IadbSeriesExtractor(transport)

    series = extractor.get_data("IUDSOIA", "01/Jan/2000", "01/Oct/2018")

    assert len(transport.calls) == 1
    call = transport.calls[0]
    assert call["url"] == (
        "http://www.bankofengland.co.uk/boeapps/iadb/fromshowcolumns.asp"
        "?csv.x=yes&SeriesCodes=IUDSOIA&Datefrom=01/Jan/2000&Dateto=01/Oct/2018"
        "&CSVF=TN&UsingCodes=Y&VPD=Y&VFD=N"
    )
    assert call["headers"] == {"User-Agent": DEFAULT_USER_AGENT}

    assert series.name == "IUDSOIA"
    assert series.description == "Daily Sterling overnight index average (SONIA) rate"
    assert [(p.date, p.value) for p in series.data] == [("04 Jan 2000", 5.9), ("05 Jan 2000", 5.84)]


def test_unknown_code_gets_empty_description():
    transport = FakeTransport(FakeResponse("H1,H2\n01/Jan/2000,1\n"))
    series = IadbSeriesExtractor(transport).get_data("ZZZ999", "01/Jan/2000", "02/Jan/2000")

    assert series.name == "ZZZ999"
    assert series.description == ""
    assert len(series) == 1


def test_empty_range_returns_empty_series():
    transport = FakeTransport(FakeResponse("DATE,IUDSOIA\n"))
    series = IadbSeriesExtractor(transport).get_data("IUDSOIA", "05/Jan/2030", "06/Jan/2030")

    assert series.name == "IUDSOIA"
    assert series.data == ()


def test_http_error_status_raises_transport_error():
    transport = FakeTransport(FakeResponse("Server Error", status_code=500))
    extractor = IadbSeriesExtractor(transport)

    with pytest.raises(TransportError) as exc:
        extractor.get_data("IUDSOIA", "01/Jan/2000", "01/Oct/2018")

    assert isinstance(exc.value.__cause__, requests.HTTPError)


@pytest.mark.parametrize(
    "error",
    [requests.ConnectionError("dns failure"), requests.Timeout("read timed out")],
)
def test_network_failure_raises_transport_error_without_parsing(error, monkeypatch):
    def _must_not_parse(text):
        raise AssertionError("parse should not run")

    monkeypatch.setattr(iadb_raw, "parse_iadb_csv", _must_not_parse)
    transport = FakeTransport(exc=error)

    with pytest.raises(TransportError) as exc:
        IadbSeriesExtractor(transport).get_data("IUDSOIA", "01/Jan/2000", "01/Oct/2018")

    assert exc.value.__cause__ is error


def test_bad_row_raises_parse_error_not_truncated_series():
    body = "H1,H2\n01/Jan/2000,1.23\n02/Jan/2000,n/a\n"
    transport = FakeTransport(FakeResponse(body))

    with pytest.raises(ParseError):
        IadbSeriesExtractor(transport).get_data("IUDSOIA", "01/Jan/2000", "02/Jan/2000")


def test_transport_and_parse_errors_are_distinct():
    assert not issubclass(TransportError, ParseError)
    assert not issubclass(ParseError, TransportError)


def test_custom_config_and_spec_are_used():
    transport = FakeTransport(FakeResponse("H1,H2\n"))
    extractor = IadbSeriesExtractor(
        transport,
        cfg=IadbConfig(base_url="http://localhost/iadb", user_agent="test-agent"),
        spec=IadbQuerySpec(csv_format="TT", vpd="N"),
    )

    extractor.get_data("IUDSOIA", "01/Jan/2000", "01/Oct/2018", additional_params="Travel=NIxIRx")

    call = transport.calls[0]
    assert call["url"].startswith("http://localhost/iadb?csv.x=yes&SeriesCodes=IUDSOIA&")
    assert "&CSVF=TT&UsingCodes=Y&VPD=N&VFD=N&Travel=NIxIRx" in call["url"]
    assert call["headers"] == {"User-Agent": "test-agent"}


def test_module_get_data_with_injected_transport():
    transport = FakeTransport(FakeResponse("H1,H2\n01/Jan/2000,1.23\n02/Jan/2000,4.56\n"))

    series = get_data("XUDLUSS", "01/Jan/2000", "02/Jan/2000", transport=transport)

    assert [p.value for p in series] == [1.23, 4.56]
