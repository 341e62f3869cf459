from boe_iadb.extractors.iadb_request import build_query_url
from boe_iadb.extractors.iadb_specs import BASE_URL, IadbQuerySpec


EXPECTED = (
    "http://www.bankofengland.co.uk/boeapps/iadb/fromshowcolumns.asp"
    "?csv.x=yes&SeriesCodes=IUDSOIA&Datefrom=01/Jan/2000&Dateto=01/Oct/2018"
    "&CSVF=TN&UsingCodes=Y&VPD=Y&VFD=N"
)


def test_builds_expected_url_with_default_policy():
    assert build_query_url("IUDSOIA", "01/Jan/2000", "01/Oct/2018") == EXPECTED


def test_url_is_deterministic():
    urls = {build_query_url("XUDLUSS", "01/Jan/2000", "31/Dec/2001") for _ in range(5)}
    assert len(urls) == 1


def test_param_order_is_fixed_for_any_flag_policy():
    spec = IadbQuerySpec(csv_format="CN", using_codes="N", vpd="N", vfd="Y")
    url = build_query_url("IUDBEDR", "02/Feb/2010", "03/Mar/2011", spec=spec)

    query = url.split("?", 1)[1]
    keys = [kv.split("=", 1)[0] for kv in query.split("&")]
    assert keys == ["csv.x", "SeriesCodes", "Datefrom", "Dateto", "CSVF", "UsingCodes", "VPD", "VFD"]
    assert query.endswith("CSVF=CN&UsingCodes=N&VPD=N&VFD=Y")


def test_multiple_codes_are_comma_joined():
    url = build_query_url(["IUMBV34", "IUMBV37", "IUMBV42"], "01/Jan/2000", "01/Oct/2018")
    assert "&SeriesCodes=IUMBV34,IUMBV37,IUMBV42&" in url


def test_additional_params_appended_after_fixed_params():
    url = build_query_url("IUDSOIA", "01/Jan/2000", "01/Oct/2018", additional_params="&Travel=NIxIRx")
    assert url == EXPECTED + "&Travel=NIxIRx"

    # sem "&" inicial dá o mesmo resultado
    url2 = build_query_url("IUDSOIA", "01/Jan/2000", "01/Oct/2018", additional_params="Travel=NIxIRx")
    assert url2 == url


def test_empty_inputs_are_forwarded_verbatim():
    url = build_query_url("", "", "")
    assert url.startswith(f"{BASE_URL}?csv.x=yes&SeriesCodes=&Datefrom=&Dateto=&")


def test_custom_base_url():
    url = build_query_url("IUDSOIA", "01/Jan/2000", "01/Oct/2018", base_url="http://localhost/iadb")
    assert url.startswith("http://localhost/iadb?csv.x=yes&")
