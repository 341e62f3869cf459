from boe_iadb.utils.io.http import HTTPConfig, RequestsTransport


class FakeSession:
    def __init__(self):
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        return "response"

    def close(self):
        pass


def test_requests_transport_passes_timeout_and_headers():
    transport = RequestsTransport(HTTPConfig(timeout_sec=7))
    transport.session = FakeSession()

    r = transport.get("http://example.test/x", headers={"User-Agent": "ua"})

    assert r == "response"
    assert transport.session.calls == [
        {"url": "http://example.test/x", "params": None, "headers": {"User-Agent": "ua"}, "timeout": 7}
    ]


def test_requests_transport_falls_back_to_config_headers():
    transport = RequestsTransport(HTTPConfig(headers={"User-Agent": "default"}))
    transport.session = FakeSession()

    transport.get("http://example.test/x")

    assert transport.session.calls[0]["headers"] == {"User-Agent": "default"}
    assert transport.session.calls[0]["timeout"] == 30
