"""Tests for request construction and error mapping in the base client."""

import pytest
import requests

from brasil_data.clients.base import BaseAPIClient, encode_query
from brasil_data.exceptions import (
    DecodeError,
    RequestTimeoutError,
    TransportError,
    UpstreamHTTPError,
)
from tests.conftest import FakeResponse, FakeSession


def make_client(session, **kwargs) -> BaseAPIClient:
    return BaseAPIClient("https://api.example.gov.br/v1/", session=session, **kwargs)


class TestBuildUrl:
    """Tests for URL construction."""

    def test_only_non_empty_params(self):
        client = make_client(FakeSession())
        url = client.build_url("items", {"a": "1", "b": None, "c": "", "d": 2})

        assert url == "https://api.example.gov.br/v1/items?a=1&d=2"

    def test_no_params_no_question_mark(self):
        client = make_client(FakeSession())

        assert client.build_url("items", {"a": None}) == "https://api.example.gov.br/v1/items"
        assert client.build_url("/items") == "https://api.example.gov.br/v1/items"

    def test_base_url_override(self):
        client = make_client(FakeSession())
        url = client.build_url("x", {"k": "v"}, base_url="https://other.gov.br/")

        assert url == "https://other.gov.br/x?k=v"

    def test_odata_and_bracket_chars_kept(self):
        query = encode_query({"@moeda": "'USD'", "$format": "json", "loc": "N6[123]"})

        assert query == "@moeda='USD'&$format=json&loc=N6[123]"

    def test_values_are_escaped(self):
        assert encode_query({"nome": "JOSE DA SILVA"}) == "nome=JOSE+DA+SILVA"

    def test_string_query_passes_through(self):
        assert encode_query("?a=1&b=2") == "a=1&b=2"


class TestGetJson:
    """Tests for request execution."""

    def test_sends_accept_header_and_timeout(self):
        session = FakeSession(FakeResponse(payload={"ok": True}))
        client = make_client(session, headers={"User-Agent": "tests"})

        assert client.get_json("ping") == {"ok": True}
        call = session.last_call
        assert call["url"] == "https://api.example.gov.br/v1/ping"
        assert call["headers"]["Accept"] == "application/json"
        assert call["headers"]["User-Agent"] == "tests"
        assert call["timeout"] == 30

    def test_per_call_timeout_overrides_default(self):
        session = FakeSession(FakeResponse(payload=[]))
        client = make_client(session, timeout=5)

        client.get_json("ping", timeout=1.5)

        assert session.last_call["timeout"] == 1.5

    def test_non_2xx_keeps_status_and_body(self):
        session = FakeSession(FakeResponse(status_code=503, text="maintenance"))
        client = make_client(session)

        with pytest.raises(UpstreamHTTPError) as exc_info:
            client.get_json("ping")

        err = exc_info.value
        assert err.status_code == 503
        assert err.body == "maintenance"
        assert "503" in str(err)
        assert "maintenance" in str(err)

    @pytest.mark.parametrize("status", [400, 404, 500])
    def test_error_statuses(self, status):
        session = FakeSession(FakeResponse(status_code=status, text='{"erro": "x"}'))
        client = make_client(session)

        with pytest.raises(UpstreamHTTPError) as exc_info:
            client.get_json("ping")

        assert exc_info.value.status_code == status
        assert exc_info.value.body == '{"erro": "x"}'

    def test_undecodable_body(self):
        session = FakeSession(FakeResponse(status_code=200, text="<html>oops</html>"))
        client = make_client(session)

        with pytest.raises(DecodeError):
            client.get_json("ping")

    def test_empty_success_body_is_a_decode_error(self):
        # Any 2xx is a success, so a bodiless 204 fails at decoding
        session = FakeSession(FakeResponse(status_code=204, text=""))
        client = make_client(session)

        with pytest.raises(DecodeError):
            client.get_json("ping")

    def test_timeout(self):
        session = FakeSession(requests.exceptions.ReadTimeout("slow"))
        client = make_client(session)

        with pytest.raises(RequestTimeoutError) as exc_info:
            client.get_json("ping")

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ReadTimeout)

    def test_connection_error(self):
        session = FakeSession(requests.exceptions.ConnectionError("refused"))
        client = make_client(session)

        with pytest.raises(TransportError) as exc_info:
            client.get_json("ping")

        assert not isinstance(exc_info.value, RequestTimeoutError)

    def test_one_request_per_call(self):
        session = FakeSession(FakeResponse(status_code=500, text="boom"))
        client = make_client(session)

        with pytest.raises(UpstreamHTTPError):
            client.get_json("ping")

        assert len(session.calls) == 1
