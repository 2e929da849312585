"""Tests for the backend HTTP client."""

import pytest
import requests

from src.api_client import ApiClient, ApiError, NotFoundError, UnauthorizedError
from src.page_timing import page_load_timing


def _client(session, token="a.b.c"):
    return ApiClient("https://api.test/", token=token, timeout=3, session=session)


def test_get_sends_json_headers_and_bearer_token(http_session, make_response):
    http_session.request.return_value = make_response(200, [{"id": 1}])

    response = _client(http_session).get("/skill", params={"_start": 0})

    assert response.status == 200
    assert response.data == [{"id": 1}]
    method, url = http_session.request.call_args.args
    kwargs = http_session.request.call_args.kwargs
    assert (method, url) == ("GET", "https://api.test/skill")
    assert kwargs["headers"]["Authorization"] == "Bearer a.b.c"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["params"] == {"_start": 0}
    assert kwargs["timeout"] == 3


def test_no_token_means_no_authorization_header(http_session, make_response):
    http_session.request.return_value = make_response(200, {})
    _client(http_session, token=None).get("/home/1")
    assert "Authorization" not in http_session.request.call_args.kwargs["headers"]


def test_missing_base_url_raises(http_session):
    client = ApiClient("", session=http_session)
    with pytest.raises(ApiError, match="No se encontró la URL base de la API"):
        client.get("/skill")
    http_session.request.assert_not_called()


def test_status_errors_map_to_exceptions(http_session, make_response):
    http_session.request.return_value = make_response(401, {"message": "Token expirado"})
    with pytest.raises(UnauthorizedError) as excinfo:
        _client(http_session).get("/skill")
    assert excinfo.value.status == 401
    assert str(excinfo.value) == "Token expirado"

    http_session.request.return_value = make_response(404, None, reason="Not Found")
    with pytest.raises(NotFoundError):
        _client(http_session).get("/skill/99")

    http_session.request.return_value = make_response(500, None, reason="Server Error")
    with pytest.raises(ApiError) as excinfo:
        _client(http_session).post("/skill", {"name": "x"})
    assert excinfo.value.status == 500


def test_connection_failure_becomes_api_error(http_session):
    http_session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ApiError) as excinfo:
        _client(http_session).get("/skill")
    assert excinfo.value.status is None


def test_calls_are_attributed_to_page_timing(http_session, make_response):
    http_session.request.return_value = make_response(204, None)
    with page_load_timing("/skill", "test") as timing:
        response = _client(http_session).delete("/skill/1")
    assert response.data is None
    assert timing.api_calls == 1
    assert timing.method_calls["DELETE"] == 1
    assert timing.api_errors == 0


def test_failed_calls_are_counted_per_page_load(http_session, make_response):
    http_session.request.side_effect = [
        make_response(200, [{"id": 1}]),
        make_response(412, {"message": "En uso"}),
        requests.ConnectionError("refused"),
    ]
    client = _client(http_session)
    with page_load_timing("/label", "test") as timing:
        client.get("/label")
        with pytest.raises(ApiError):
            client.delete("/label/1")
        with pytest.raises(ApiError):
            client.get("/label")
    assert timing.api_calls == 3
    assert timing.api_errors == 2
    assert dict(timing.method_calls) == {"GET": 2, "DELETE": 1}
