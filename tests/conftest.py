from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def _build_response(status=200, json_data=None, headers=None, reason="OK"):
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.ok = status < 400
    response.reason = reason
    response.headers = CaseInsensitiveDict(headers or {})
    response.content = b"" if json_data is None else b"{}"
    if json_data is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_data
    response.text = ""
    return response


@pytest.fixture
def make_response():
    return _build_response


@pytest.fixture
def http_session():
    return MagicMock(spec=requests.Session)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("API_URL", "API_TIMEOUT_SECONDS", "SELECTOR_PAGE_SIZE", "SESSION_SECRET"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"{name}_RESOURCE", raising=False)
