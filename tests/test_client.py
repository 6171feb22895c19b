"""
Tests for the ``requests`` based API client.

The HTTP session is replaced with a mock returning canned
``requests.Response`` objects.
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from products_client import ProductsAPI


def make_response(status_code: int, body: Any = None, text: Optional[str] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://api.test/products"
    response.reason = "Test"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
        response.headers["Content-Type"] = "text/plain; charset=utf-8"
    else:
        response._content = b""
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session: MagicMock) -> ProductsAPI:
    return ProductsAPI(base_url="http://api.test/", session=session)


def test_create_product_posts_json(api: ProductsAPI, session: MagicMock):
    session.request.return_value = make_response(201, {"id": 1, "name": "A", "price": 10})

    data, error = api.create_product("A", 10)

    assert error is None
    assert data == {"id": 1, "name": "A", "price": 10}
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://api.test/products"
    assert kwargs["json"] == {"name": "A", "price": 10}
    assert "Authorization" not in kwargs["headers"]


def test_api_key_is_sent_as_bearer_token(session: MagicMock):
    api = ProductsAPI(base_url="http://api.test", api_key="secret", session=session)
    session.request.return_value = make_response(200, [])

    api.list_products()

    assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer secret"


def test_not_found_returns_plain_text_error(api: ProductsAPI, session: MagicMock):
    session.request.return_value = make_response(404, text="Product not found\n")

    data, error = api.get_product(9)

    assert data is None
    assert error == {"status_code": 404, "message": "Product not found"}
    assert session.request.call_args.kwargs["url"] == "http://api.test/products/9"


def test_update_product_uses_put(api: ProductsAPI, session: MagicMock):
    session.request.return_value = make_response(200, {"id": 2, "name": "B", "price": 5})

    data, error = api.update_product(2, "B", 5)

    assert error is None
    assert data["id"] == 2
    assert session.request.call_args.kwargs["method"] == "PUT"


def test_delete_product_reports_success(api: ProductsAPI, session: MagicMock):
    session.request.return_value = make_response(204)
    assert api.delete_product(1) == (True, None)

    session.request.return_value = make_response(400, text="Invalid product ID")
    ok, error = api.delete_product(0)
    assert ok is False
    assert error["status_code"] == 400


def test_transport_errors_have_no_status(api: ProductsAPI, session: MagicMock):
    session.request.side_effect = requests.ConnectionError("connection refused")

    products, error = api.list_products()

    assert products == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_time_log_helpers_unwrap_payloads(api: ProductsAPI, session: MagicMock):
    session.request.return_value = make_response(200, {"current_time": "2025-09-01T10:00:00-04:00"})
    assert api.current_time() == ("2025-09-01T10:00:00-04:00", None)

    session.request.return_value = make_response(200, {"timestamps": ["2025-09-01 10:00:00"]})
    assert api.logged_times() == (["2025-09-01 10:00:00"], None)


def test_record_visit_sends_document(api: ProductsAPI, session: MagicMock):
    session.request.return_value = make_response(201, {"ip": "::1", "time": "2025-09-01 10:00:00"})

    data, error = api.record_visit({"ip": "::1"})

    assert error is None
    assert data["time"] == "2025-09-01 10:00:00"
    assert session.request.call_args.kwargs["url"] == "http://api.test/visits"
