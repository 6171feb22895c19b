"""
Tests for the echo endpoints.
"""

from fastapi.testclient import TestClient


def test_greeting_is_plain_text(client: TestClient):
    response = client.get("/echo")
    assert response.status_code == 200
    assert response.text == "Welcome to the Products API!"
    assert response.headers["content-type"].startswith("text/plain")


def test_posted_message_is_echoed(client: TestClient):
    message = {"name": "Ada", "content": "hello"}
    response = client.post("/echo", json=message)
    assert response.status_code == 200
    assert response.json() == message


def test_missing_fields_are_empty(client: TestClient):
    assert client.post("/echo", json={"name": "Ada"}).json() == {"name": "Ada", "content": ""}


def test_invalid_json_is_bad_request(client: TestClient):
    response = client.post("/echo", content=b"{", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.text == "Error parsing request body"


def test_wrong_method_is_not_allowed(client: TestClient):
    assert client.delete("/echo").status_code == 405
