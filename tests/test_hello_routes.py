"""Tests for the GET /hello endpoint."""

from werkzeug.exceptions import MethodNotAllowed, NotFound


def test_hello_returns_greeting(client):
    response = client.get("/hello")

    assert response.status_code == 200
    assert response.get_data(as_text=True) == "hello, world"


def test_hello_content_type_is_plain_text(client):
    response = client.get("/hello")

    assert response.mimetype == "text/plain"
    assert response.headers["Content-Type"] == "text/plain; charset=utf-8"


def test_hello_is_idempotent(client):
    bodies = {client.get("/hello").get_data() for _ in range(5)}

    assert bodies == {b"hello, world"}


def test_hello_ignores_query_string(client):
    response = client.get("/hello?x=1")

    assert response.status_code == 200
    assert response.get_data(as_text=True) == "hello, world"


def test_hello_ignores_headers(client):
    response = client.get("/hello", headers={"Accept": "application/json", "X-Custom": "value"})

    assert response.status_code == 200
    assert response.get_data(as_text=True) == "hello, world"


def test_head_hello_has_no_body(client):
    response = client.head("/hello")

    assert response.status_code == 200
    assert response.get_data() == b""


def test_options_hello_lists_allowed_methods(client):
    response = client.options("/hello")

    assert response.status_code == 200
    assert set(response.headers["Allow"].split(", ")) == {"GET", "HEAD", "OPTIONS"}


def test_post_hello_is_method_not_allowed(client):
    response = client.post("/hello", data="ignored")

    assert response.status_code == 405
    assert response.get_json() == {
        "message": "Method Not Allowed",
        "code": 405,
        "description": MethodNotAllowed.description,
        "path": "/hello",
        "allowedMethods": ["GET", "HEAD", "OPTIONS"],
    }
    assert "GET" in response.headers["Allow"]


def test_unknown_path_is_not_found(client):
    response = client.get("/goodbye")

    assert response.status_code == 404
    assert response.mimetype == "application/json"
    assert response.get_json() == {
        "message": "Not Found",
        "code": 404,
        "description": NotFound.description,
        "path": "/goodbye",
    }


def test_trailing_slash_is_not_found(client):
    response = client.get("/hello/")

    assert response.status_code == 404
    assert response.get_json()["path"] == "/hello/"


def test_hello_logs_response(app, client, caplog):
    with caplog.at_level("DEBUG", logger=app.logger.name):
        client.get("/hello")

    assert "Hello response sent: hello, world" in caplog.text
