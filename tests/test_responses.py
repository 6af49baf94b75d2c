import json

from cleanapi.entity import User
from cleanapi.responses import error_response, json_response


def test_json_response_sets_status_and_body():
    response = json_response(201, {"ok": "yes"})
    assert response.status_code == 201
    assert response.headers["Content-Type"] == "application/json"
    assert json.loads(response.get_data()) == {"ok": "yes"}


def test_json_response_foo_bar():
    response = json_response(200, {"foo": "bar"})
    assert response.status_code == 200
    assert json.loads(response.get_data())["foo"] == "bar"


def test_error_response_bad():
    response = error_response(400, "bad")
    assert response.status_code == 400
    assert json.loads(response.get_data()) == {"error": "bad"}


def test_error_response_boom():
    response = error_response(500, "boom")
    assert response.status_code == 500
    assert json.loads(response.get_data())["error"] == "boom"


def test_json_body_is_compact_sorted_and_newline_terminated():
    response = json_response(200, {"version": "1", "status": "ok"})
    assert response.get_data() == b'{"status":"ok","version":"1"}\n'


def test_none_payload_has_empty_body():
    response = json_response(204, None)
    assert response.status_code == 204
    assert response.get_data() == b""


def test_html_characters_are_escaped():
    response = json_response(200, {"a": "<b>&"})
    assert response.get_data() == b'{"a":"\\u003cb\\u003e\\u0026"}\n'


def test_user_keeps_field_order():
    response = json_response(200, User(id="1", name="Jon", email="jon@example.com"))
    assert response.get_data() == (
        b'{"ID":"1","Name":"Jon","Email":"jon@example.com",'
        b'"CreatedAt":"0001-01-01T00:00:00Z"}\n'
    )