import json

from werkzeug.test import EnvironBuilder

from cleanapi.entity import User
from cleanapi.handlers import HealthHandler, UserHandler


class StubService:
    def __init__(self, register_error=None, remove_error=None):
        self.register_error = register_error
        self.remove_error = remove_error
        self.removed = None

    def register_user(self, name, email):
        if self.register_error is not None:
            raise self.register_error
        return User(id="1", name=name, email=email)

    def remove_user(self, user_id):
        self.removed = user_id
        if self.remove_error is not None:
            raise self.remove_error


def make_request(method, path="/", data=None):
    return EnvironBuilder(method=method, path=path, data=data).get_request()


def test_health_status():
    handler = HealthHandler("1.0.0")
    response = handler.status(make_request("GET", "/health"))
    assert response.status_code == 200
    assert response.get_data() == b'{"status":"ok","version":"1.0.0"}\n'


def test_register_success():
    handler = UserHandler(StubService())
    request = make_request("POST", data='{"name":"Jon","email":"jon@example.com"}')
    response = handler.register(request)
    assert response.status_code == 201
    body = json.loads(response.get_data())
    assert body["ID"] == "1"
    assert body["Name"] == "Jon"
    assert body["Email"] == "jon@example.com"
    assert body["CreatedAt"] == "0001-01-01T00:00:00Z"


def test_register_bad_body():
    handler = UserHandler(StubService())
    response = handler.register(make_request("POST", data="{"))
    assert response.status_code == 400
    assert json.loads(response.get_data()) == {"error": "invalid request body"}


def test_register_empty_body_is_bad_request():
    handler = UserHandler(StubService())
    response = handler.register(make_request("POST"))
    assert response.status_code == 400


def test_register_wrong_field_type_is_bad_request():
    handler = UserHandler(StubService())
    response = handler.register(make_request("POST", data='{"name":5}'))
    assert response.status_code == 400


def test_register_matches_field_names_case_insensitively():
    handler = UserHandler(StubService())
    request = make_request("POST", data='{"NAME":"Jon","Email":"jon@example.com"}')
    body = json.loads(handler.register(request).get_data())
    assert body["Name"] == "Jon"
    assert body["Email"] == "jon@example.com"


def test_register_service_error():
    handler = UserHandler(StubService(register_error=RuntimeError("fail")))
    request = make_request("POST", data='{"name":"Jon","email":"jon@example.com"}')
    response = handler.register(request)
    assert response.status_code == 500
    assert json.loads(response.get_data()) == {"error": "fail"}


def test_delete():
    service = StubService()
    handler = UserHandler(service)
    response = handler.delete(make_request("DELETE", "/123"), "123")
    assert response.status_code == 204
    assert service.removed == "123"


def test_delete_missing_id():
    handler = UserHandler(StubService())
    response = handler.delete(make_request("DELETE"), "")
    assert response.status_code == 400
    assert json.loads(response.get_data()) == {"error": "missing id"}


def test_delete_service_error():
    handler = UserHandler(StubService(remove_error=RuntimeError("fail")))
    response = handler.delete(make_request("DELETE", "/123"), "123")
    assert response.status_code == 500
    assert json.loads(response.get_data()) == {"error": "fail"}