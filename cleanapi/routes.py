"""Request routing."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.routing import Map, Rule
from werkzeug.wrappers import Request, Response

from cleanapi.handlers import UserHandler

Endpoint = Callable[..., Response]


class Router:
    """A WSGI application dispatching requests by method and path.

    Paths use ``<name>`` placeholders; matched values are passed to the
    endpoint as keyword arguments after the request.
    """

    def __init__(self) -> None:
        self._map = Map(strict_slashes=False, merge_slashes=False)
        self._endpoints: dict[str, Endpoint] = {}

    def add(self, method: str, path: str, endpoint: Endpoint) -> None:
        """Route requests with *method* to *path* to *endpoint*."""
        key = f"{method.upper()} {path}"
        self._endpoints[key] = endpoint
        self._map.add(
            Rule(path, endpoint=key, methods=[method.upper()], provide_automatic_options=False)
        )

    def _dispatch(self, request: Request) -> Response:
        adapter = self._map.bind_to_environ(request.environ)
        try:
            key, values = adapter.match()
        except NotFound:
            return Response("404 page not found\n", status=404, content_type="text/plain; charset=utf-8")
        except MethodNotAllowed as exc:
            allowed = ", ".join(exc.valid_methods or [])
            return Response(status=405, headers={"Allow": allowed})
        return self._endpoints[key](request, **values)

    def __call__(self, environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        response = self._dispatch(Request(environ))
        return response(environ, start_response)


def register_routes(router: Router, handler: UserHandler) -> None:
    """Map the user endpoints onto *router*."""
    router.add("POST", "/users", handler.register)
    router.add("POST", "/users/", handler.register)
    router.add("DELETE", "/users/<user_id>", handler.delete)