"""In-process fake package service reachable through a ``requests`` session.

The fake is a FastAPI app with a catch-all route delegating to a swappable
``handler``. ``AsgiTransportAdapter`` forwards prepared ``requests`` calls to
the app through ``fastapi.testclient.TestClient``; no socket is opened.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import requests
from fastapi import FastAPI, Request, Response
from fastapi.testclient import TestClient
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict


@dataclass
class RecordedRequest:
    method: str
    host: Optional[str]
    path: str
    headers: dict
    body: bytes


Handler = Callable[[RecordedRequest], Response]


def _not_configured(_: RecordedRequest) -> Response:
    return Response(status_code=500)


class AsgiTransportAdapter(BaseAdapter):
    """``requests`` transport adapter that dispatches into an ASGI app."""

    def __init__(self, app: FastAPI) -> None:
        super().__init__()
        self._client = TestClient(app)

    def send(self, request: requests.PreparedRequest, stream: bool = False,
             timeout: Any = None, verify: Any = True, cert: Any = None,
             proxies: Any = None) -> requests.Response:
        upstream = self._client.request(
            request.method,
            request.url,
            content=request.body,
            headers=dict(request.headers),
        )
        response = requests.Response()
        response.status_code = upstream.status_code
        response.reason = upstream.reason_phrase
        response.headers = CaseInsensitiveDict(upstream.headers)
        response._content = upstream.content
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        self._client.close()


class FakePackageServer:
    """Fake package service answering only for ``host``.

    Requests for other hosts get HTTP 500, like a misrouted call would.
    """

    def __init__(self, host: str = "packagehost") -> None:
        self.host = host
        self.handler: Handler = _not_configured
        self.requests: List[RecordedRequest] = []
        self.app = FastAPI()

        @self.app.api_route("/{path:path}", methods=["GET", "PUT", "POST", "DELETE"])
        async def dispatch(request: Request) -> Response:
            recorded = RecordedRequest(
                method=request.method,
                host=request.url.hostname,
                path=request.url.path,
                headers=dict(request.headers),
                body=await request.body(),
            )
            self.requests.append(recorded)
            if recorded.host != self.host:
                return Response(status_code=500)
            return self.handler(recorded)

    def mount(self, session: requests.Session) -> AsgiTransportAdapter:
        adapter = AsgiTransportAdapter(self.app)
        session.mount(f"http://{self.host}/", adapter)
        return adapter


__all__ = ["AsgiTransportAdapter", "FakePackageServer", "RecordedRequest"]
