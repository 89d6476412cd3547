"""Shared HTTP transport utilities for REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations share timeout policy and API-key header construction.

Dependencies:
    - ``requests`` for network I/O.

Call context:
    - Constructed by ``shipping_workflow.app.settings.build_package_caller``
      and handed to REST adapters such as
      ``shipping_workflow/adapters/package_rest.py``.
    - Tests inject their own ``requests.Session`` with a mounted transport
      adapter to reach an in-process fake server.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
    """
    request_timeout_s: float = 10


class JsonSession:
    """Shared requests wrapper with JSON and API-key headers.

    This class is intentionally transport-only. Callers provide endpoint URLs
    and decide how to map responses and exceptions into adapter errors. It
    does not retry.
    """

    def __init__(
        self,
        api_key: Optional[str],
        cfg: HttpConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a JSON session.

        Args:
            api_key: API key value to place in ``X-API-Key`` headers, or ``None``.
            cfg: Shared timeout settings.
            session: Optional preconfigured ``requests.Session``. A fresh one is
                created when omitted.
        """
        self.session = session if session is not None else requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(
        self, accept: str = "application/json", json_body: bool = False
    ) -> Dict[str, str]:
        """Build request headers for adapter calls."""
        headers = {"Accept": accept}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def put(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send a JSON PUT request.

        Args:
            url: Absolute endpoint URL.
            json_body: Optional payload object serialized to JSON text.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` for any HTTP status.

        Raises:
            TypeError: If ``json_body`` is not JSON serializable.
            ValueError: If ``json_body`` holds NaN or infinite floats.
            requests.RequestException: On transport failures.
        """
        data = None if json_body is None else json.dumps(json_body, allow_nan=False)
        return self.session.put(
            url,
            data=data,
            headers=self._headers(json_body=json_body is not None),
            timeout=timeout or self.cfg.request_timeout_s,
        )

    def close(self) -> None:
        self.session.close()


__all__ = ["HttpConfig", "JsonSession"]
