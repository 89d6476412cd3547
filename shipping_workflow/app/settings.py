"""Environment-backed settings and adapter composition.

Variables:
    SERVICE_URI_PACKAGE: Base URI of the package service, e.g.
        ``http://packagehost/api/packages/``.
    PACKAGE_SERVICE_API_KEY: Optional value for the ``X-API-Key`` header.
    PACKAGE_SERVICE_TIMEOUT_S: Request timeout in seconds (default 10).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import requests

from shipping_workflow.adapters.http_client import HttpConfig, JsonSession
from shipping_workflow.adapters.package_rest import PackageServiceCaller

DEFAULT_TIMEOUT_S = 10.0

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkflowSettings:
    """Settings needed to reach the package service."""

    package_service_uri: str = ""
    package_service_api_key: Optional[str] = None
    request_timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WorkflowSettings":
        env = os.environ if environ is None else environ
        api_key = (env.get("PACKAGE_SERVICE_API_KEY") or "").strip()
        return cls(
            package_service_uri=(env.get("SERVICE_URI_PACKAGE") or "").strip(),
            package_service_api_key=api_key or None,
            request_timeout_s=_parse_timeout(env.get("PACKAGE_SERVICE_TIMEOUT_S")),
        )


def _parse_timeout(value: Optional[str]) -> float:
    if value is None or not value.strip():
        return DEFAULT_TIMEOUT_S
    try:
        timeout = float(value)
    except ValueError:
        _log.warning("Ignoring invalid PACKAGE_SERVICE_TIMEOUT_S=%r", value)
        return DEFAULT_TIMEOUT_S
    if timeout <= 0:
        _log.warning("Ignoring non-positive PACKAGE_SERVICE_TIMEOUT_S=%r", value)
        return DEFAULT_TIMEOUT_S
    return timeout


def build_package_caller(
    settings: WorkflowSettings,
    *,
    session: Optional[requests.Session] = None,
) -> PackageServiceCaller:
    """Wire the package service adapter from settings.

    Args:
        settings: Loaded workflow settings.
        session: Optional ``requests.Session`` used as transport; tests pass
            one with a mounted fake-server adapter.

    Raises:
        ValueError: If ``SERVICE_URI_PACKAGE`` is not configured.
    """
    if not settings.package_service_uri:
        raise ValueError("SERVICE_URI_PACKAGE is not configured")
    cfg = HttpConfig(request_timeout_s=settings.request_timeout_s)
    transport = JsonSession(settings.package_service_api_key, cfg, session=session)
    return PackageServiceCaller(
        settings.package_service_uri,
        request_timeout_s=settings.request_timeout_s,
        session=transport,
    )


__all__ = ["DEFAULT_TIMEOUT_S", "WorkflowSettings", "build_package_caller"]
