"""REST adapter implementing the package service port."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Optional
from urllib.parse import quote

import requests

from shipping_workflow.adapters.api_errors import (
    BackendServiceCallFailedError,
    parse_error_payload,
)
from shipping_workflow.adapters.http_client import HttpConfig, JsonSession
from shipping_workflow.domain.models import PackageGen, PackageInfo
from shipping_workflow.domain.ports import PackageServicePort


class PackageServiceCaller(PackageServicePort):
    """HTTP adapter for `PUT /{packageId}` on the package service."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: float = 10,
        session: Optional[JsonSession] = None,
    ) -> None:
        base = str(base_url or "").strip()
        if not base:
            raise ValueError("PackageServiceCaller requires a package service URL")

        self.base_url = base
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = session if session is not None else JsonSession(api_key, self.cfg)
        self._log = logging.getLogger(__name__)

    def create_package(self, info: PackageInfo) -> PackageGen:
        """Create ``info`` on the package service and return the stored package.

        Raises:
            BackendServiceCallFailedError: On any status other than 201 Created
                (reason only), or when the call itself fails (reason and cause).
        """
        url = self._make_url(info.package_id)
        context = f"PUT {url}"
        try:
            self._log.debug("%s", context)
            resp = self.session.put(
                url,
                json_body=info.to_payload(),
                timeout=self.cfg.request_timeout_s,
            )
            if resp.status_code == HTTPStatus.CREATED:
                try:
                    package = PackageGen.from_payload(resp.json())
                except Exception as exc:
                    message = str(exc) or type(exc).__name__
                    self._log.warning("Invalid created body for %s: %s", context, message)
                    raise BackendServiceCallFailedError(
                        message,
                        exc,
                        status=resp.status_code,
                        context=context,
                    ) from exc
                self._log.info("Package %s created.", package.id)
                return package

            reason = self._reason(resp)
            self._log.warning(
                "Package service rejected %s: HTTP %s %s",
                context,
                resp.status_code,
                reason,
            )
            raise BackendServiceCallFailedError(
                reason,
                status=resp.status_code,
                payload=parse_error_payload(resp),
                context=context,
            )
        except BackendServiceCallFailedError:
            raise
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            self._log.warning("Package service call failed for %s: %s", context, message)
            raise BackendServiceCallFailedError(message, exc, context=context) from exc

    # ------------------------------------------------------------------
    def _make_url(self, package_id: str) -> str:
        """Build endpoint URL from the base URL and one package id segment."""
        base = self.base_url
        if base.endswith("/"):
            base = base[:-1]
        return f"{base}/{quote(package_id, safe='')}"

    @staticmethod
    def _reason(resp: requests.Response) -> str:
        """Return the reason phrase, or the standard phrase for the status."""
        reason: Any = getattr(resp, "reason", None)
        if isinstance(reason, bytes):
            reason = reason.decode("iso-8859-1", errors="replace")
        text = str(reason or "").strip()
        if text:
            return text
        try:
            return HTTPStatus(resp.status_code).phrase
        except ValueError:
            return f"HTTP {resp.status_code}"


__all__ = ["PackageServiceCaller"]
