from __future__ import annotations

from typing import Protocol

from shipping_workflow.domain.models import PackageGen, PackageInfo

PackageId = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class PackageServicePort(Protocol):
    """Create operations against the remote package service."""

    def create_package(self, info: PackageInfo) -> PackageGen: ...
