from __future__ import annotations

from typing import Dict, List, Optional

from shipping_workflow.domain.models import PackageGen, PackageInfo
from shipping_workflow.domain.ports import PackageId, PackageServicePort


class PackageServiceMock(PackageServicePort):
    """In-memory package service used for tests and offline development."""

    def __init__(self, *, error: Optional[Exception] = None) -> None:
        self.error = error
        self.calls: List[PackageInfo] = []
        self.packages: Dict[PackageId, PackageGen] = {}

    def create_package(self, info: PackageInfo) -> PackageGen:
        self.calls.append(info)
        if self.error is not None:
            raise self.error
        package = PackageGen(
            id=info.package_id,
            size=info.size,
            weight=info.weight,
            tag=info.tag,
        )
        # PUT semantics: creating an existing id replaces it.
        self.packages[package.id] = package
        return package
