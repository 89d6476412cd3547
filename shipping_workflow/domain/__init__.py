"""Domain package exports for value objects and ports."""

from .models import ContainerSize, PackageGen, PackageInfo
from .ports import PackageId, PackageServicePort, UseCaseError

__all__ = [
    "ContainerSize",
    "PackageGen",
    "PackageId",
    "PackageInfo",
    "PackageServicePort",
    "UseCaseError",
]
