from __future__ import annotations

import logging
from dataclasses import dataclass

from shipping_workflow.domain.models import PackageGen, PackageInfo
from shipping_workflow.domain.ports import PackageServicePort, UseCaseError
from shipping_workflow.usecases.error_mapping import map_api_error

_log = logging.getLogger(__name__)


@dataclass
class CreatePackage:
    """Use-case creating one package through the package service port."""

    package_port: PackageServicePort

    def __call__(self, info: PackageInfo) -> PackageGen:
        try:
            package = self.package_port.create_package(info)
        except UseCaseError:
            raise
        except Exception as exc:
            err = map_api_error(exc, default_code="PACKAGE_CREATE_FAILED")
            _log.error(
                "Create package %s failed [%s]: %s", info.package_id, err.code, err.message
            )
            raise err from exc

        _log.debug("Create package %s returned %r", info.package_id, package)
        return package
