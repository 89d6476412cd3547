from __future__ import annotations

import pytest

from shipping_workflow.adapters.api_errors import BackendServiceCallFailedError
from shipping_workflow.adapters.package_mock import PackageServiceMock
from shipping_workflow.domain.models import ContainerSize, PackageGen, PackageInfo
from shipping_workflow.domain.ports import UseCaseError
from shipping_workflow.usecases.create_package import CreatePackage


def _info() -> PackageInfo:
    return PackageInfo(package_id="pkg7", size=ContainerSize.MEDIUM, weight=4.0, tag="t")


def test_create_package_returns_port_result() -> None:
    port = PackageServiceMock()

    package = CreatePackage(package_port=port)(_info())

    assert package == PackageGen(id="pkg7", size=ContainerSize.MEDIUM, weight=4.0, tag="t")
    assert port.calls == [_info()]
    assert port.packages["pkg7"] == package


def test_create_package_maps_rejection_to_use_case_error() -> None:
    error = BackendServiceCallFailedError("Bad Request", status=400)
    port = PackageServiceMock(error=error)

    with pytest.raises(UseCaseError) as excinfo:
        CreatePackage(package_port=port)(_info())

    assert excinfo.value.code == "PACKAGE_REJECTED"
    assert "Bad Request" in excinfo.value.message
    assert excinfo.value.__cause__ is error


def test_create_package_maps_transport_failure() -> None:
    cause = ConnectionError("refused")
    port = PackageServiceMock(error=BackendServiceCallFailedError("refused", cause))

    with pytest.raises(UseCaseError) as excinfo:
        CreatePackage(package_port=port)(_info())

    assert excinfo.value.code == "PACKAGE_SERVICE_UNAVAILABLE"


def test_create_package_passes_use_case_errors_through() -> None:
    error = UseCaseError("CUSTOM", "already mapped")
    port = PackageServiceMock(error=error)

    with pytest.raises(UseCaseError) as excinfo:
        CreatePackage(package_port=port)(_info())

    assert excinfo.value is error


def test_create_package_uses_default_code_for_unexpected_errors() -> None:
    port = PackageServiceMock(error=KeyError("boom"))

    with pytest.raises(UseCaseError) as excinfo:
        CreatePackage(package_port=port)(_info())

    assert excinfo.value.code == "PACKAGE_CREATE_FAILED"
