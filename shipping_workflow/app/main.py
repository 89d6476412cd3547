"""Command line entry point creating one package on the package service."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from shipping_workflow.adapters.package_mock import PackageServiceMock
from shipping_workflow.app.settings import WorkflowSettings, build_package_caller
from shipping_workflow.domain.models import ContainerSize, PackageInfo
from shipping_workflow.domain.ports import PackageServicePort, UseCaseError
from shipping_workflow.usecases.create_package import CreatePackage
from shipping_workflow.utils import logging as logging_utils

_log = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for a single create-package call."""
    parser = argparse.ArgumentParser(description="Create a package on the package service.")
    parser.add_argument("--id", dest="package_id", required=True)
    parser.add_argument(
        "--size",
        choices=[size.name.lower() for size in ContainerSize],
        default="medium",
    )
    parser.add_argument("--weight", type=float, required=True)
    parser.add_argument("--tag", default="")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use the in-memory package service instead of SERVICE_URI_PACKAGE.",
    )
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def _build_port(offline: bool) -> PackageServicePort:
    if offline:
        return PackageServiceMock()
    return build_package_caller(WorkflowSettings.from_env())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = _parse_args(argv)
    level = logging_utils.configure_root(args.log_level)
    _log.debug("Log level %s", logging_utils.level_name(level))

    try:
        info = PackageInfo(
            package_id=args.package_id,
            size=ContainerSize.parse(args.size),
            weight=args.weight,
            tag=args.tag,
        )
        port = _build_port(args.offline)
    except ValueError as exc:
        _log.error("Create package %s rejected [INVALID_INPUT]: %s", args.package_id, exc)
        print(f"error[INVALID_INPUT]: {exc}", file=sys.stderr)
        return 1

    try:
        package = CreatePackage(package_port=port)(info)
    except UseCaseError as exc:
        print(f"error[{exc.code}]: {exc.message}", file=sys.stderr)
        return 1

    print(json.dumps(package.to_payload()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
