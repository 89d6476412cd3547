"""Typed domain objects for the package service workflow."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Mapping


class ContainerSize(IntEnum):
    """Container size class, serialized as its integer value."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @classmethod
    def parse(cls, value: Any) -> "ContainerSize":
        """Coerce an int, numeric string or member name into a size.

        Raises:
            ValueError: If ``value`` does not name a known size.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid container size: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Invalid container size: {value!r}") from None
        text = str(value or "").strip()
        if text.lstrip("-").isdigit():
            return cls.parse(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid container size: {value!r}") from None


def _coerce_weight(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Invalid package weight: {value!r}")
    try:
        weight = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid package weight: {value!r}") from None
    # JSON has no NaN/Infinity
    if not math.isfinite(weight):
        raise ValueError(f"Invalid package weight: {value!r}")
    return weight


@dataclass(frozen=True)
class PackageInfo:
    """Client-side description of a package to create."""

    package_id: str
    size: ContainerSize
    weight: float
    tag: str = ""

    def __post_init__(self) -> None:
        package_id = str(self.package_id or "")
        if not package_id.strip():
            raise ValueError("package_id is required")
        # frozen dataclass: normalize through object.__setattr__
        # package_id is kept verbatim, it becomes the URL path segment
        object.__setattr__(self, "package_id", package_id)
        object.__setattr__(self, "size", ContainerSize.parse(self.size))
        object.__setattr__(self, "weight", _coerce_weight(self.weight))
        object.__setattr__(self, "tag", str(self.tag or ""))

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body sent to the package service."""
        return {
            "packageId": self.package_id,
            "size": int(self.size),
            "weight": self.weight,
            "tag": self.tag,
        }


@dataclass(frozen=True)
class PackageGen:
    """Package representation returned by the package service."""

    id: str
    size: ContainerSize
    weight: float
    tag: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PackageGen":
        """Build a package from a response body.

        Keys are matched case-insensitively so both ``id`` and ``Id`` style
        bodies are accepted.

        Raises:
            ValueError: If the payload is not an object or a field is invalid.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Invalid package payload: expected object")
        fields = {str(key).lower(): value for key, value in payload.items()}
        package_id = str(fields.get("id") or "").strip()
        if not package_id:
            raise ValueError("Invalid package payload: id missing")
        if "size" not in fields:
            raise ValueError("Invalid package payload: size missing")
        return cls(
            id=package_id,
            size=ContainerSize.parse(fields["size"]),
            weight=_coerce_weight(fields.get("weight")),
            tag=str(fields.get("tag") or ""),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "size": int(self.size),
            "weight": self.weight,
            "tag": self.tag,
        }


__all__ = ["ContainerSize", "PackageGen", "PackageInfo"]
