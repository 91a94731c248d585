"""Immutable bag of extension properties attached to every attribute."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from typing import Any

from annodm.errors import ConstructionError

# Scalar JSON values accepted inside the bag. ``bool`` is covered by
# ``int`` but listed to make the closed set explicit.
SCALAR_TYPES = (str, bool, int, float, type(None))

# Integers outside the signed 64-bit range cannot be written by every
# JSON backend.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _check_scalar(value: Any, path: str) -> None:
    where = path or "/"
    if isinstance(value, float) and not math.isfinite(value):
        raise ConstructionError(
            f"extended property value at {where} is not a finite number"
        )
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and not INT64_MIN <= value <= INT64_MAX
    ):
        raise ConstructionError(
            f"extended property value at {where} is outside the 64-bit "
            "integer range"
        )


def copy_value(value: Any, path: str = "") -> Any:
    """Return a deep copy of a dynamic JSON value.

    Lists and tuples become lists and mappings become plain ``dict``
    objects; scalars are returned unchanged.

    Args:
        value: Value to copy.
        path: Location of ``value`` used in error messages.

    Returns:
        Independent copy of ``value``.

    Throws:
        ConstructionError: If ``value`` contains anything other than
            JSON scalars, sequences and string-keyed mappings, or a
            number JSON cannot represent.
    """

    if isinstance(value, SCALAR_TYPES):
        _check_scalar(value, path)
        return value
    if isinstance(value, (list, tuple)):
        return [
            copy_value(item, f"{path}/{i}") for i, item in enumerate(value)
        ]
    if isinstance(value, Mapping):
        copied = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ConstructionError(
                    f"extended property key {key!r} at {path or '/'} "
                    "is not a string"
                )
            copied[key] = copy_value(item, f"{path}/{key}")
        return copied
    raise ConstructionError(
        f"extended property value at {path or '/'} has unsupported type "
        f"{type(value).__name__}"
    )


def freeze_value(value: Any) -> Any:
    """Return a hashable equivalent of a dynamic JSON value.

    Scalars are tagged with their type, so ``1``, ``1.0`` and ``True``
    stay distinct the way they are on the wire.
    """

    if isinstance(value, list):
        return tuple(freeze_value(item) for item in value)
    if isinstance(value, dict):
        return frozenset((k, freeze_value(v)) for k, v in value.items())
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return (bool, value)
    if isinstance(value, int):
        return (int, value)
    return (float, value)


class ExtendedProperties(Mapping[str, Any]):
    """Read-only mapping of extension property names to JSON values.

    The bag copies its input on construction, so mutating the mapping
    (or any nested list or dict) it was created from has no effect on
    it. Lookups return copies of nested lists and mappings, so values
    read from the bag cannot be used to modify it either.

    Equality is mapping equality: two bags with the same entries are
    equal whatever the insertion order, and a bag compares equal to a
    plain ``dict`` with the same entries. Unlike ``dict`` equality,
    ``1``, ``1.0`` and ``True`` are different values.
    """

    __slots__ = ("_data", "_frozen")

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy_value(data or {})
        self._frozen = freeze_value(self._data)

    def __getitem__(self, key: str) -> Any:
        return copy_value(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExtendedProperties):
            return self._frozen == other._frozen
        if isinstance(other, Mapping):
            try:
                return self._frozen == freeze_value(copy_value(other))
            except ConstructionError:
                return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._frozen)

    def __repr__(self) -> str:
        return f"ExtendedProperties({self._data!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a deep, mutable copy of the entries."""

        return copy_value(self._data)


def to_extended_properties(
    value: Mapping[str, Any] | None,
) -> ExtendedProperties | None:
    """Convert ``value`` into a bag, keeping ``None`` as absent.

    Args:
        value: Mapping to copy, an existing bag or ``None``.

    Returns:
        ``None`` when ``value`` is ``None``; otherwise a bag. Existing
        bags are returned as they are since they cannot change.
    """

    if value is None or isinstance(value, ExtendedProperties):
        return value
    if not isinstance(value, Mapping):
        raise ConstructionError(
            "extended properties must be a mapping, got "
            f"{type(value).__name__}"
        )
    return ExtendedProperties(value)
