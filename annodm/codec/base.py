"""Field handling shared by the object-shape and array-shape codecs."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

import attrs

from annodm.errors import ConstructionError, DecodeError
from annodm.model.base_attribute import BaseAttribute
from annodm.model.extended_properties import ExtendedProperties
from annodm.model.fields import (
    INT_MAX,
    INT_MIN,
    FieldSpec,
    Kind,
    spec_of,
    wire_name,
)

from .registry import TypeRegistry

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def wire_fields(cls: type) -> tuple[attrs.Attribute, ...]:
    """Return the fields of ``cls`` in array-shape order.

    The order is the constructor order: inherited fields first, each
    class's own fields in declaration order, and the extended
    properties last.
    """

    fields = attrs.fields(cls)
    rest = [a for a in fields if spec_of(a).kind is not Kind.PROPERTIES]
    bag = [a for a in fields if spec_of(a).kind is Kind.PROPERTIES]
    return tuple(rest + bag)


def schema(cls: type) -> list[str]:
    """Return the wire names of ``cls`` in array-shape order."""

    return [wire_name(a) for a in wire_fields(cls)]


def _type_label(raw: Any) -> str:
    if raw is None:
        return "null"
    if isinstance(raw, bool):
        return "boolean"
    if isinstance(raw, (int, float)):
        return "number"
    if isinstance(raw, str):
        return "string"
    if isinstance(raw, list):
        return "array"
    if isinstance(raw, Mapping):
        return "object"
    return type(raw).__name__


class TreeCodec:
    """Converts attributes to and from JSON-compatible trees.

    Subclasses decide how the fields of one attribute are laid out
    (:meth:`encode` and :meth:`decode`); this class converts the
    individual field values, which look the same in both shapes.

    Args:
        registry: Registry resolving list item types.
        strict: Reject input that a lenient reader would skip.
    """

    def __init__(self, registry: TypeRegistry, strict: bool = False) -> None:
        self.registry = registry
        self.strict = strict

    def encode(self, attribute: BaseAttribute) -> Any:
        raise NotImplementedError

    def decode(self, cls: type, tree: Any) -> Any:
        raise NotImplementedError

    def _encode_value(self, spec: FieldSpec, value: Any) -> Any:
        """Return the wire form of one field value."""

        if value is None:
            return None
        kind = spec.kind
        if kind is Kind.ENUM:
            return value.value
        if kind is Kind.STR_LIST:
            return list(value)
        if kind in (Kind.ATTRIBUTE_LIST, Kind.ITEMS):
            return [self.encode(item) for item in value]
        if kind is Kind.PROPERTIES:
            return value.to_dict()
        return value

    def _decode_value(
        self, spec: FieldSpec, raw: Any, decoded: Mapping[str, Any]
    ) -> Any:
        """Return the field value for its wire form ``raw``.

        Args:
            spec: Description of the field.
            raw: Wire value.
            decoded: Fields of the same attribute decoded so far; list
                attributes look up their ``item_type`` here.

        Throws:
            DecodeError: If ``raw`` has the wrong JSON type for the field.
        """

        if raw is None:
            return None
        kind = spec.kind

        if kind is Kind.STR:
            if isinstance(raw, str):
                return raw
        elif kind is Kind.INT:
            if isinstance(raw, int) and not isinstance(raw, bool):
                if not INT_MIN <= raw <= INT_MAX:
                    raise DecodeError(
                        f"integer is outside [{INT_MIN}, {INT_MAX}]"
                    )
                return raw
        elif kind is Kind.FLOAT:
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                try:
                    value = float(raw)
                except OverflowError:
                    raise DecodeError(
                        "number is too large for a float"
                    ) from None
                if not math.isfinite(value):
                    raise DecodeError(f"expected a finite number, got {raw}")
                return value
        elif kind is Kind.BOOL:
            if isinstance(raw, bool):
                return raw
        elif kind is Kind.ENUM:
            if isinstance(raw, str):
                try:
                    return spec.ref(raw)  # type: ignore[misc]
                except ValueError:
                    raise DecodeError(
                        f"unknown {spec.ref.__name__} "  # type: ignore
                        f"code {raw!r}"
                    ) from None
        elif kind is Kind.STR_LIST:
            if isinstance(raw, list):
                for index, item in enumerate(raw):
                    if not isinstance(item, str):
                        raise DecodeError(
                            f"expected string, got {_type_label(item)}",
                            f"/{index}",
                        )
                return tuple(raw)
        elif kind is Kind.ATTRIBUTE_LIST:
            if isinstance(raw, list):
                return self._decode_list(spec.item_class, raw)
        elif kind is Kind.ITEMS:
            if isinstance(raw, list):
                item_type = decoded.get("item_type")
                if item_type is None:
                    raise DecodeError("items without an item type")
                item_class = self.registry.resolve(item_type)
                return self._decode_list(item_class, raw)
        elif kind is Kind.PROPERTIES:
            if isinstance(raw, Mapping):
                try:
                    return ExtendedProperties(raw)
                except ConstructionError as exc:
                    raise DecodeError(str(exc)) from exc

        raise DecodeError(
            f"expected {kind.value}, got {_type_label(raw)}"
        )

    def _decode_list(self, cls: type, raw: list[Any]) -> tuple[Any, ...]:
        items = []
        for index, item in enumerate(raw):
            try:
                items.append(self.decode(cls, item))
            except DecodeError as exc:
                exc.prepend(index)
                raise
        return tuple(items)

    def _construct(self, cls: type, values: dict[str, Any]) -> Any:
        """Instantiate ``cls``, reporting violations as decode errors."""

        try:
            return cls(**values)
        except ConstructionError as exc:
            logger.debug(f"Rejected decoded {cls.__name__}: {exc}")
            raise DecodeError(str(exc)) from exc
