"""Encode attributes and attribute maps to JSON in either wire shape."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Union

from annodm.errors import DecodeError
from annodm.json_utils import json_dumps, json_loads
from annodm.model.base_attribute import BaseAttribute
from annodm.model.list_attribute import ListAttribute

from .array_shape import ArrayShapeCodec
from .base import TreeCodec, wire_fields
from .object_shape import ObjectShapeCodec
from .registry import TypeRegistry, default_registry
from .shape import Shape

logger = logging.getLogger(__name__)

# Types that may be used to name the class being decoded.
TypeRef = Union[type, str]


class AttributeCodec:
    """Converts attributes to and from JSON in one wire shape.

    The codec keeps no state besides its configuration, so one instance
    may be shared between threads.

    Args:
        shape: Wire shape used for encoding and expected when decoding.
        strict: Reject unknown object-shape fields instead of skipping
            them.
        registry: Registry resolving type names; the registry of every
            built-in attribute kind when omitted.
    """

    def __init__(
        self,
        shape: Shape | str = Shape.OBJECT,
        strict: bool = False,
        registry: TypeRegistry | None = None,
    ) -> None:
        self.shape = Shape(shape)
        self.strict = strict
        self.registry = (
            registry if registry is not None else default_registry()
        )
        self._tree: TreeCodec
        if self.shape is Shape.OBJECT:
            self._tree = ObjectShapeCodec(self.registry, strict)
        else:
            self._tree = ArrayShapeCodec(self.registry, strict)

    def __repr__(self) -> str:
        return (
            f"AttributeCodec(shape={self.shape.value!r}, "
            f"strict={self.strict!r})"
        )

    def _resolve(self, type_ref: TypeRef) -> type:
        if isinstance(type_ref, str):
            return self.registry.resolve(type_ref)
        return type_ref

    def to_tree(self, attribute: BaseAttribute) -> Any:
        """Return the JSON-compatible tree for ``attribute``."""

        return self._tree.encode(attribute)

    def from_tree(self, type_ref: TypeRef, tree: Any) -> Any:
        """Decode ``tree`` into an instance of ``type_ref``.

        Args:
            type_ref: Attribute class, or its registered name.
            tree: Parsed JSON in this codec's shape.

        Returns:
            Decoded attribute.

        Throws:
            DecodeError: If ``tree`` does not describe a valid instance.
        """

        cls = self._resolve(type_ref)
        try:
            return self._tree.decode(cls, tree)
        except DecodeError as exc:
            logger.debug(f"Failed to decode {cls.__name__}: {exc}")
            raise

    def dumps(self, attribute: BaseAttribute, indent: bool = False) -> str:
        """Serialize ``attribute`` to JSON text."""

        return json_dumps(self.to_tree(attribute), indent=indent)

    def loads(self, type_ref: TypeRef, data: str | bytes) -> Any:
        """Deserialize JSON text into an instance of ``type_ref``."""

        return self.from_tree(type_ref, json_loads(data))

    def encode_map(
        self, attributes: Mapping[str, BaseAttribute]
    ) -> dict[str, Any]:
        """Encode a heterogeneous collection keyed by type name.

        The key of a plain attribute is its class name; the key of a list
        attribute is the name of its item type, as used by a text to
        store its attribute collections.

        Args:
            attributes: Attributes keyed by type name.

        Returns:
            JSON object with the same keys, in the same order.

        Throws:
            ValueError: If a key does not name the type of its value.
        """

        for key, value in attributes.items():
            if _map_key(value) != key:
                raise ValueError(
                    f"{type(value).__name__} cannot be stored under {key!r}"
                )
        return {key: self.to_tree(value) for key, value in attributes.items()}

    def decode_map(self, tree: Any) -> dict[str, BaseAttribute]:
        """Decode a collection produced by :meth:`encode_map`.

        A value encoded as a list attribute is recognized by its shape:
        in object shape by its ``items`` key, in array shape by having
        the arity of a list attribute with a string naming the key's
        type in front.

        Throws:
            DecodeError: If a key names an unregistered type or a value
                does not decode.
        """

        if not isinstance(tree, Mapping):
            raise DecodeError("attribute map must be a JSON object")

        decoded: dict[str, BaseAttribute] = {}
        for key, value in tree.items():
            try:
                cls = self.registry.resolve(key)
                if self._is_list(key, value):
                    cls = ListAttribute
                attribute = self.from_tree(cls, value)
                if _map_key(attribute) != key:
                    raise DecodeError(
                        f"list of {attribute.item_type} stored under {key!r}"
                    )
                decoded[key] = attribute
            except DecodeError as exc:
                exc.prepend(key)
                raise
        return decoded

    def _is_list(self, key: str, value: Any) -> bool:
        if self.shape is Shape.OBJECT:
            return isinstance(value, Mapping) and "items" in value
        return (
            isinstance(value, list)
            and len(value) == len(wire_fields(ListAttribute))
            and value[0] == key
            and isinstance(value[1], list)
        )

    def dumps_map(
        self, attributes: Mapping[str, BaseAttribute], indent: bool = False
    ) -> str:
        """Serialize an attribute map to JSON text."""

        return json_dumps(self.encode_map(attributes), indent=indent)

    def loads_map(self, data: str | bytes) -> dict[str, BaseAttribute]:
        """Deserialize JSON text produced by :meth:`dumps_map`."""

        return self.decode_map(json_loads(data))


def _map_key(attribute: BaseAttribute) -> str:
    """Return the attribute-map key an attribute is stored under."""

    if isinstance(attribute, ListAttribute):
        return attribute.item_type
    return type(attribute).__name__
