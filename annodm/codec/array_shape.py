"""Array shape: field values written positionally, without names."""

from __future__ import annotations

from typing import Any

from annodm.errors import DecodeError
from annodm.model.base_attribute import BaseAttribute
from annodm.model.fields import spec_of

from .base import TreeCodec, wire_fields


class ArrayShapeCodec(TreeCodec):
    """Encodes attributes as JSON arrays in published field order.

    The order of a type is given by :func:`annodm.codec.base.schema`:
    constructor order, inherited fields first, extended properties
    last. Adding a field to a type changes its arity, so array-shape
    data is only readable with the schema it was written with. An array
    of any other length is rejected rather than partially decoded.
    """

    def encode(self, attribute: BaseAttribute) -> list[Any]:
        return [
            self._encode_value(spec_of(a), getattr(attribute, a.name))
            for a in wire_fields(type(attribute))
        ]

    def decode(self, cls: type, tree: Any) -> Any:
        if not isinstance(tree, list):
            raise DecodeError(
                f"{cls.__name__} in array shape must be a JSON array"
            )

        fields = wire_fields(cls)
        if len(tree) != len(fields):
            raise DecodeError(
                f"{cls.__name__} in array shape has {len(fields)} "
                f"elements, got {len(tree)}"
            )

        values: dict[str, Any] = {}
        for index, (attribute, raw) in enumerate(zip(fields, tree)):
            try:
                values[attribute.name] = self._decode_value(
                    spec_of(attribute), raw, values
                )
            except DecodeError as exc:
                exc.prepend(index)
                raise

        return self._construct(cls, values)
