"""Object shape: every field written under its name, keys sorted."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from annodm.errors import DecodeError
from annodm.model.base_attribute import BaseAttribute
from annodm.model.fields import spec_of, wire_name

from .base import TreeCodec, wire_fields

logger = logging.getLogger(__name__)


class ObjectShapeCodec(TreeCodec):
    """Encodes attributes as JSON objects keyed by field name.

    Every declared field is written, absent ones as ``null``, so a
    reader can tell a field left at a default value from a field that
    does not exist. Keys appear in alphabetical order.

    When decoding, a missing optional key means the field is absent,
    which lets older readers accept newer writers and vice versa. A
    missing required key is an error. Unknown keys are skipped, or
    rejected when the codec is strict.
    """

    def encode(self, attribute: BaseAttribute) -> dict[str, Any]:
        entries = [
            (
                wire_name(a),
                self._encode_value(spec_of(a), getattr(attribute, a.name)),
            )
            for a in wire_fields(type(attribute))
        ]
        return dict(sorted(entries, key=lambda entry: entry[0]))

    def decode(self, cls: type, tree: Any) -> Any:
        if not isinstance(tree, Mapping):
            raise DecodeError(
                f"{cls.__name__} in object shape must be a JSON object"
            )

        for key in tree:
            if not isinstance(key, str):
                raise DecodeError(
                    f"{cls.__name__} field name {key!r} is not a string"
                )

        fields = wire_fields(cls)
        known = {wire_name(a) for a in fields}
        unknown = sorted(key for key in tree if key not in known)
        if unknown:
            if self.strict:
                raise DecodeError(
                    f"unknown field(s) for {cls.__name__}: "
                    + ", ".join(unknown)
                )
            logger.debug(f"Ignoring unknown {cls.__name__} fields {unknown}")

        values: dict[str, Any] = {}
        for attribute in fields:
            spec = spec_of(attribute)
            key = wire_name(attribute)
            if key not in tree:
                if spec.required:
                    raise DecodeError(
                        f"missing required field {key!r} for {cls.__name__}"
                    )
                values[attribute.name] = None
                continue
            try:
                values[attribute.name] = self._decode_value(
                    spec, tree[key], values
                )
            except DecodeError as exc:
                exc.prepend(key)
                raise

        return self._construct(cls, values)
