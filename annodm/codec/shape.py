"""Wire shapes understood by the codec."""

from __future__ import annotations

import enum


class Shape(enum.Enum):
    """JSON layout used for encoded attributes.

    ``OBJECT`` writes every field under its name, keys sorted
    alphabetically. ``ARRAY`` writes the field values positionally in the
    type's published field order, with the extended properties last; it
    is smaller on the wire but requires both sides to share the schema.
    """

    OBJECT = "object"
    ARRAY = "array"
