"""Field declarations shared by the attribute classes and the codec.

Every attrs field of an attribute class is declared through one of the
helpers below. The helper attaches a :class:`FieldSpec` to the field's
metadata, installs a validator raising :class:`ConstructionError` and,
for collection fields, a converter that copies the input into a tuple.
The codec reads the same metadata to decide how each field travels on
the wire, so the two never disagree about a field's kind.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from typing import Any, Callable, Union

import attrs
from attrs import define, field

from annodm.errors import ConstructionError
from annodm.model.extended_properties import to_extended_properties

FIELD_KEY = "annodm"

ClassRef = Union[type, Callable[[], type]]

# Integer fields hold signed 32-bit values.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class Kind(enum.Enum):
    """Wire kind of an attribute field."""

    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    ENUM = "enum"
    STR_LIST = "str_list"
    ATTRIBUTE_LIST = "attribute_list"
    ITEMS = "items"
    PROPERTIES = "properties"


# Expected-value wording for range-checked kinds.
_EXPECTED = {
    Kind.INT: f"int in [{INT_MIN}, {INT_MAX}]",
    Kind.FLOAT: "finite float",
}


@define(frozen=True, slots=True)
class FieldSpec:
    """Wire description of one attribute field.

    Attributes:
        kind: How the value is represented on the wire.
        required: Whether ``None`` is rejected for this field.
        wire: Explicit wire name; derived from the field name if unset.
        ref: Enumeration class for ``ENUM`` fields, or the item class
            (or a zero-argument callable returning it, for classes that
            refer to each other) for ``ATTRIBUTE_LIST`` fields.
    """

    kind: Kind
    required: bool = False
    wire: str | None = None
    ref: ClassRef | None = None

    @property
    def item_class(self) -> type:
        """Resolved class referenced by ``ref``."""

        ref = self.ref
        if ref is None:
            raise TypeError(f"{self.kind.value} field has no item class")
        return ref if isinstance(ref, type) else ref()


def camel_case(name: str) -> str:
    """Return the lowerCamelCase form of a snake_case field name."""

    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def spec_of(attribute: attrs.Attribute) -> FieldSpec:
    """Return the :class:`FieldSpec` attached to an attrs field."""

    return attribute.metadata[FIELD_KEY]


def wire_name(attribute: attrs.Attribute) -> str:
    """Return the name an attrs field is written under on the wire."""

    return spec_of(attribute).wire or camel_case(attribute.name)


def _describe(value: Any) -> str:
    return f"{type(value).__name__} {value!r}"


def _is_kind(kind: Kind, value: Any, ref: ClassRef | None) -> bool:
    """Return whether a non-``None`` value matches a scalar kind."""

    if kind is Kind.STR:
        return isinstance(value, str)
    if kind is Kind.INT:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and INT_MIN <= value <= INT_MAX
        )
    if kind is Kind.FLOAT:
        return isinstance(value, float) and math.isfinite(value)
    if kind is Kind.BOOL:
        return isinstance(value, bool)
    if kind is Kind.ENUM:
        return isinstance(value, ref)  # type: ignore[arg-type]
    return False


def _validator(
    spec: FieldSpec,
) -> Callable[[Any, attrs.Attribute, Any], None]:
    """Build the attrs validator enforcing ``spec`` on a field."""

    def check(instance: Any, attribute: attrs.Attribute, value: Any) -> None:
        owner = type(instance).__name__
        if value is None:
            if spec.required:
                raise ConstructionError(
                    f"{owner}.{attribute.name} is required"
                )
            return

        if spec.kind is Kind.STR_LIST:
            for item in value:
                if not isinstance(item, str):
                    raise ConstructionError(
                        f"{owner}.{attribute.name} holds {_describe(item)}, "
                        "expected str"
                    )
        elif spec.kind in (Kind.ATTRIBUTE_LIST, Kind.ITEMS):
            # ITEMS are checked against the list's item type by the owner.
            expected = (
                spec.item_class if spec.kind is Kind.ATTRIBUTE_LIST else None
            )
            for item in value:
                if expected is not None and type(item) is not expected:
                    raise ConstructionError(
                        f"{owner}.{attribute.name} holds "
                        f"{type(item).__name__}, expected {expected.__name__}"
                    )
        elif spec.kind is not Kind.PROPERTIES:
            if not _is_kind(spec.kind, value, spec.ref):
                expected_name = _EXPECTED.get(spec.kind, spec.kind.value)
                if spec.kind is Kind.ENUM:
                    expected_name = spec.ref.__name__  # type: ignore
                raise ConstructionError(
                    f"{owner}.{attribute.name} got {_describe(value)}, "
                    f"expected {expected_name}"
                )

    return check


def _to_float(value: Any) -> Any:
    """Widen integers to float, leaving every other value to the validator."""

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            raise ConstructionError(
                "integer is too large for a float"
            ) from None
    return value


def _to_tuple(value: Any) -> Any:
    """Copy a list-like value into a tuple, keeping ``None`` as absent."""

    if value is None:
        return value
    if isinstance(value, (str, bytes, Mapping)):
        raise ConstructionError(f"expected a sequence, got {_describe(value)}")
    try:
        return tuple(value)
    except TypeError as exc:
        raise ConstructionError(
            f"expected a sequence, got {_describe(value)}"
        ) from exc


def _make(spec: FieldSpec, converter: Callable[[Any], Any] | None) -> Any:
    metadata = {FIELD_KEY: spec}
    if spec.required:
        return field(
            converter=converter, validator=_validator(spec), metadata=metadata
        )
    return field(
        default=None,
        converter=converter,
        validator=_validator(spec),
        metadata=metadata,
    )


def str_field(*, required: bool = False, wire: str | None = None) -> Any:
    """Declare a string field."""

    return _make(FieldSpec(Kind.STR, required, wire), None)


def int_field(*, required: bool = False, wire: str | None = None) -> Any:
    """Declare an integer field; ``bool`` values are rejected."""

    return _make(FieldSpec(Kind.INT, required, wire), None)


def float_field(*, required: bool = False, wire: str | None = None) -> Any:
    """Declare a floating point field; integers are widened to float."""

    return _make(FieldSpec(Kind.FLOAT, required, wire), _to_float)


def bool_field(*, required: bool = False, wire: str | None = None) -> Any:
    """Declare a boolean field."""

    return _make(FieldSpec(Kind.BOOL, required, wire), None)


def enum_field(
    enum_class: type[enum.Enum],
    *,
    required: bool = False,
    wire: str | None = None,
) -> Any:
    """Declare a field holding a member of ``enum_class``."""

    return _make(FieldSpec(Kind.ENUM, required, wire, enum_class), None)


def str_list_field(*, wire: str | None = None) -> Any:
    """Declare an ordered list of strings, stored as a tuple."""

    return _make(FieldSpec(Kind.STR_LIST, False, wire), _to_tuple)


def attribute_list_field(item: ClassRef, *, wire: str | None = None) -> Any:
    """Declare an ordered list of nested attributes of exactly one class.

    Args:
        item: Class of the items, or a callable returning it when the
            class is defined later or in a module importing this one.
        wire: Explicit wire name.
    """

    return _make(FieldSpec(Kind.ATTRIBUTE_LIST, False, wire, item), _to_tuple)


def items_field() -> Any:
    """Declare the item sequence of a list attribute."""

    spec = FieldSpec(Kind.ITEMS, True, "items")
    return field(
        factory=tuple,
        converter=_to_tuple,
        validator=_validator(spec),
        metadata={FIELD_KEY: spec},
    )


def properties_field() -> Any:
    """Declare the extended-property bag carried by every attribute.

    The field is keyword-only so that it sits after every positional
    field in the constructor, matching its last place in array shape.
    """

    spec = FieldSpec(Kind.PROPERTIES, False, "extendedProperties")
    return field(
        default=None,
        kw_only=True,
        converter=to_extended_properties,
        metadata={FIELD_KEY: spec},
    )
