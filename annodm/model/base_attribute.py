"""Common ancestor of every attribute and of every attribute builder."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

import attrs
from attrs import define

from .extended_properties import ExtendedProperties, copy_value
from .fields import properties_field

T = TypeVar("T", bound="BaseAttribute")
B = TypeVar("B", bound="BaseAttributeBuilder")


@define(frozen=True, slots=True)
class BaseAttribute:
    """Immutable annotation carrying only extended properties.

    Equality is structural: two attributes are equal when they are of
    the same class and every field, the property bag included, compares
    equal. ``None`` in a field never equals a set value, even a zero.

    Attributes:
        extended_properties: Extension data, or ``None`` when the bag
            was never populated. An empty bag is a distinct state.
    """

    extended_properties: ExtendedProperties | None = properties_field()


def _thaw(value: Any) -> Any:
    """Return a mutable builder-side copy of an attribute field value."""

    if isinstance(value, ExtendedProperties):
        return value.to_dict()
    if isinstance(value, tuple):
        return list(value)
    return value


class BaseAttributeBuilder(Generic[T]):
    """Mutable staging area producing :class:`BaseAttribute` instances.

    Each builder keeps one ``_<field>`` attribute per field of the class
    it builds (its ``target``). Mutators return the builder so calls can
    be chained. :meth:`build` may be called any number of times; each
    call copies the current state, so instances built earlier never see
    later changes to the builder.
    """

    target: ClassVar[type] = BaseAttribute

    def __init__(self) -> None:
        self._extended_properties: dict[str, Any] | None = None

    @classmethod
    def copy_of(cls: type[B], instance: Any) -> B:
        """Return a builder seeded from every field of ``instance``.

        Args:
            instance: Attribute of exactly the builder's target class.

        Returns:
            New builder; collection fields and the property bag are
            copied, and an absent bag stays absent.
        """

        builder = cls._seed(instance)
        builder._copy_fields(instance)
        return builder

    @classmethod
    def _seed(cls: type[B], instance: Any) -> B:
        """Construct an empty builder for ``instance``.

        Builders whose constructor takes required fields override this
        to pass them from ``instance``.
        """

        return cls()

    def _copy_fields(self, instance: Any) -> None:
        if type(instance) is not self.target:
            raise TypeError(
                f"{type(self).__name__} copies {self.target.__name__}, "
                f"not {type(instance).__name__}"
            )
        for attribute in attrs.fields(self.target):
            value = getattr(instance, attribute.name)
            setattr(self, f"_{attribute.name}", _thaw(value))

    def extended_property(self: B, key: str, value: Any) -> B:
        """Set one extended property, creating the bag if it is absent."""

        if self._extended_properties is None:
            self._extended_properties = {}
        self._extended_properties[key] = value
        return self

    def extended_properties(
        self: B, properties: Mapping[str, Any] | None
    ) -> B:
        """Replace the whole bag; ``None`` makes it absent again.

        An empty mapping produces a present, empty bag.
        """

        if properties is None:
            self._extended_properties = None
        else:
            self._extended_properties = copy_value(properties)
        return self

    def _values(self) -> dict[str, Any]:
        """Return constructor keyword arguments for the target class."""

        return {
            attribute.name: getattr(self, f"_{attribute.name}")
            for attribute in attrs.fields(self.target)
        }

    def build(self) -> T:
        """Freeze the current state into a new immutable instance.

        Returns:
            Instance of the builder's target class.

        Throws:
            ConstructionError: If the accumulated fields violate an
                invariant of the target class. The builder is unchanged.
        """

        # Converters on the target copy lists into tuples and the bag
        # into a new ExtendedProperties, so nothing here is shared.
        return self.target(**self._values())
