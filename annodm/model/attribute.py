"""Attribute anchored to a half-open character span of a text."""

from __future__ import annotations

from typing import Any, TypeVar

import attrs
from attrs import define

from annodm.errors import ConstructionError

from .base_attribute import BaseAttribute, BaseAttributeBuilder
from .fields import int_field

B = TypeVar("B", bound="AttributeBuilder")


@define(frozen=True, slots=True)
class Attribute(BaseAttribute):
    """Annotation covering ``[start_offset, end_offset)`` of a text.

    Offsets index the characters of the text owning the attribute; they
    are not checked against its length here.

    Attributes:
        start_offset: Index of the first character, at least zero.
        end_offset: Index after the last character, at least
            ``start_offset``.
    """

    start_offset: int = int_field(required=True)
    end_offset: int = int_field(required=True)

    @end_offset.validator
    def _check_span(self, attribute: attrs.Attribute, value: int) -> None:
        if self.start_offset < 0:
            raise ConstructionError(
                f"{type(self).__name__} start offset {self.start_offset} "
                "is negative"
            )
        if value < self.start_offset:
            raise ConstructionError(
                f"{type(self).__name__} end offset {value} precedes start "
                f"offset {self.start_offset}"
            )

    @property
    def length(self) -> int:
        """Number of characters covered by the span."""

        return self.end_offset - self.start_offset


class AttributeBuilder(BaseAttributeBuilder):
    """Builder base for span-anchored attributes."""

    target = Attribute

    def __init__(self, start_offset: int, end_offset: int) -> None:
        super().__init__()
        self._start_offset = start_offset
        self._end_offset = end_offset

    @classmethod
    def _seed(cls: type[B], instance: Any) -> B:
        return cls(instance.start_offset, instance.end_offset)

    def start_offset(self: B, start_offset: int) -> B:
        self._start_offset = start_offset
        return self

    def end_offset(self: B, end_offset: int) -> B:
        self._end_offset = end_offset
        return self

    def span(self: B, start_offset: int, end_offset: int) -> B:
        """Set both offsets at once."""

        self._start_offset = start_offset
        self._end_offset = end_offset
        return self
