"""Ordered, homogeneous collection of attributes of one kind."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from attrs import define

from annodm.errors import ConstructionError

from .base_attribute import BaseAttribute, BaseAttributeBuilder
from .fields import items_field, str_field

T = TypeVar("T", bound=BaseAttribute)


@define(frozen=True, slots=True)
class ListAttribute(BaseAttribute):
    """Sequence of attributes that all share one concrete class.

    The list is itself an attribute, so it carries its own extended
    properties in addition to those of its items. Item order is kept
    exactly as given; for detection results it encodes the ranking.

    Attributes:
        item_type: Name of the items' class, as registered with the
            codec's type registry.
        items: The items, in order.
    """

    item_type: str = str_field(required=True)
    items: tuple[Any, ...] = items_field()

    def __attrs_post_init__(self) -> None:
        for index, item in enumerate(self.items):
            if type(item).__name__ != self.item_type:
                raise ConstructionError(
                    f"ListAttribute of {self.item_type} has "
                    f"{type(item).__name__} at index {index}"
                )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]


def _type_name(item_type: type | str) -> str:
    return item_type if isinstance(item_type, str) else item_type.__name__


class ListAttributeBuilder(BaseAttributeBuilder, Generic[T]):
    """Builder for :class:`ListAttribute`.

    Args:
        item_type: Class of the items, or its registered name.
        items: Initial items, copied into the builder.
    """

    target = ListAttribute

    def __init__(
        self, item_type: type | str, items: Iterable[T] | None = None
    ) -> None:
        super().__init__()
        self._item_type = _type_name(item_type)
        self._items: list[T] = list(items or [])

    @classmethod
    def _seed(cls, instance: Any) -> ListAttributeBuilder:
        return cls(instance.item_type)

    def add(self, item: T) -> ListAttributeBuilder[T]:
        """Append one item."""

        self._items.append(item)
        return self

    def extend(self, items: Iterable[T]) -> ListAttributeBuilder[T]:
        """Append several items, keeping their order."""

        self._items.extend(items)
        return self

    def items(self, items: Iterable[T]) -> ListAttributeBuilder[T]:
        """Replace all items."""

        self._items = list(items)
        return self
