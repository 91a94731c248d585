"""Tests for the extended-property bag."""

from __future__ import annotations

import math

import pytest

from annodm.errors import ConstructionError
from annodm.model import EntityMentionBuilder, ExtendedProperties


def test_mapping_access() -> None:
    """The bag behaves as a read-only mapping."""

    bag = ExtendedProperties({"a": 1, "b": "two"})
    assert bag["a"] == 1
    assert bag.get("b") == "two"
    assert bag.get("missing") is None
    assert len(bag) == 2
    assert sorted(bag) == ["a", "b"]
    assert dict(bag.items()) == {"a": 1, "b": "two"}
    with pytest.raises(KeyError):
        bag["missing"]


def test_equality_ignores_insertion_order() -> None:
    """Bags with the same entries are equal and hash alike."""

    first = ExtendedProperties({"a": 1, "b": [1, {"c": None}]})
    second = ExtendedProperties({"b": [1, {"c": None}], "a": 1})
    assert first == second
    assert hash(first) == hash(second)
    assert first == {"a": 1, "b": [1, {"c": None}]}
    assert first != ExtendedProperties({"a": 2, "b": [1, {"c": None}]})


def test_input_is_copied() -> None:
    """Changing the source mapping after construction has no effect."""

    source = {"nested": {"list": [1, 2]}}
    bag = ExtendedProperties(source)
    source["nested"]["list"].append(3)
    source["other"] = True
    assert bag == {"nested": {"list": [1, 2]}}


def test_values_read_are_copies() -> None:
    """Values read from the bag cannot be used to modify it."""

    bag = ExtendedProperties({"list": [1]})
    before = hash(bag)
    bag["list"].append(2)
    bag.to_dict()["list"].append(3)
    assert bag["list"] == [1]
    assert hash(bag) == before


def test_tuples_become_lists() -> None:
    """Sequences are stored as JSON arrays."""

    bag = ExtendedProperties({"pair": (1, 2)})
    assert bag["pair"] == [1, 2]


def test_unsupported_values_are_rejected() -> None:
    """Only JSON values may be stored."""

    with pytest.raises(ConstructionError, match="set"):
        ExtendedProperties({"s": {1, 2}})
    with pytest.raises(ConstructionError, match="not a string"):
        ExtendedProperties({"m": {1: "one"}})


def test_builder_reports_bad_values_at_build() -> None:
    """A builder rejects unsupported property values when building."""

    builder = EntityMentionBuilder(0, 1, "PERSON").extended_property(
        "when", object()
    )
    with pytest.raises(ConstructionError, match="/when"):
        builder.build()

    builder.extended_properties(None)
    assert builder.build().extended_properties is None


def test_equality_with_dict_keeps_number_types() -> None:
    """Comparing with a plain dict does not equate ``1`` and ``True``."""

    bag = ExtendedProperties({"k": 1})
    assert bag == {"k": 1}
    assert bag != {"k": True}
    assert bag != {"k": 1.0}
    assert bag != {"k": {1, 2}}


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_numbers_are_rejected(value: float) -> None:
    """Numbers JSON cannot represent are not stored."""

    with pytest.raises(ConstructionError, match="finite"):
        ExtendedProperties({"nested": [value]})


def test_integers_outside_64_bits_are_rejected() -> None:
    """Integers beyond the signed 64-bit range are not stored."""

    ExtendedProperties({"k": 2**63 - 1, "m": -(2**63)})
    with pytest.raises(ConstructionError, match="64-bit"):
        ExtendedProperties({"k": 2**63})
