"""Morphological analyses attached to tokens."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

from attrs import define

from .base_attribute import BaseAttribute, BaseAttributeBuilder
from .fields import (
    attribute_list_field,
    bool_field,
    int_field,
    str_field,
    str_list_field,
)

if TYPE_CHECKING:
    from .token import Token

M = TypeVar("M", bound="MorphoAnalysisBuilder")


def _token_class() -> type:
    # Token refers back to this module, so it is resolved on first use.
    from .token import Token

    return Token


@define(frozen=True, slots=True)
class MorphoAnalysis(BaseAttribute):
    """One morphological reading of a token.

    Attributes:
        part_of_speech: Part-of-speech tag.
        lemma: Dictionary form.
        components: Tokens a compound decomposes into.
        raw: Analyzer output the other fields were derived from.
    """

    part_of_speech: str | None = str_field()
    lemma: str | None = str_field()
    components: tuple[Token, ...] | None = attribute_list_field(_token_class)
    raw: str | None = str_field()


@define(frozen=True, slots=True)
class HanMorphoAnalysis(MorphoAnalysis):
    """Analysis of a Chinese or Japanese token, with its readings."""

    readings: tuple[str, ...] | None = str_list_field()


@define(frozen=True, slots=True)
class ArabicMorphoAnalysis(MorphoAnalysis):
    """Analysis of an Arabic token.

    Attributes:
        prefix_length: Characters of the token forming the prefix.
        stem_length: Characters of the token forming the stem.
        root: Consonantal root.
        definite_article: Whether the token carries the article.
        strippable_affixes: Whether the affixes may be stripped.
    """

    prefix_length: int | None = int_field()
    stem_length: int | None = int_field()
    root: str | None = str_field()
    definite_article: bool | None = bool_field()
    strippable_affixes: bool | None = bool_field()


class MorphoAnalysisBuilder(BaseAttributeBuilder):
    """Builder for :class:`MorphoAnalysis`; every field is optional."""

    target = MorphoAnalysis

    def __init__(self) -> None:
        super().__init__()
        self._part_of_speech: str | None = None
        self._lemma: str | None = None
        self._components: list[Token] | None = None
        self._raw: str | None = None

    def part_of_speech(self: M, part_of_speech: str | None) -> M:
        self._part_of_speech = part_of_speech
        return self

    def lemma(self: M, lemma: str | None) -> M:
        self._lemma = lemma
        return self

    def add_component(self: M, component: Token) -> M:
        if self._components is None:
            self._components = []
        self._components.append(component)
        return self

    def components(self: M, components: Iterable[Token] | None) -> M:
        self._components = None if components is None else list(components)
        return self

    def raw(self: M, raw: str | None) -> M:
        self._raw = raw
        return self


class HanMorphoAnalysisBuilder(MorphoAnalysisBuilder):
    """Builder for :class:`HanMorphoAnalysis`."""

    target = HanMorphoAnalysis

    def __init__(self) -> None:
        super().__init__()
        self._readings: list[str] | None = None

    def add_reading(self, reading: str) -> HanMorphoAnalysisBuilder:
        if self._readings is None:
            self._readings = []
        self._readings.append(reading)
        return self

    def readings(
        self, readings: Iterable[str] | None
    ) -> HanMorphoAnalysisBuilder:
        self._readings = None if readings is None else list(readings)
        return self


class ArabicMorphoAnalysisBuilder(MorphoAnalysisBuilder):
    """Builder for :class:`ArabicMorphoAnalysis`."""

    target = ArabicMorphoAnalysis

    def __init__(self) -> None:
        super().__init__()
        self._prefix_length: int | None = None
        self._stem_length: int | None = None
        self._root: str | None = None
        self._definite_article: bool | None = None
        self._strippable_affixes: bool | None = None

    def lengths(
        self, prefix_length: int, stem_length: int
    ) -> ArabicMorphoAnalysisBuilder:
        """Set the prefix and stem lengths together."""

        self._prefix_length = prefix_length
        self._stem_length = stem_length
        return self

    def root(self, root: str | None) -> ArabicMorphoAnalysisBuilder:
        self._root = root
        return self

    def definite_article(
        self, definite_article: bool | None
    ) -> ArabicMorphoAnalysisBuilder:
        self._definite_article = definite_article
        return self

    def strippable_affixes(
        self, strippable_affixes: bool | None
    ) -> ArabicMorphoAnalysisBuilder:
        self._strippable_affixes = strippable_affixes
        return self
