"""Token produced by a tokenizer, with its morphological analyses."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from attrs import define

from .attribute import Attribute, AttributeBuilder
from .fields import attribute_list_field, str_field, str_list_field
from .morpho_analysis import MorphoAnalysis


@define(frozen=True, slots=True)
class Token(Attribute):
    """Token covering a span of the text.

    Attributes:
        text: Characters of the token as they appear in the text.
        normalized: Normalized forms, most preferred first.
        analyses: Morphological analyses, most likely first.
        source: Name of the component that produced the token.
    """

    text: str = str_field(required=True)
    normalized: tuple[str, ...] | None = str_list_field()
    analyses: tuple[MorphoAnalysis, ...] | None = attribute_list_field(
        MorphoAnalysis
    )
    source: str | None = str_field()


class TokenBuilder(AttributeBuilder):
    """Builder for :class:`Token`.

    ``normalized`` and ``analyses`` stay absent until the first value is
    added to them.
    """

    target = Token

    def __init__(self, start_offset: int, end_offset: int, text: str) -> None:
        super().__init__(start_offset, end_offset)
        self._text = text
        self._normalized: list[str] | None = None
        self._analyses: list[MorphoAnalysis] | None = None
        self._source: str | None = None

    @classmethod
    def _seed(cls, instance: Any) -> TokenBuilder:
        return cls(instance.start_offset, instance.end_offset, instance.text)

    def text(self, text: str) -> TokenBuilder:
        self._text = text
        return self

    def add_normalized(self, normalized: str) -> TokenBuilder:
        if self._normalized is None:
            self._normalized = []
        self._normalized.append(normalized)
        return self

    def normalized(self, normalized: Iterable[str] | None) -> TokenBuilder:
        self._normalized = None if normalized is None else list(normalized)
        return self

    def add_analysis(self, analysis: MorphoAnalysis) -> TokenBuilder:
        if self._analyses is None:
            self._analyses = []
        self._analyses.append(analysis)
        return self

    def analyses(
        self, analyses: Iterable[MorphoAnalysis] | None
    ) -> TokenBuilder:
        self._analyses = None if analyses is None else list(analyses)
        return self

    def source(self, source: str | None) -> TokenBuilder:
        self._source = source
        return self
