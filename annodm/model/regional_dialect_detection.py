"""Regional dialect detected over a region of a text."""

from __future__ import annotations

from collections.abc import Iterable

from attrs import define

from .attribute import Attribute, AttributeBuilder
from .base_attribute import BaseAttribute, BaseAttributeBuilder
from .fields import attribute_list_field, float_field, str_field


@define(frozen=True, slots=True)
class DialectDetectionResult(BaseAttribute):
    """One candidate regional dialect.

    Attributes:
        country_code: Code of the country the dialect is spoken in.
        country_name: Display name of that country.
        score: Detector score; results are ordered by it, highest first.
        relative_error: Error relative to the best scoring candidate.
    """

    country_code: str | None = str_field()
    country_name: str | None = str_field()
    score: float | None = float_field()
    relative_error: float | None = float_field()


@define(frozen=True, slots=True)
class RegionalDialectDetection(Attribute):
    """Candidate regional dialects for a region, in ranking order."""

    dialect_results: tuple[DialectDetectionResult, ...] | None = (
        attribute_list_field(DialectDetectionResult)
    )


class DialectDetectionResultBuilder(BaseAttributeBuilder):
    """Builder for :class:`DialectDetectionResult`."""

    target = DialectDetectionResult

    def __init__(self) -> None:
        super().__init__()
        self._country_code: str | None = None
        self._country_name: str | None = None
        self._score: float | None = None
        self._relative_error: float | None = None

    def country_code(
        self, country_code: str | None
    ) -> DialectDetectionResultBuilder:
        self._country_code = country_code
        return self

    def country_name(
        self, country_name: str | None
    ) -> DialectDetectionResultBuilder:
        self._country_name = country_name
        return self

    def score(self, score: float | None) -> DialectDetectionResultBuilder:
        self._score = score
        return self

    def relative_error(
        self, relative_error: float | None
    ) -> DialectDetectionResultBuilder:
        self._relative_error = relative_error
        return self


class RegionalDialectDetectionBuilder(AttributeBuilder):
    """Builder for :class:`RegionalDialectDetection`."""

    target = RegionalDialectDetection

    def __init__(
        self,
        start_offset: int,
        end_offset: int,
        dialect_results: Iterable[DialectDetectionResult] | None = None,
    ) -> None:
        super().__init__(start_offset, end_offset)
        self._dialect_results: list[DialectDetectionResult] | None = (
            None if dialect_results is None else list(dialect_results)
        )

    def add_dialect_result(
        self, result: DialectDetectionResult
    ) -> RegionalDialectDetectionBuilder:
        if self._dialect_results is None:
            self._dialect_results = []
        self._dialect_results.append(result)
        return self

    def dialect_results(
        self, results: Iterable[DialectDetectionResult] | None
    ) -> RegionalDialectDetectionBuilder:
        self._dialect_results = None if results is None else list(results)
        return self
