"""Language detected over a region of a text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from attrs import define

from .attribute import Attribute, AttributeBuilder
from .base_attribute import BaseAttribute, BaseAttributeBuilder
from .codes import LanguageCode, Script
from .fields import attribute_list_field, enum_field, float_field, str_field


@define(frozen=True, slots=True)
class DetectionResult(BaseAttribute):
    """One candidate language for a region.

    Attributes:
        language: Detected language.
        encoding: Character encoding the detector assumed.
        script: Detected writing system.
        confidence: Detector confidence for this candidate.
    """

    language: LanguageCode = enum_field(LanguageCode, required=True)
    encoding: str | None = str_field()
    script: Script | None = enum_field(Script)
    confidence: float | None = float_field()


@define(frozen=True, slots=True)
class LanguageDetection(Attribute):
    """Candidate languages for a region, best candidate first."""

    detection_results: tuple[DetectionResult, ...] | None = (
        attribute_list_field(DetectionResult)
    )


class DetectionResultBuilder(BaseAttributeBuilder):
    """Builder for :class:`DetectionResult`."""

    target = DetectionResult

    def __init__(self, language: LanguageCode) -> None:
        super().__init__()
        self._language = language
        self._encoding: str | None = None
        self._script: Script | None = None
        self._confidence: float | None = None

    @classmethod
    def _seed(cls, instance: Any) -> DetectionResultBuilder:
        return cls(instance.language)

    def language(self, language: LanguageCode) -> DetectionResultBuilder:
        self._language = language
        return self

    def encoding(self, encoding: str | None) -> DetectionResultBuilder:
        self._encoding = encoding
        return self

    def script(self, script: Script | None) -> DetectionResultBuilder:
        self._script = script
        return self

    def confidence(self, confidence: float | None) -> DetectionResultBuilder:
        self._confidence = confidence
        return self


class LanguageDetectionBuilder(AttributeBuilder):
    """Builder for :class:`LanguageDetection`."""

    target = LanguageDetection

    def __init__(
        self,
        start_offset: int,
        end_offset: int,
        detection_results: Iterable[DetectionResult] | None = None,
    ) -> None:
        super().__init__(start_offset, end_offset)
        self._detection_results: list[DetectionResult] | None = (
            None if detection_results is None else list(detection_results)
        )

    def add_detection_result(
        self, result: DetectionResult
    ) -> LanguageDetectionBuilder:
        if self._detection_results is None:
            self._detection_results = []
        self._detection_results.append(result)
        return self

    def detection_results(
        self, results: Iterable[DetectionResult] | None
    ) -> LanguageDetectionBuilder:
        self._detection_results = None if results is None else list(results)
        return self
