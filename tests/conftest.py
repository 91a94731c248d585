"""Shared fixtures building sample attributes of every kind."""

from __future__ import annotations

import pytest

from annodm.codec import AttributeCodec, Shape
from annodm.model import (
    DEFAULT_COREFERENCE_CHAIN_ID,
    DetectionResultBuilder,
    DialectDetectionResult,
    DialectDetectionResultBuilder,
    EntityMention,
    EntityMentionBuilder,
    HanMorphoAnalysis,
    HanMorphoAnalysisBuilder,
    LanguageCode,
    LanguageDetection,
    LanguageDetectionBuilder,
    ListAttribute,
    ListAttributeBuilder,
    MorphoAnalysis,
    MorphoAnalysisBuilder,
    RegionalDialectDetection,
    RegionalDialectDetectionBuilder,
    Script,
    Token,
    TokenBuilder,
)

TEXT = "George Washington slept here."


def _dialect_result(
    code: str, name: str, score: float
) -> DialectDetectionResult:
    """Return a dialect candidate with the given score."""

    return (
        DialectDetectionResultBuilder()
        .country_code(code)
        .country_name(name)
        .score(score)
        .relative_error(0.0)
        .build()
    )


def _analysis(*components: str) -> MorphoAnalysis:
    """Return a complete analysis whose components spell ``components``."""

    builder = MorphoAnalysisBuilder()
    for text in components:
        builder.add_component(TokenBuilder(0, len(text), text).build())
    return builder.lemma("orange").part_of_speech("woof").raw("cooked").build()


@pytest.fixture
def mention() -> EntityMention:
    """Entity mention with every optional field set."""

    return (
        EntityMentionBuilder(0, 17, "PERSON")
        .confidence(0.75)
        .coreference_chain_id(DEFAULT_COREFERENCE_CHAIN_ID)
        .flags(3)
        .source("statistical")
        .subsource("crf")
        .normalized("George Washington")
        .extended_property("wikidata", "Q23")
        .build()
    )


@pytest.fixture
def bare_mention() -> EntityMention:
    """Entity mention with every optional field left unset."""

    return EntityMentionBuilder(18, 23, "LOCATION").build()


@pytest.fixture
def mention_list(
    mention: EntityMention, bare_mention: EntityMention
) -> ListAttribute:
    """List of two mentions carrying its own extended properties."""

    return (
        ListAttributeBuilder(EntityMention)
        .add(mention)
        .add(bare_mention)
        .extended_property("model", {"name": "ner", "version": [1, 2]})
        .build()
    )


@pytest.fixture
def token() -> Token:
    """Token with normalized forms and a nested compound analysis."""

    return (
        TokenBuilder(0, 8, "doorpost")
        .add_normalized("doorpost")
        .add_normalized("door-post")
        .add_analysis(_analysis("door", "post"))
        .source("tokenizer")
        .build()
    )


@pytest.fixture
def language_detection() -> LanguageDetection:
    """Language detection with two ranked candidates."""

    best = (
        DetectionResultBuilder(LanguageCode.ENGLISH)
        .encoding("UTF-8")
        .script(Script.Latn)
        .confidence(0.9)
        .build()
    )
    runner_up = DetectionResultBuilder(LanguageCode.FRENCH).build()
    return LanguageDetectionBuilder(0, len(TEXT), [best, runner_up]).build()


@pytest.fixture
def dialect_detection() -> RegionalDialectDetection:
    """Dialect detection whose results are ordered by descending score."""

    return RegionalDialectDetectionBuilder(
        0,
        len(TEXT),
        [
            _dialect_result("EG", "Egypt", 0.9),
            _dialect_result("SA", "Saudi Arabia", 0.5),
        ],
    ).build()


@pytest.fixture
def han_analysis() -> HanMorphoAnalysis:
    """Han analysis carrying readings and an empty property bag."""

    return (
        HanMorphoAnalysisBuilder()
        .lemma("東京")
        .add_reading("とうきょう")
        .extended_properties({})
        .build()
    )


@pytest.fixture(params=[Shape.OBJECT, Shape.ARRAY], ids=["object", "array"])
def codec(request: pytest.FixtureRequest) -> AttributeCodec:
    """Codec for each wire shape."""

    return AttributeCodec(request.param)
