"""Tests for equality and hashing across the attribute classes.

Each test builds a reference instance, then instances differing from it
in exactly one field, and checks that they compare unequal in both
directions and hash differently. Hash inequality is asserted on purpose:
a constant hash would hide a missing field in the equality check.
"""

from __future__ import annotations

from annodm.model import (
    ArabicMorphoAnalysisBuilder,
    BaseAttribute,
    DetectionResultBuilder,
    EntityMention,
    EntityMentionBuilder,
    HanMorphoAnalysisBuilder,
    LanguageCode,
    MorphoAnalysis,
    MorphoAnalysisBuilder,
    Script,
    Token,
    TokenBuilder,
)

# Smallest positive double, as an unusual but legal confidence.
TINY = 5e-324


def _assert_differ(a: BaseAttribute, b: BaseAttribute) -> None:
    """Assert ``a`` and ``b`` are unequal both ways and hash differently."""

    assert not a == b
    assert not b == a
    assert a != b
    assert hash(a) != hash(b)


def _analysis(
    components: tuple[str, ...] | None = ("beam", "post"),
    lemma: str | None = "orange",
    part_of_speech: str | None = "woof",
    raw: str | None = "cooked",
) -> MorphoAnalysis:
    builder = MorphoAnalysisBuilder()
    for text in components or ():
        builder.add_component(TokenBuilder(0, len(text), text).build())
    return (
        builder.lemma(lemma).part_of_speech(part_of_speech).raw(raw).build()
    )


def _mention(**overrides: object) -> EntityMention:
    values: dict[str, object] = {
        "confidence": TINY,
        "coreference_chain_id": 42,
        "flags": 3,
        "source": "nile",
        "subsource": "alexandria",
        "normalized": "ab",
    }
    values.update(overrides)
    builder = EntityMentionBuilder(0, 10, "something")
    for name, value in values.items():
        getattr(builder, name)(value)
    return builder.build()


def test_morpho_analysis_self_equality() -> None:
    """An analysis equals itself and an identically built one."""

    ma1 = _analysis()
    assert ma1 == ma1
    assert ma1 == _analysis()
    assert hash(ma1) == hash(_analysis())


def test_morpho_analysis_single_field_differences() -> None:
    """Changing any one field breaks equality."""

    ma1 = _analysis()
    _assert_differ(ma1, _analysis(components=("door", "post")))
    _assert_differ(ma1, _analysis(lemma="pear"))
    _assert_differ(ma1, _analysis(part_of_speech="meow"))
    _assert_differ(ma1, _analysis(raw="hide"))


def test_morpho_analysis_absent_fields() -> None:
    """An absent field never equals a present one."""

    ma1 = _analysis()
    ma2 = _analysis(components=None)
    assert ma2.components is None
    _assert_differ(ma1, ma2)
    _assert_differ(ma1, _analysis(lemma=None))
    _assert_differ(ma1, _analysis(part_of_speech=None))
    _assert_differ(ma1, _analysis(raw=None))


def test_everything_unset_hashes() -> None:
    """Hashing works when every optional field is absent."""

    empty = MorphoAnalysisBuilder().build()
    assert empty == empty
    hash(empty)

    mention = EntityMentionBuilder(0, 0, "x").build()
    hash(mention)
    assert mention == EntityMentionBuilder(0, 0, "x").build()


def test_han_morpho_analysis_readings() -> None:
    """Readings participate in equality, absent or present."""

    ma1 = HanMorphoAnalysisBuilder().add_reading("r1").build()
    assert ma1 == ma1
    _assert_differ(ma1, HanMorphoAnalysisBuilder().add_reading("r2").build())

    ma2 = HanMorphoAnalysisBuilder().build()
    assert ma2.readings is None
    _assert_differ(ma1, ma2)


def test_token_fields() -> None:
    """Normalized forms and analyses participate in token equality."""

    analysis = _analysis()
    tok1 = (
        TokenBuilder(0, 10, "token")
        .add_normalized("norm")
        .add_analysis(analysis)
        .source("nile")
        .build()
    )
    assert tok1 == tok1

    no_normalized = (
        TokenBuilder(0, 10, "token")
        .add_analysis(analysis)
        .source("nile")
        .build()
    )
    _assert_differ(tok1, no_normalized)

    no_analysis = (
        TokenBuilder(0, 10, "token")
        .add_normalized("norm")
        .source("nile")
        .build()
    )
    _assert_differ(tok1, no_analysis)


def test_entity_mention_absent_scalars() -> None:
    """Unset numeric fields differ from set ones, in both directions."""

    em1 = _mention()
    assert em1 == em1
    hash(em1)

    for name in ("confidence", "coreference_chain_id", "flags"):
        em2 = _mention(**{name: None})
        assert getattr(em2, name) is None
        _assert_differ(em1, em2)


def test_entity_mention_zero_is_not_absent() -> None:
    """A field set to zero differs from the same field left unset."""

    for name, zero in (
        ("confidence", 0.0),
        ("coreference_chain_id", 0),
        ("flags", 0),
    ):
        _assert_differ(_mention(**{name: zero}), _mention(**{name: None}))


def test_entity_mention_span_and_type() -> None:
    """Offsets and entity type participate in equality."""

    em1 = EntityMentionBuilder(0, 10, "something").build()
    _assert_differ(em1, EntityMentionBuilder(1, 10, "something").build())
    _assert_differ(em1, EntityMentionBuilder(0, 11, "something").build())
    _assert_differ(em1, EntityMentionBuilder(0, 10, "other").build())


def test_extended_properties_participate() -> None:
    """Attributes differing only in their property bag are unequal."""

    plain = EntityMentionBuilder(0, 10, "x").build()
    empty = EntityMentionBuilder(0, 10, "x").extended_properties({}).build()
    tagged = (
        EntityMentionBuilder(0, 10, "x").extended_property("k", "v").build()
    )
    other = (
        EntityMentionBuilder(0, 10, "x").extended_property("k", "w").build()
    )

    _assert_differ(plain, empty)
    _assert_differ(plain, tagged)
    _assert_differ(empty, tagged)
    _assert_differ(tagged, other)


def test_detection_result_confidence() -> None:
    """Detection results with and without confidence are unequal."""

    dr1 = (
        DetectionResultBuilder(LanguageCode.ESTONIAN)
        .encoding("aes")
        .script(Script.Armn)
        .confidence(TINY)
        .build()
    )
    assert dr1 == dr1
    hash(dr1)

    dr2 = (
        DetectionResultBuilder(LanguageCode.ESTONIAN)
        .encoding("aes")
        .script(Script.Armn)
        .build()
    )
    assert dr2.confidence is None
    _assert_differ(dr1, dr2)


def test_different_classes_never_equal() -> None:
    """Equal field values in different classes do not make them equal."""

    plain = MorphoAnalysisBuilder().lemma("x").build()
    han = HanMorphoAnalysisBuilder().lemma("x").build()
    arabic = ArabicMorphoAnalysisBuilder().lemma("x").build()
    assert plain != han
    assert han != plain
    assert han != arabic
    assert plain != Token(0, 1, "x")


def test_arabic_builder_reuse() -> None:
    """Instances built earlier do not change when the builder does."""

    builder = ArabicMorphoAnalysisBuilder()
    analysis1 = builder.build()
    builder.add_component(TokenBuilder(0, 10, "token").build())
    analysis2 = builder.build()

    assert analysis1.components is None
    assert analysis2.components is not None
    assert len(analysis2.components) == 1
    assert analysis1 != analysis2


def test_arabic_repr_includes_base_class() -> None:
    """The readable form lists fields declared by the base classes."""

    analysis = (
        ArabicMorphoAnalysisBuilder()
        .add_component(TokenBuilder(0, 10, "token").build())
        .root("ktb")
        .build()
    )
    text = repr(analysis)
    assert "components" in text
    assert "extended_properties" in text
    assert "root='ktb'" in text


def test_property_numbers_keep_their_type() -> None:
    """Bag values ``1``, ``True`` and ``1.0`` are three different values."""

    def tagged(value: object) -> EntityMention:
        return (
            EntityMentionBuilder(0, 1, "X")
            .extended_property("k", value)
            .build()
        )

    as_int, as_bool, as_float = tagged(1), tagged(True), tagged(1.0)
    _assert_differ(as_int, as_bool)
    _assert_differ(as_int, as_float)
    _assert_differ(as_bool, as_float)
    _assert_differ(tagged([0]), tagged([False]))
    _assert_differ(tagged({"n": 2}), tagged({"n": 2.0}))
    assert tagged(1) == as_int
    assert hash(tagged(1)) == hash(as_int)
