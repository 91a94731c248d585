"""Mention of a named entity in a text."""

from __future__ import annotations

from typing import Any

from attrs import define

from .attribute import Attribute, AttributeBuilder
from .fields import float_field, int_field, str_field

# Conventional coreference chain id for a mention that belongs to no
# chain. It is an ordinary value: a mention built with it is not equal
# to one whose chain id was never set.
DEFAULT_COREFERENCE_CHAIN_ID = -1


@define(frozen=True, slots=True)
class EntityMention(Attribute):
    """Mention of a named entity.

    Attributes:
        entity_type: Type of the entity, such as ``PERSON``.
        confidence: Confidence reported by the extractor.
        coreference_chain_id: Chain grouping mentions of one entity;
            see ``DEFAULT_COREFERENCE_CHAIN_ID``.
        flags: Extractor-specific bit flags.
        source: Name of the component that produced the mention.
        subsource: Finer-grained origin within ``source``.
        normalized: Normalized form of the mention text.
    """

    entity_type: str = str_field(required=True)
    confidence: float | None = float_field()
    coreference_chain_id: int | None = int_field()
    flags: int | None = int_field()
    source: str | None = str_field()
    subsource: str | None = str_field()
    normalized: str | None = str_field()


class EntityMentionBuilder(AttributeBuilder):
    """Builder for :class:`EntityMention`."""

    target = EntityMention

    def __init__(
        self, start_offset: int, end_offset: int, entity_type: str
    ) -> None:
        super().__init__(start_offset, end_offset)
        self._entity_type = entity_type
        self._confidence: float | None = None
        self._coreference_chain_id: int | None = None
        self._flags: int | None = None
        self._source: str | None = None
        self._subsource: str | None = None
        self._normalized: str | None = None

    @classmethod
    def _seed(cls, instance: Any) -> EntityMentionBuilder:
        return cls(
            instance.start_offset, instance.end_offset, instance.entity_type
        )

    def entity_type(self, entity_type: str) -> EntityMentionBuilder:
        self._entity_type = entity_type
        return self

    def confidence(self, confidence: float | None) -> EntityMentionBuilder:
        self._confidence = confidence
        return self

    def coreference_chain_id(
        self, coreference_chain_id: int | None
    ) -> EntityMentionBuilder:
        self._coreference_chain_id = coreference_chain_id
        return self

    def flags(self, flags: int | None) -> EntityMentionBuilder:
        self._flags = flags
        return self

    def source(self, source: str | None) -> EntityMentionBuilder:
        self._source = source
        return self

    def subsource(self, subsource: str | None) -> EntityMentionBuilder:
        self._subsource = subsource
        return self

    def normalized(self, normalized: str | None) -> EntityMentionBuilder:
        self._normalized = normalized
        return self
