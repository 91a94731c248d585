"""Registry resolving type names to attribute classes and builders."""

from __future__ import annotations

from attrs import define, field

from annodm.errors import DecodeError
from annodm.model import (
    ArabicMorphoAnalysis,
    ArabicMorphoAnalysisBuilder,
    BaseAttribute,
    BaseAttributeBuilder,
    DetectionResult,
    DetectionResultBuilder,
    DialectDetectionResult,
    DialectDetectionResultBuilder,
    EntityMention,
    EntityMentionBuilder,
    HanMorphoAnalysis,
    HanMorphoAnalysisBuilder,
    LanguageDetection,
    LanguageDetectionBuilder,
    ListAttribute,
    ListAttributeBuilder,
    MorphoAnalysis,
    MorphoAnalysisBuilder,
    RegionalDialectDetection,
    RegionalDialectDetectionBuilder,
    Token,
    TokenBuilder,
)

BUILTIN_TYPES: list[tuple[type, type]] = [
    (EntityMention, EntityMentionBuilder),
    (Token, TokenBuilder),
    (MorphoAnalysis, MorphoAnalysisBuilder),
    (HanMorphoAnalysis, HanMorphoAnalysisBuilder),
    (ArabicMorphoAnalysis, ArabicMorphoAnalysisBuilder),
    (LanguageDetection, LanguageDetectionBuilder),
    (DetectionResult, DetectionResultBuilder),
    (RegionalDialectDetection, RegionalDialectDetectionBuilder),
    (DialectDetectionResult, DialectDetectionResultBuilder),
    (ListAttribute, ListAttributeBuilder),
]


@define(slots=True)
class TypeRegistry:
    """Mapping from type names to attribute classes and their builders.

    The name of a type is its class name; list attributes record the
    same name as their ``item_type``. Decoding a heterogeneous attribute
    map looks each key up here.
    """

    _classes: dict[str, type] = field(factory=dict)
    _builders: dict[str, type] = field(factory=dict)

    def register(self, cls: type, builder: type | None = None) -> None:
        """Add an attribute class and, optionally, its builder.

        Args:
            cls: Subclass of :class:`BaseAttribute`.
            builder: Builder producing ``cls``.

        Throws:
            TypeError: If ``cls`` is not an attribute class, ``builder``
                does not build it, or another class already uses its name.
        """

        if not (isinstance(cls, type) and issubclass(cls, BaseAttribute)):
            raise TypeError(f"{cls!r} is not an attribute class")
        if builder is not None and not (
            issubclass(builder, BaseAttributeBuilder)
            and builder.target is cls
        ):
            raise TypeError(f"{builder!r} does not build {cls.__name__}")

        name = cls.__name__
        existing = self._classes.get(name)
        if existing is not None and existing is not cls:
            raise TypeError(f"type name {name!r} is already registered")

        self._classes[name] = cls
        if builder is not None:
            self._builders[name] = builder

    def resolve(self, name: str) -> type:
        """Return the class registered under ``name``.

        Throws:
            DecodeError: If no class is registered under ``name``.
        """

        try:
            return self._classes[name]
        except KeyError:
            raise DecodeError(f"unknown attribute type {name!r}") from None

    def builder_for(self, name: str) -> type:
        """Return the builder class registered for ``name``.

        The codec never calls this: decoding passes the decoded field
        values straight to the class constructor, which enforces the
        same invariants as ``build()``. The lookup is for callers that
        know a type only by name, for example to edit a decoded value
        with ``registry.builder_for(name).copy_of(attribute)``.

        Throws:
            DecodeError: If ``name`` has no registered builder.
        """

        try:
            return self._builders[name]
        except KeyError:
            raise DecodeError(f"no builder for type {name!r}") from None

    def name_of(self, cls: type) -> str:
        """Return the registered name of ``cls``.

        Throws:
            KeyError: If ``cls`` is not registered.
        """

        name = cls.__name__
        if self._classes.get(name) is not cls:
            raise KeyError(name)
        return name

    def names(self) -> list[str]:
        """Return every registered name in alphabetical order."""

        return sorted(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes


def default_registry() -> TypeRegistry:
    """Return a new registry holding every attribute kind of ``annodm``."""

    registry = TypeRegistry()
    for cls, builder in BUILTIN_TYPES:
        registry.register(cls, builder)
    return registry
