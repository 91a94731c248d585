"""Immutable annotation attributes and their builders."""

from .attribute import Attribute, AttributeBuilder
from .base_attribute import BaseAttribute, BaseAttributeBuilder
from .codes import LanguageCode, Script
from .entity_mention import (
    DEFAULT_COREFERENCE_CHAIN_ID,
    EntityMention,
    EntityMentionBuilder,
)
from .extended_properties import ExtendedProperties
from .language_detection import (
    DetectionResult,
    DetectionResultBuilder,
    LanguageDetection,
    LanguageDetectionBuilder,
)
from .list_attribute import ListAttribute, ListAttributeBuilder
from .morpho_analysis import (
    ArabicMorphoAnalysis,
    ArabicMorphoAnalysisBuilder,
    HanMorphoAnalysis,
    HanMorphoAnalysisBuilder,
    MorphoAnalysis,
    MorphoAnalysisBuilder,
)
from .regional_dialect_detection import (
    DialectDetectionResult,
    DialectDetectionResultBuilder,
    RegionalDialectDetection,
    RegionalDialectDetectionBuilder,
)
from .token import Token, TokenBuilder

__all__ = [
    "DEFAULT_COREFERENCE_CHAIN_ID",
    "ArabicMorphoAnalysis",
    "ArabicMorphoAnalysisBuilder",
    "Attribute",
    "AttributeBuilder",
    "BaseAttribute",
    "BaseAttributeBuilder",
    "DetectionResult",
    "DetectionResultBuilder",
    "DialectDetectionResult",
    "DialectDetectionResultBuilder",
    "EntityMention",
    "EntityMentionBuilder",
    "ExtendedProperties",
    "HanMorphoAnalysis",
    "HanMorphoAnalysisBuilder",
    "LanguageCode",
    "LanguageDetection",
    "LanguageDetectionBuilder",
    "ListAttribute",
    "ListAttributeBuilder",
    "MorphoAnalysis",
    "MorphoAnalysisBuilder",
    "RegionalDialectDetection",
    "RegionalDialectDetectionBuilder",
    "Script",
    "Token",
    "TokenBuilder",
]
