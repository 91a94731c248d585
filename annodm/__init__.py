"""Offset-anchored text annotations with object and array JSON encodings."""

from annodm.codec import AttributeCodec, Shape, TypeRegistry, default_registry
from annodm.errors import AnnotationError, ConstructionError, DecodeError

__all__ = [
    "AnnotationError",
    "AttributeCodec",
    "ConstructionError",
    "DecodeError",
    "Shape",
    "TypeRegistry",
    "default_registry",
]
