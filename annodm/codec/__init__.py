"""JSON codecs for attributes in object and array shape."""

from .base import schema
from .codec import AttributeCodec
from .registry import TypeRegistry, default_registry
from .shape import Shape

__all__ = [
    "AttributeCodec",
    "Shape",
    "TypeRegistry",
    "default_registry",
    "schema",
]
