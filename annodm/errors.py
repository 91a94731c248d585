"""Exception types raised while building or decoding attributes."""

from __future__ import annotations


class AnnotationError(Exception):
    """Base class for every error raised by ``annodm``."""


class ConstructionError(AnnotationError, ValueError):
    """An attribute invariant was violated while building an instance.

    Raised for spans whose end precedes their start, negative offsets,
    required fields that were never supplied and values of the wrong
    kind. The builder that raised it is left unchanged and may be
    corrected and built again.
    """


class DecodeError(AnnotationError, ValueError):
    """Wire input could not be decoded into an attribute.

    Attributes:
        message: Description of the problem.
        path: Location of the offending value inside the decoded tree,
            written as ``/``-separated keys and indexes. Empty when the
            failure concerns the whole input.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message

    def prepend(self, segment: str | int) -> DecodeError:
        """Prefix ``segment`` to the path while the error propagates outward.

        Args:
            segment: Key or index of the enclosing container.

        Returns:
            The same error, for use in ``raise`` statements.
        """

        self.path = f"/{segment}{self.path}"
        return self
