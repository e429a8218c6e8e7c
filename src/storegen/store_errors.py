# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised while resolving model declarations into a schema.

Every error derives from ``ValueError`` so callers that treat schema problems
as invalid values keep working, and carries the names needed to diagnose the
failure without re-running the generator.
"""

from __future__ import annotations

from typing import Optional


class SchemaResolutionError(ValueError):
    """
    Base class of all schema resolution failures.

    :class: SchemaResolutionError
    :synopsis: Terminal failure of one resolution pass
    """

    def __init__(
        self,
        message: str,
        *,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
        target_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.model_name = model_name
        self.field_name = field_name
        self.target_name = target_name


class UnresolvedPatchBinding(SchemaResolutionError):
    """An explicit patch binding targets a model that is missing or not updatable."""


class DuplicatePatchBinding(SchemaResolutionError):
    """A base model would receive a second patch model."""


class MissingPatchType(SchemaResolutionError):
    """An updatable model has no patch model and synthesis is disabled."""


class MalformedDirective(SchemaResolutionError):
    """A directive value cannot be interpreted (strict mode only)."""


class InvalidFieldDeclaration(SchemaResolutionError):
    """A field declaration cannot be turned into a consistent field."""


class EmbeddingCycleError(InvalidFieldDeclaration):
    """Embedded declarations form a cycle or nest beyond the allowed depth."""


__all__ = [
    "SchemaResolutionError",
    "UnresolvedPatchBinding",
    "DuplicatePatchBinding",
    "MissingPatchType",
    "MalformedDirective",
    "InvalidFieldDeclaration",
    "EmbeddingCycleError",
]
