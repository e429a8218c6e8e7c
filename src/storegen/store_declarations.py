# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Raw, unresolved declarations handed over by a front end parser.

A front end (struct source, schema document, ...) reduces whatever syntax it
reads to these language neutral descriptors. Nothing here interprets flags or
directives; that is the job of the normalizer and the assembler.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import ErrorMessages, FieldTagConstants
from .store_errors import SchemaResolutionError

logger = logging.getLogger(__name__)


class RawField(BaseModel):
    """
    One field-like declaration.

    :class: RawField
    :synopsis: Unresolved field descriptor (name, type expression, flag string)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = None
    type_expr: str = ""
    tag: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        """An anonymous declaration embeds another shape."""
        return not self.name

    def tag_parts(self) -> Tuple[str, List[str]]:
        """Split the tag into its column token and the remaining flag tokens."""
        if self.tag is None:
            return "", []
        parts = [part.strip() for part in self.tag.split(FieldTagConstants.TAG_SEPARATOR)]
        return parts[0], parts[1:]

    def embedded_type_name(self) -> str:
        """
        Base identifier of the type expression.

        ``*pkg.Base`` and ``Base`` both yield ``Base``.
        """
        name = self.type_expr.strip().lstrip(FieldTagConstants.POINTER_PREFIX)
        return name.rsplit(FieldTagConstants.QUALIFIER_SEPARATOR, 1)[-1]


class RawModel(BaseModel):
    """
    One model-like (record) declaration with its directive block.

    :class: RawModel
    :synopsis: Unresolved model descriptor
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    doc: str = ""
    fields: List[RawField] = Field(default_factory=list)


class DeclarationTable:
    """
    Lookup table from type name to its raw declaration.

    Built once before normalization starts so embedded declarations resolve
    through an explicit table rather than ad hoc symbol lookups.
    """

    def __init__(self, declarations: Iterable[RawModel] = ()) -> None:
        self._declarations: Dict[str, RawModel] = {}
        for declaration in declarations:
            self.add(declaration)

    def add(self, declaration: RawModel) -> None:
        if declaration.name in self._declarations:
            raise SchemaResolutionError(
                ErrorMessages.DUPLICATE_DECLARATION.format(declaration.name),
                model_name=declaration.name,
            )
        self._declarations[declaration.name] = declaration
        logger.debug(f"Declaration table: added {declaration.name}")

    def lookup(self, type_name: str) -> Optional[RawModel]:
        return self._declarations.get(type_name)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)


__all__ = ["RawField", "RawModel", "DeclarationTable"]
