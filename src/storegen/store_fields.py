# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Normalization of raw field declarations into resolved fields.

Tag format: ``"column,flag,flag"``. A column of ``-`` drops the declaration.
Anonymous declarations whose type names a known declaration are flattened
into the enclosing model, recursively and in declaration order.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .constants import ErrorMessages, FieldFlag, FieldTagConstants
from .store_declarations import DeclarationTable, RawField, RawModel
from .store_errors import EmbeddingCycleError, InvalidFieldDeclaration
from .store_schema import Field
from .store_settings import GeneratorSettings

logger = logging.getLogger(__name__)


class FieldNormalizer:
    """
    Turns raw field declarations into ``Field`` values.

    :class: FieldNormalizer
    :synopsis: Flag interpretation, column defaulting and embedded flattening
    """

    def __init__(
        self,
        declarations: Optional[DeclarationTable] = None,
        settings: Optional[GeneratorSettings] = None,
    ) -> None:
        self.declarations = declarations if declarations is not None else DeclarationTable()
        self.settings = settings if settings is not None else GeneratorSettings()

    def normalize_model_fields(self, model: RawModel) -> List[Field]:
        """Normalize every declaration of ``model`` into a flat field list."""
        fields: List[Field] = []
        for index, raw in enumerate(model.fields):
            fields.extend(self._normalize(raw, model.name, index, (model.name,)))
        return fields

    def normalize(self, raw: RawField, model_name: str, index: int = 0) -> List[Field]:
        """
        Normalize one declaration.

        :param raw: The declaration
        :param model_name: Name of the enclosing model, for error messages
        :param index: Position of the declaration, for error messages
        :returns: Zero fields (dropped), one field, or the flattened embedded fields
        """
        return self._normalize(raw, model_name, index, (model_name,))

    def _normalize(
        self,
        raw: RawField,
        model_name: str,
        index: int,
        chain: Tuple[str, ...],
    ) -> List[Field]:
        column, flags = raw.tag_parts()

        # @@ STEP 1: The exclude sentinel drops the declaration before anything else
        if column == FieldTagConstants.EXCLUDE_SENTINEL:
            logger.debug(f"{model_name}: dropped declaration {raw.name or raw.type_expr!r}")
            return []

        if raw.is_anonymous and not raw.type_expr.strip():
            raise InvalidFieldDeclaration(
                ErrorMessages.FIELD_WITHOUT_NAME_OR_TYPE.format(index, model_name),
                model_name=model_name,
            )

        # @@ STEP 2: Anonymous declarations of a known shape are flattened
        if raw.is_anonymous:
            embedded = self.declarations.lookup(raw.type_expr.strip())
            if embedded is not None:
                return self._flatten(embedded, model_name, chain)

        # @@ STEP 3: Interpret flags
        is_primary = is_auto = is_excluded = is_read_only = is_sort = False
        for flag in flags:
            if flag == FieldFlag.PRIMARY:
                is_primary = True
            elif flag == FieldFlag.AUTO:
                is_auto = True
            elif flag == FieldFlag.EXCLUDE:
                is_excluded = True
            elif flag == FieldFlag.READONLY:
                is_read_only = True
            elif flag == FieldFlag.SORT and self.settings.sort_flag:
                is_sort = True
            elif flag:
                # || S.3.1: Unknown flags are ignored to stay forward compatible
                logger.debug(f"{model_name}: ignoring unknown flag {flag!r} on {raw.name or raw.type_expr}")

        # @@ STEP 4: Anonymous declarations of an unknown type act as named fields
        name = raw.name if not raw.is_anonymous else raw.embedded_type_name()

        return [
            Field(
                name=name,
                column=column or name,
                declared_type=raw.type_expr,
                is_primary_key=is_primary,
                is_auto=is_auto,
                is_excluded=is_excluded,
                is_read_only=is_read_only,
                is_sort=is_sort,
            )
        ]

    def _flatten(self, embedded: RawModel, model_name: str, chain: Tuple[str, ...]) -> List[Field]:
        # || S.2.1: Reject cyclic and runaway embedding explicitly
        if embedded.name in chain:
            path = " -> ".join(chain + (embedded.name,))
            raise EmbeddingCycleError(
                ErrorMessages.EMBEDDING_CYCLE.format(model_name, embedded.name, path),
                model_name=model_name,
                target_name=embedded.name,
            )
        if len(chain) > self.settings.max_embed_depth:
            path = " -> ".join(chain + (embedded.name,))
            raise EmbeddingCycleError(
                ErrorMessages.EMBEDDING_TOO_DEEP.format(model_name, self.settings.max_embed_depth, path),
                model_name=model_name,
                target_name=embedded.name,
            )

        logger.debug(f"{model_name}: flattening embedded {embedded.name}")
        nested_chain = chain + (embedded.name,)
        fields: List[Field] = []
        for index, raw in enumerate(embedded.fields):
            fields.extend(self._normalize(raw, model_name, index, nested_chain))
        return fields


__all__ = ["FieldNormalizer"]
