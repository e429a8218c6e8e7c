# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Assembly of one raw model declaration into a resolved ``Model``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .constants import (
    ColumnConventions,
    DirectiveConstants,
    DirectiveKey,
    ErrorMessages,
    NamingConstants,
)
from .store_declarations import DeclarationTable, RawModel
from .store_directives import last_directive, parse_bool, parse_directives
from .store_errors import InvalidFieldDeclaration, MalformedDirective
from .store_fields import FieldNormalizer
from .store_schema import Field, Model
from .store_settings import GeneratorSettings

logger = logging.getLogger(__name__)


class ModelAssembler:
    """
    Builds models from raw declarations and their directive blocks.

    Defaulting order matters: plural before table, and order-by only once
    every field (and therefore the primary key) is known.
    """

    def __init__(
        self,
        declarations: Optional[DeclarationTable] = None,
        settings: Optional[GeneratorSettings] = None,
    ) -> None:
        self.settings = settings if settings is not None else GeneratorSettings()
        self.declarations = declarations if declarations is not None else DeclarationTable()
        self.normalizer = FieldNormalizer(self.declarations, self.settings)

    def assemble(self, raw: RawModel) -> Optional[Model]:
        """
        Assemble ``raw`` into a model.

        :param raw: Raw model declaration
        :returns: The model, or ``None`` when its annotation carries the ignore marker
        """
        # @@ STEP 1: Skip ignored declarations
        if self.settings.ignore_marker in raw.doc:
            logger.debug(f"Skipping {raw.name}: ignore marker present")
            return None

        # @@ STEP 2: Apply directives
        directives = parse_directives(raw.doc)
        model = Model(
            name=raw.name,
            read_only=self.settings.views,
            plural_name=directives.get(DirectiveKey.PLURAL, ""),
            table_name=directives.get(DirectiveKey.TABLE, ""),
            order_by=last_directive(directives, DirectiveConstants.ORDER_BY_KEYS),
            patch_binding=last_directive(directives, DirectiveConstants.PATCH_KEYS),
            directives=directives,
        )
        read_only = self._bool_directive(directives, DirectiveKey.READ_ONLY, raw.name)
        if read_only is not None:
            model.read_only = read_only
        immutable = self._bool_directive(directives, DirectiveKey.IMMUTABLE, raw.name)
        if immutable is not None:
            model.immutable = immutable

        # @@ STEP 3: Derive names, plural first since the table derives from it
        if not model.plural_name:
            model.plural_name = model.name + NamingConstants.PLURAL_SUFFIX
        if not model.table_name:
            model.table_name = model.plural_name.lower()

        # @@ STEP 4: Add fields, capturing the primary key as it goes
        for field in self.normalizer.normalize_model_fields(raw):
            self._add_field(model, field)
        if self.settings.strict:
            self._check_duplicate_columns(model)
        self._apply_column_designations(model, directives)

        # @@ STEP 5: Default order-by needs every field processed first
        if not model.order_by:
            model.order_by = self._default_order_by(model)

        logger.debug(
            f"Assembled {model.name}: table={model.table_name}, "
            f"fields={len(model.declared_fields)}, order_by={model.order_by!r}"
        )
        return model

    def assemble_all(self, raws: List[RawModel]) -> List[Model]:
        """Assemble every declaration, dropping ignored ones, preserving order."""
        models: List[Model] = []
        for raw in raws:
            model = self.assemble(raw)
            if model is not None:
                models.append(model)
        return models

    def _add_field(self, model: Model, field: Field) -> None:
        if field.is_primary_key:
            previous = model.primary_key_field
            if previous is not None:
                if self.settings.strict:
                    raise InvalidFieldDeclaration(
                        ErrorMessages.MULTIPLE_PRIMARY_KEYS.format(model.name, previous.name, field.name),
                        model_name=model.name,
                        field_name=field.name,
                    )
                logger.warning(
                    f"Model {model.name} marks more than one primary key, "
                    f"{field.name} replaces {previous.name}"
                )
            model.primary_key_field = field
        model.declared_fields.append(field)

    def _apply_column_designations(self, model: Model, directives: Dict[str, str]) -> None:
        """
        Resolve the primary key and timestamp fields named by directive, or by
        the column conventions when enabled.

        :raises InvalidFieldDeclaration: A directive names a column the model
            lacks, or conventions are enabled and the model has no field
        """
        conventions = self.settings.column_conventions
        if conventions and not model.declared_fields:
            raise InvalidFieldDeclaration(
                ErrorMessages.MODEL_WITHOUT_FIELDS.format(model.name),
                model_name=model.name,
            )

        # @@ STEP 1: Index by column, a later declaration shadows an earlier one
        by_column: Dict[str, Field] = {f.column: f for f in model.declared_fields}

        # @@ STEP 2: Primary key; the convention only applies when no field is flagged
        primary_key = self._designated_field(model, by_column, directives, DirectiveKey.PRIMARY_KEY)
        if primary_key is None and conventions and model.primary_key_field is None:
            primary_key = by_column.get(ColumnConventions.PRIMARY_KEY)
        if primary_key is not None:
            model.primary_key_field = primary_key

        # @@ STEP 3: Timestamp fields
        created_at = self._designated_field(model, by_column, directives, DirectiveKey.CREATED_AT)
        if created_at is None and conventions:
            created_at = by_column.get(ColumnConventions.CREATED_AT)
        model.created_at_field = created_at

        updated_at = self._designated_field(model, by_column, directives, DirectiveKey.UPDATED_AT)
        if updated_at is None and conventions:
            updated_at = by_column.get(ColumnConventions.UPDATED_AT)
        model.updated_at_field = updated_at

    @staticmethod
    def _designated_field(
        model: Model,
        by_column: Dict[str, Field],
        directives: Dict[str, str],
        key: str,
    ) -> Optional[Field]:
        column = directives.get(key)
        if not column:
            return None
        found = by_column.get(column)
        if found is None:
            raise InvalidFieldDeclaration(
                ErrorMessages.NAMED_COLUMN_MISSING.format(key, model.name, column),
                model_name=model.name,
                field_name=column,
            )
        return found

    @staticmethod
    def _check_duplicate_columns(model: Model) -> None:
        seen: Dict[str, Field] = {}
        for field in model.fields:
            other = seen.get(field.column)
            if other is not None:
                raise InvalidFieldDeclaration(
                    ErrorMessages.DUPLICATE_COLUMN.format(model.name, field.column, other.name, field.name),
                    model_name=model.name,
                    field_name=field.name,
                )
            seen[field.column] = field

    @staticmethod
    def _default_order_by(model: Model) -> str:
        sort_columns = [f.column for f in model.declared_fields if f.is_sort]
        if sort_columns:
            return NamingConstants.ORDER_BY_SEPARATOR.join(sort_columns)
        if model.primary_key_field is not None:
            return model.primary_key_field.column
        return ""

    def _bool_directive(self, directives: Dict[str, str], key: str, model_name: str) -> Optional[bool]:
        value = directives.get(key)
        if not value:
            return None
        parsed = parse_bool(value)
        if parsed is None:
            if self.settings.strict:
                raise MalformedDirective(
                    ErrorMessages.MALFORMED_BOOLEAN_DIRECTIVE.format(key, model_name, value),
                    model_name=model_name,
                )
            logger.warning(ErrorMessages.MALFORMED_BOOLEAN_DIRECTIVE.format(key, model_name, value))
        return parsed


__all__ = ["ModelAssembler"]
