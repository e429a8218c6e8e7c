# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Generator settings passed explicitly through one resolution pass.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import ErrorMessages, PatchTypeMode, SettingsDefaults


class GeneratorSettings(BaseModel):
    """
    Configuration of a single generator invocation.

    :class: GeneratorSettings
    :synopsis: Validated, immutable settings for schema resolution

    Attributes:
        patch_type_mode: ``include`` or ``only`` synthesize missing patch types,
            ``import`` requires every updatable model to have one.
        views: Treat every declared model as a read-only view.
        strict: Promote tolerated looseness (multiple primary keys, duplicate
            columns, malformed boolean directives) to errors.
        sort_flag: Interpret the ``sort`` field flag as a default order-by column.
        ignore_marker: Substring that makes the assembler skip a model.
        optional_type_template: Template wrapping a field type for patch models.
        max_embed_depth: Maximum nesting of embedded declarations.
        column_conventions: Apply schema document conventions: an ``id`` column is
            the default primary key, ``created_at`` and ``updated_at`` columns are
            the timestamp fields, and every model must declare a field.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    patch_type_mode: PatchTypeMode = Field(default=PatchTypeMode(SettingsDefaults.PATCH_TYPE_MODE))
    views: bool = False
    strict: bool = False
    sort_flag: bool = False
    ignore_marker: str = Field(default=SettingsDefaults.IGNORE_MARKER, min_length=1)
    optional_type_template: str = SettingsDefaults.OPTIONAL_TYPE_TEMPLATE
    max_embed_depth: int = Field(default=SettingsDefaults.MAX_EMBED_DEPTH, ge=1)
    column_conventions: bool = False

    @model_validator(mode='after')
    def validate_optional_type_template(self) -> 'GeneratorSettings':
        """
        Validate that the optional-type template wraps exactly one type.

        Raises:
            ValueError: If the template has no ``{}`` marker, or more than one
        """
        if self.optional_type_template.count(SettingsDefaults.TYPE_PLACEHOLDER) != 1:
            raise ValueError(
                ErrorMessages.INVALID_OPTIONAL_TYPE_TEMPLATE.format("{}", self.optional_type_template)
            )
        return self

    @property
    def allow_patch_synthesis(self) -> bool:
        """Whether missing patch types may be synthesized."""
        return self.patch_type_mode != PatchTypeMode.IMPORT

    def optional_type(self, declared_type: str) -> str:
        """Wrap ``declared_type`` into its optional (patch) representation."""
        return self.optional_type_template.replace(SettingsDefaults.TYPE_PLACEHOLDER, declared_type, 1)


__all__ = ["GeneratorSettings"]
