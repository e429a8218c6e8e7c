# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Resolved schema entities: fields, models and the patch relationship.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Field:
    """
    One resolved column mapping.

    :class: Field
    :synopsis: Immutable field of a resolved model
    """
    name: str
    column: str
    declared_type: str
    is_primary_key: bool = False
    is_auto: bool = False        # server generated, never written
    is_excluded: bool = False    # never materialized as a column
    is_read_only: bool = False   # skipped on update/patch paths
    is_sort: bool = False        # default order-by column when enabled

    @property
    def writable(self) -> bool:
        return not (self.is_excluded or self.is_read_only or self.is_auto)

    @property
    def patchable(self) -> bool:
        """Whether a patch model mirrors this field."""
        return self.writable and not self.is_primary_key


@dataclass
class Model:
    """
    One resolved table or view mapping.

    :class: Model
    :synopsis: Model produced by the assembler and completed by the resolver
    """
    name: str
    plural_name: str = ""
    table_name: str = ""
    read_only: bool = False
    immutable: bool = False
    order_by: str = ""
    primary_key_field: Optional[Field] = None
    created_at_field: Optional[Field] = None
    updated_at_field: Optional[Field] = None
    patch_binding: str = ""
    patch: Optional["Model"] = None
    generated: bool = False
    directives: Dict[str, str] = field(default_factory=dict)
    declared_fields: List[Field] = field(default_factory=list)

    @property
    def is_patch_model(self) -> bool:
        return self.patch_binding != ""

    @property
    def updatable(self) -> bool:
        return not (self.read_only or self.immutable or self.is_patch_model)

    @property
    def fields(self) -> List[Field]:
        """Declared fields that materialize as columns, in declaration order."""
        return [f for f in self.declared_fields if not f.is_excluded]

    @property
    def writable_fields(self) -> List[Field]:
        return [f for f in self.declared_fields if f.writable]

    @property
    def timestamp_fields(self) -> List[Field]:
        return [f for f in (self.created_at_field, self.updated_at_field) if f is not None]

    @property
    def patch_source_fields(self) -> List[Field]:
        """
        Fields a patch model of this model mirrors.

        The primary key and the timestamp fields are never patched, even when
        a directive (rather than a flag) designates them.
        """
        skipped = [self.primary_key_field] + self.timestamp_fields
        return [f for f in self.declared_fields if f.patchable and not any(f is s for s in skipped)]

    @property
    def fields_no_primary_key(self) -> List[Field]:
        return [f for f in self.fields if f is not self.primary_key_field]

    def fields_for(self, for_write: bool) -> List[Field]:
        """Fields for reading, or only the writable ones when ``for_write``."""
        return self.writable_fields if for_write else self.fields

    def columns(self, for_write: bool = False) -> List[str]:
        return [f.column for f in self.fields_for(for_write)]

    def get_field(self, name: str) -> Optional[Field]:
        """Last declared field with ``name``; later declarations shadow earlier ones."""
        found = None
        for f in self.declared_fields:
            if f.name == name:
                found = f
        return found

    def __repr__(self) -> str:
        patch_name = self.patch.name if self.patch is not None else None
        return (
            f"Model(name={self.name!r}, table={self.table_name!r}, order_by={self.order_by!r}, "
            f"fields={[f.name for f in self.declared_fields]!r}, patch={patch_name!r})"
        )


__all__ = ["Field", "Model"]
