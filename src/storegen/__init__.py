# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
storegen: schema resolution and SQL query construction for store code generation.

Raw model declarations are resolved into a consistent schema (naming
defaults, primary keys, field classification, patch types, ordering) and
generated code composes parameterized SQL with the ``Builder``.
"""

from __future__ import annotations

from .constants import DirectiveKey, FieldFlag, PatchTypeMode
from .store_declarations import DeclarationTable, RawField, RawModel
from .store_directives import parse_bool, parse_directives
from .store_errors import (
    DuplicatePatchBinding,
    EmbeddingCycleError,
    InvalidFieldDeclaration,
    MalformedDirective,
    MissingPatchType,
    SchemaResolutionError,
    UnresolvedPatchBinding,
)
from .store_fields import FieldNormalizer
from .store_models import ModelAssembler
from .store_page_options import PageOptions
from .store_query_builder import (
    Builder,
    KeyValue,
    NamedArg,
    Values,
    fixed_param,
    question_mark_param,
)
from .store_registry import SchemaRegistry, resolve_schema
from .store_resolver import PatchResolver
from .store_schema import Field, Model
from .store_settings import GeneratorSettings
from .store_template_functions import TemplateFunctions

__version__ = "0.1.0"

__all__ = [
    # Declarations
    "RawField",
    "RawModel",
    "DeclarationTable",
    # Schema
    "Field",
    "Model",
    # Resolution
    "GeneratorSettings",
    "PatchTypeMode",
    "FieldFlag",
    "DirectiveKey",
    "parse_directives",
    "parse_bool",
    "FieldNormalizer",
    "ModelAssembler",
    "PatchResolver",
    "SchemaRegistry",
    "resolve_schema",
    # Errors
    "SchemaResolutionError",
    "UnresolvedPatchBinding",
    "DuplicatePatchBinding",
    "MissingPatchType",
    "MalformedDirective",
    "InvalidFieldDeclaration",
    "EmbeddingCycleError",
    # Query building
    "Builder",
    "KeyValue",
    "NamedArg",
    "Values",
    "fixed_param",
    "question_mark_param",
    "PageOptions",
    "TemplateFunctions",
]
