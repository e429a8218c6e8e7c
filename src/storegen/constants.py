# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Constants module for storegen.

This module centralizes the constants, defaults and literal strings used
throughout the schema resolver and the query builder.

:module: constants
:synopsis: Centralized constants and configuration defaults for storegen
:author: storegen Contributors
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final, FrozenSet


# ============================================================================
# FIELD TAG CONSTANTS
# ============================================================================

class FieldTagConstants:
    """Constants for parsing a field flag string (``"column,flag,flag"``)."""

    # @@ STEP 1: Define tag layout
    TAG_SEPARATOR: Final[str] = ","
    EXCLUDE_SENTINEL: Final[str] = "-"

    # @@ STEP 2: Define embedded type expression markers
    POINTER_PREFIX: Final[str] = "*"
    QUALIFIER_SEPARATOR: Final[str] = "."


class FieldFlag(StrEnum):
    """Flags recognized after the column token of a field tag."""

    PRIMARY = "primary"
    AUTO = "auto"
    EXCLUDE = "exclude"
    READONLY = "readonly"
    SORT = "sort"


# ============================================================================
# MODEL DIRECTIVE CONSTANTS
# ============================================================================

class DirectiveKey(StrEnum):
    """Directive keys recognized in a model's free-text annotation block."""

    PLURAL = "plural"
    TABLE = "table"
    ORDER_BY = "order by"
    SORT = "sort"
    PATCH_TYPE = "patch type"
    PATCHES = "patches"
    READ_ONLY = "read-only"
    IMMUTABLE = "immutable"
    PRIMARY_KEY = "primary key"
    CREATED_AT = "created at"
    UPDATED_AT = "updated at"


class DirectiveConstants:
    """Constants for the directive parser."""

    # @@ STEP 1: Define the key/value pattern
    # || S.1: key is letters, digits, underscore, hyphen and internal spaces
    # || S.2: value is a bare word run or a double quoted string
    PATTERN: Final[str] = r'([\w\- ]+):\s*(\w[\w ]*|"(?:[^"]|"")*")'

    # @@ STEP 2: Define quoting
    QUOTE_CHAR: Final[str] = '"'
    ESCAPED_QUOTE: Final[str] = '""'

    # @@ STEP 3: Define synonym groups, the key occurring last in the text wins
    ORDER_BY_KEYS: Final[tuple] = (DirectiveKey.ORDER_BY, DirectiveKey.SORT)
    PATCH_KEYS: Final[tuple] = (DirectiveKey.PATCHES, DirectiveKey.PATCH_TYPE)

    # @@ STEP 4: Define boolean literals
    TRUE_LITERALS: Final[FrozenSet[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
    FALSE_LITERALS: Final[FrozenSet[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})


# ============================================================================
# NAMING CONSTANTS
# ============================================================================

class NamingConstants:
    """Constants for derived model names."""

    PLURAL_SUFFIX: Final[str] = "s"
    PATCH_SUFFIX: Final[str] = "Patch"
    ORDER_BY_SEPARATOR: Final[str] = ", "


class ColumnConventions:
    """Column names recognized when schema document conventions are enabled."""

    PRIMARY_KEY: Final[str] = "id"
    CREATED_AT: Final[str] = "created_at"
    UPDATED_AT: Final[str] = "updated_at"


# ============================================================================
# SETTINGS DEFAULTS
# ============================================================================

class PatchTypeMode(StrEnum):
    """How patch types are obtained during dependency resolution."""

    INCLUDE = "include"  # Generate store code and missing patch types
    ONLY = "only"        # Generate patch types only
    IMPORT = "import"    # Patch types must already exist, never synthesize


class SettingsDefaults:
    """Default values for ``GeneratorSettings``."""

    PATCH_TYPE_MODE: Final[str] = PatchTypeMode.INCLUDE
    IGNORE_MARKER: Final[str] = "storegen-ignore"
    OPTIONAL_TYPE_TEMPLATE: Final[str] = "*{}"
    TYPE_PLACEHOLDER: Final[str] = "{}"
    MAX_EMBED_DEPTH: Final[int] = 32


# ============================================================================
# REGISTRY RESOLUTION CONSTANTS
# ============================================================================

class RegistryResolutionConstants:
    """Constants for the schema registry resolution phases."""

    PHASE_REGISTRATION: Final[str] = "registration"
    PHASE_ASSEMBLED: Final[str] = "assembled"
    PHASE_FINALIZED: Final[str] = "finalized"


# ============================================================================
# QUERY BUILDER CONSTANTS
# ============================================================================

class QueryBuilderConstants:
    """Constants for the SQL query builder."""

    # @@ STEP 1: Define placeholder marker and rendered parameter tokens
    PLACEHOLDER: Final[str] = "{}"
    DOLLAR_PREFIX: Final[str] = "$"
    QUESTION_MARK: Final[str] = "?"

    # @@ STEP 2: Define paging clause
    LIMIT_OFFSET_CLAUSE: Final[str] = " LIMIT {} OFFSET {}"


class PageOptionsConstants:
    """Constants for page based limit/offset computation."""

    FIRST_PAGE: Final[int] = 1
    DEFAULT_PER_PAGE: Final[int] = 10


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Message templates for schema resolution errors."""

    # @@ STEP 1: Patch binding errors
    UNRESOLVED_PATCH_TARGET: Final[str] = (
        "Patch model {} binds to model {}, which does not exist among the base models"
    )
    PATCH_TARGET_NOT_UPDATABLE: Final[str] = (
        "Patch model {} binds to model {}, which is not updatable (read-only or immutable)"
    )
    DUPLICATE_PATCH_BINDING: Final[str] = (
        "Model {} already has patch type {}, cannot also bind {}"
    )
    IMPLICIT_PATCH_CONFLICT: Final[str] = (
        "Model {} would take {} as its patch type, but {} is already resolved as a base model"
    )
    MISSING_PATCH_TYPE: Final[str] = (
        "Could not find patch type {} for model {} and patch synthesis is disabled"
    )

    # @@ STEP 2: Field declaration errors
    FIELD_WITHOUT_NAME_OR_TYPE: Final[str] = (
        "Field declaration #{} of model {} has neither a name nor a type"
    )
    EMBEDDING_CYCLE: Final[str] = (
        "Model {} embeds {} cyclically (embedding chain: {})"
    )
    EMBEDDING_TOO_DEEP: Final[str] = (
        "Model {} exceeds the maximum embedding depth of {} at {}"
    )
    MULTIPLE_PRIMARY_KEYS: Final[str] = (
        "Model {} marks more than one primary key: {} and {}"
    )
    DUPLICATE_COLUMN: Final[str] = (
        "Model {} maps column {} more than once (fields {} and {})"
    )
    NAMED_COLUMN_MISSING: Final[str] = (
        "Directive {} of model {} names column {}, which does not exist"
    )
    MODEL_WITHOUT_FIELDS: Final[str] = (
        "Model {} must declare at least one field"
    )

    # @@ STEP 3: Directive errors
    MALFORMED_BOOLEAN_DIRECTIVE: Final[str] = (
        "Directive {} of model {} has a non boolean value: {}"
    )

    # @@ STEP 4: Settings errors
    INVALID_OPTIONAL_TYPE_TEMPLATE: Final[str] = (
        "optional_type_template must contain the {} placeholder exactly once, got: {}"
    )

    # @@ STEP 5: Registry errors
    REGISTRY_FINALIZED: Final[str] = "Cannot register model {}: the registry is already finalized"
    DUPLICATE_DECLARATION: Final[str] = "Model {} is declared more than once"


class QueryBuilderMessages:
    """Message templates for query builder misuse."""

    PARAM_COUNT_MISMATCH: Final[str] = (
        "Template has {} placeholder(s) but {} value(s) were supplied: {!r}"
    )
    INVALID_KEY_VALUE: Final[str] = (
        "Expected a KeyValue or a (key, value) pair, got: {!r}"
    )
    INVALID_KEY_FORMAT: Final[str] = (
        "Key format must take exactly one %s conversion for the key, got: {!r}"
    )
