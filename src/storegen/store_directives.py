# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Directive parsing for the free-text annotation attached to a model.

Example annotation::

    User represents an application user.

    table: app_users
    order by: "created_at DESC, id"

Values are bare words (letters, digits, underscores and spaces) or double
quoted strings, where a doubled quote escapes a literal quote.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Optional

from .constants import DirectiveConstants

_DIRECTIVE_RE = re.compile(DirectiveConstants.PATTERN)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == DirectiveConstants.QUOTE_CHAR:
        return value[1:-1].replace(DirectiveConstants.ESCAPED_QUOTE, DirectiveConstants.QUOTE_CHAR)
    return value.strip()


def _normalize_key(key: str) -> str:
    return " ".join(key.split()).lower()


def parse_directives(text: str) -> Dict[str, str]:
    """
    Find every ``key: value`` directive in ``text``.

    :param text: Annotation text of one model
    :returns: Mapping of lower-cased key to value, ordered by last occurrence;
        the last occurrence of a key wins
    """
    result: Dict[str, str] = {}
    if not text:
        return result
    for match in _DIRECTIVE_RE.finditer(text):
        key = _normalize_key(match.group(1))
        if not key:
            continue
        # || S.1: Re-insert so iteration order follows the last occurrence
        result.pop(key, None)
        result[key] = _unquote(match.group(2))
    return result


def last_directive(directives: Dict[str, str], keys: Iterable[str]) -> str:
    """
    Value of whichever of the synonym ``keys`` occurs last, or "".

    Relies on ``parse_directives`` ordering its result by last occurrence.
    """
    synonyms = set(keys)
    for key, value in reversed(directives.items()):
        if key in synonyms and value:
            return value
    return ""


def parse_bool(value: str) -> Optional[bool]:
    """Interpret a boolean literal; ``None`` when ``value`` is not one."""
    if value in DirectiveConstants.TRUE_LITERALS:
        return True
    if value in DirectiveConstants.FALSE_LITERALS:
        return False
    return None


__all__ = ["parse_directives", "last_directive", "parse_bool"]
