# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
SQL text and positional argument accumulator.

Generated store code composes queries with a ``Builder``. Every ``{}`` marker
passed to ``write_with_params`` becomes a positional parameter numbered after
the arguments already collected, so fragments can be concatenated freely
without renumbering by hand::

    b = Builder()
    b.write("UPDATE users SET ")
    b.write_key_values("%s = {}", ", ", KeyValue("email", email), KeyValue("name", name))
    b.write_with_params(" WHERE id = {}", user_id)
    query, args = b.build()

A builder is a single-owner mutable value; fork a shared prefix with ``copy()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List, Tuple, Union

from .constants import QueryBuilderConstants, QueryBuilderMessages

if TYPE_CHECKING:
    from .store_page_options import PageOptions

ParamFormatter = Callable[[int], str]


def fixed_param(index: int) -> str:
    """Format the parameter at zero-based ``index`` as ``$<index + 1>``."""
    return f"{QueryBuilderConstants.DOLLAR_PREFIX}{index + 1}"


def question_mark_param(index: int) -> str:
    """Format every parameter as ``?``."""
    _ = index
    return QueryBuilderConstants.QUESTION_MARK


@dataclass(frozen=True)
class KeyValue:
    """A key (usually a column) and the value bound to it."""
    key: str
    value: Any


# Named filters read better as NamedArg at call sites.
NamedArg = KeyValue


class Values(tuple):
    """
    Several values bound to one key fragment.

    ``KeyValue("age", Values(18, 65))`` with ``"%s BETWEEN {} AND {}"``
    expands into two consecutive parameters.
    """

    def __new__(cls, *values: Any) -> Values:
        return super().__new__(cls, values)

    def __getnewargs__(self) -> Tuple[Any, ...]:
        return tuple(self)

    def __repr__(self) -> str:
        return f"Values({tuple(self)!r})"


class Builder:
    """
    Builds a query string and its positional arguments.

    :class: Builder
    :synopsis: Incremental SQL text + argument accumulator
    """

    def __init__(self, param_formatter: ParamFormatter = fixed_param) -> None:
        if not callable(param_formatter):
            raise ValueError(f"param_formatter must be callable, got: {param_formatter!r}")
        self.param_formatter = param_formatter
        self._parts: List[str] = []
        self._args: List[Any] = []

    @property
    def arg_count(self) -> int:
        return len(self._args)

    def write(self, text: str) -> Builder:
        """Append ``text`` verbatim."""
        self._parts.append(text)
        return self

    def writef(self, fmt: str, *args: Any) -> Builder:
        """Append ``fmt % args``. Formatting only, no arguments are collected."""
        self._parts.append(fmt % args)
        return self

    def write_trimmed(self, text: str) -> Builder:
        """Append ``text`` with surrounding whitespace stripped."""
        self._parts.append(text.strip())
        return self

    write_trim = write_trimmed

    def write_with_args(self, text: str, *args: Any) -> Builder:
        """
        Append ``text`` and collect ``args`` as they are.

        No markers are rewritten; ``text`` must already reference the arguments
        by their final position.
        """
        self._parts.append(text)
        self._args.extend(args)
        return self

    def with_args(self, *args: Any) -> Builder:
        """Collect ``args`` without writing any text."""
        self._args.extend(args)
        return self

    def write_with_params(self, template: str, *values: Any) -> Builder:
        """
        Replace every ``{}`` marker in ``template`` with the next parameter.

        :param template: Text with one marker per value, left to right
        :param values: Values bound to the markers
        :raises ValueError: The number of markers and values differ
        """
        marker = QueryBuilderConstants.PLACEHOLDER
        chunks = template.split(marker)
        if len(chunks) - 1 != len(values):
            raise ValueError(QueryBuilderMessages.PARAM_COUNT_MISMATCH.format(len(chunks) - 1, len(values), template))

        self._parts.append(chunks[0])
        for value, chunk in zip(values, chunks[1:]):
            self._parts.append(self.param_formatter(len(self._args)))
            self._args.append(value)
            self._parts.append(chunk)
        return self

    def write_key_values(self, fmt: str, sep: str, *pairs: Union[KeyValue, Tuple[str, Any]]) -> Builder:
        """
        Write one fragment per pair, joined by ``sep``.

        Each key is substituted into ``fmt`` (``%s`` style) and the fragment's
        markers are bound to the pair's value; a ``Values`` value feeds several
        markers of the same fragment.

        :raises ValueError: ``fmt`` does not take exactly one key, or a
            fragment's markers and values differ
        """
        # @@ STEP 1: Render and check every fragment before writing any of them
        fragments: List[Tuple[str, Tuple[Any, ...]]] = []
        for pair in pairs:
            kv = self._as_key_value(pair)
            values = tuple(kv.value) if isinstance(kv.value, Values) else (kv.value,)
            try:
                fragment = fmt % kv.key
            except TypeError as e:
                raise ValueError(QueryBuilderMessages.INVALID_KEY_FORMAT.format(fmt)) from e
            markers = fragment.count(QueryBuilderConstants.PLACEHOLDER)
            if markers != len(values):
                raise ValueError(QueryBuilderMessages.PARAM_COUNT_MISMATCH.format(markers, len(values), fragment))
            fragments.append((fragment, values))

        # @@ STEP 2: Write, numbering continues across fragments
        for i, (fragment, values) in enumerate(fragments):
            if i:
                self._parts.append(sep)
            self.write_with_params(fragment, *values)
        return self

    write_named_args = write_key_values

    def write_limit_offset(self, page_options: "PageOptions") -> Builder:
        """Append ``LIMIT``/``OFFSET`` parameters computed from ``page_options``."""
        limit, offset = page_options.args()
        return self.write_with_params(QueryBuilderConstants.LIMIT_OFFSET_CLAUSE, limit, offset)

    def copy(self) -> Builder:
        """Return an independent builder holding a snapshot of the current state."""
        clone = Builder(self.param_formatter)
        clone._parts = ["".join(self._parts)]
        clone._args = list(self._args)
        return clone

    __copy__ = copy

    def build(self) -> Tuple[str, Tuple[Any, ...]]:
        """Return the query string with its arguments."""
        return self.__str__(), tuple(self._args)

    @staticmethod
    def _as_key_value(pair: Union[KeyValue, Tuple[str, Any]]) -> KeyValue:
        if isinstance(pair, KeyValue):
            return pair
        if isinstance(pair, tuple) and not isinstance(pair, Values) and len(pair) == 2:
            return KeyValue(pair[0], pair[1])
        raise ValueError(QueryBuilderMessages.INVALID_KEY_VALUE.format(pair))

    def __str__(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __repr__(self) -> str:
        return f"Builder(query={self.__str__()!r}, args={self._args!r})"


__all__ = [
    "Builder",
    "KeyValue",
    "NamedArg",
    "Values",
    "ParamFormatter",
    "fixed_param",
    "question_mark_param",
]
