# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Function table handed to the rendering engine.

The renderer receives an explicit ``TemplateFunctions`` instance instead of
reaching for process wide state, so two renders can use different parameter
styles side by side.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from .store_query_builder import ParamFormatter, fixed_param
from .store_schema import Field


class TemplateFunctions:
    """
    Helpers used by store templates to render column lists and parameters.

    :class: TemplateFunctions
    :synopsis: Explicit, per render function table
    """

    def __init__(self, param_formatter: ParamFormatter = fixed_param) -> None:
        self.param_formatter = param_formatter

    @staticmethod
    def filter_primary(fields: Sequence[Field]) -> List[Field]:
        """All fields except primary key fields."""
        return [f for f in fields if not f.is_primary_key]

    @staticmethod
    def to_columns(fields: Sequence[Field]) -> List[str]:
        return [f.column for f in fields]

    @staticmethod
    def join_strings(sep: str, values: Sequence[str]) -> str:
        return sep.join(values)

    def map_to_params(self, values: Sequence[str]) -> List[str]:
        """One parameter token per value, numbered from the first parameter."""
        return [self.param_formatter(i) for i in range(len(values))]

    @staticmethod
    def last_arg(values: Sequence[str]) -> int:
        """1-based position of the parameter following ``values``."""
        return len(values) + 1

    def to_field_updates(self, columns: Sequence[str]) -> List[str]:
        """Map every column to ``<column> = <parameter>``."""
        return [f"{column} = {self.param_formatter(i)}" for i, column in enumerate(columns)]

    def as_mapping(self) -> Dict[str, Callable]:
        """Name to callable mapping, in the shape template engines expect."""
        return {
            "filter_primary": self.filter_primary,
            "to_columns": self.to_columns,
            "join_strings": self.join_strings,
            "map_to_params": self.map_to_params,
            "last_arg": self.last_arg,
            "to_field_updates": self.to_field_updates,
        }


__all__ = ["TemplateFunctions"]
