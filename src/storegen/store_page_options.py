# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Page based limit/offset arguments for list queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .constants import PageOptionsConstants


@dataclass(frozen=True)
class PageOptions:
    """A page number (1-based) and a per page limit."""
    page: int = PageOptionsConstants.FIRST_PAGE
    per_page: int = PageOptionsConstants.DEFAULT_PER_PAGE

    def args(self) -> Tuple[int, int]:
        """
        Return the ``(limit, offset)`` pair for a query.

        Pages below the first page select the first page, and a non positive
        per page limit falls back to the default limit.
        """
        page = max(self.page, PageOptionsConstants.FIRST_PAGE)
        limit = self.per_page if self.per_page >= 1 else PageOptionsConstants.DEFAULT_PER_PAGE
        return limit, (page - 1) * limit


__all__ = ["PageOptions"]
