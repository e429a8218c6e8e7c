# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Tests for page to limit/offset conversion.
"""

from __future__ import annotations

import dataclasses

import pytest

from storegen import PageOptions


@pytest.mark.parametrize(
    "page,per_page,expected",
    [
        (1, 10, (10, 0)),
        (2, 10, (10, 10)),
        (5, 25, (25, 100)),
        (0, 10, (10, 0)),
        (-3, 10, (10, 0)),
        (2, 0, (10, 10)),
        (3, -1, (10, 20)),
        (0, 0, (10, 0)),
    ],
)
def test_args(page, per_page, expected):
    assert PageOptions(page=page, per_page=per_page).args() == expected


def test_defaults():
    options = PageOptions()
    assert (options.page, options.per_page) == (1, 10)
    assert options.args() == (10, 0)


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PageOptions().page = 2
