# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and shared fixtures for storegen tests.
"""

from __future__ import annotations

from typing import List

import pytest

from storegen import GeneratorSettings, RawField, RawModel, SchemaRegistry


# Test declarations, mirroring a small application schema
USER = RawModel(
    name="User",
    doc="User represents an application user.",
    fields=[
        RawField(name="ID", type_expr="int", tag="id,primary"),
        RawField(name="Email", type_expr="string", tag="email"),
        RawField(name="FirstName", type_expr="sql.NullString", tag="first_name"),
        RawField(name="DisplayName", type_expr="sql.NullString", tag="display_name,readonly"),
        RawField(name="CreatedAt", type_expr="time.Time", tag="created_at,auto"),
        RawField(name="Roles", type_expr="[]*Role", tag="-"),
    ],
)

ROLE = RawModel(
    name="Role",
    doc="Role represents an application role.",
    fields=[
        RawField(name="ID", type_expr="int", tag="id,primary"),
        RawField(name="Name", type_expr="string", tag="name"),
    ],
)

EFFECTIVE_ROLE = RawModel(
    name="EffectiveRole",
    doc=(
        "EffectiveRole (table: effective_roles) represents an effective role for a user.\n"
        "\n"
        'order by: "user_id, role_id"\n'
        "read-only: true\n"
    ),
    fields=[
        RawField(name="UserID", type_expr="int", tag="user_id,primary,exclude"),
        RawField(name="RoleID", type_expr="int", tag="role_id"),
        RawField(name="RoleName", type_expr="string", tag="role_name"),
    ],
)


@pytest.fixture(scope="function")
def settings() -> GeneratorSettings:
    """Default generator settings."""
    return GeneratorSettings()


@pytest.fixture(scope="function")
def strict_settings() -> GeneratorSettings:
    """Settings promoting tolerated looseness to errors."""
    return GeneratorSettings(strict=True)


@pytest.fixture(scope="function")
def sample_declarations() -> List[RawModel]:
    """Provide sample raw model declarations."""
    return [USER, ROLE, EFFECTIVE_ROLE]


@pytest.fixture(scope="function")
def registry(settings: GeneratorSettings) -> SchemaRegistry:
    """Create an empty schema registry."""
    return SchemaRegistry(settings)
