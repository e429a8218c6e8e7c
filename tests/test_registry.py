# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end tests for the schema registry.
"""

from __future__ import annotations

import pytest

from storegen import (
    DuplicatePatchBinding,
    GeneratorSettings,
    PatchTypeMode,
    RawField,
    RawModel,
    SchemaRegistry,
    SchemaResolutionError,
    resolve_schema,
)

from .conftest import ROLE, USER


class TestResolveSchema:
    """One-call resolution of a declaration set."""

    def test_user_scenario(self):
        (user,) = resolve_schema([USER])

        assert user.plural_name == "Users"
        assert user.table_name == "users"
        assert user.order_by == "id"
        assert user.primary_key_field.column == "id"
        assert user.patch.name == "UserPatch"
        assert [f.declared_type for f in user.patch.fields] == ["*string", "*sql.NullString"]

    def test_sample_declarations(self, sample_declarations):
        models = resolve_schema(sample_declarations)

        assert [m.name for m in models] == ["User", "Role", "EffectiveRole"]
        assert models[1].patch.name == "RolePatch"
        assert models[2].patch is None

    def test_model_names_stay_unique_with_a_declared_patch(self):
        user_patch = RawModel(
            name="UserPatch",
            fields=[RawField(name="Email", type_expr="*string", tag="email")],
        )

        models = resolve_schema([USER, ROLE, user_patch])

        names = [m.name for m in models] + [m.patch.name for m in models if m.patch is not None]
        assert names == ["User", "Role", "UserPatch", "RolePatch"]
        assert models[0].patch is not None and models[0].patch.generated is False

    def test_column_conventions(self):
        post = RawModel(
            name="Post",
            fields=[
                RawField(name="ID", type_expr="int", tag="id"),
                RawField(name="Body", type_expr="string", tag="body"),
                RawField(name="UpdatedAt", type_expr="time.Time", tag="updated_at"),
            ],
        )

        (model,) = resolve_schema([post], GeneratorSettings(column_conventions=True))

        assert model.order_by == "id"
        assert [f.name for f in model.patch.fields] == ["Body"]

    def test_settings_are_honored(self):
        settings = GeneratorSettings(patch_type_mode=PatchTypeMode.IMPORT)
        update = RawModel(
            name="UserUpdate",
            doc="patch type: User",
            fields=[RawField(name="Email", type_expr="*string", tag="email")],
        )

        (user,) = resolve_schema([USER, update], settings)

        assert user.patch.name == "UserUpdate"
        assert user.patch.generated is False


class TestRegistryPhases:
    """Registration, assembly and finalization."""

    def test_resolution_populates_models(self, registry, sample_declarations):
        registry.register_all(sample_declarations)
        assert registry.models == []
        assert registry.is_finalized() is False

        models = registry.resolve()

        assert registry.is_finalized() is True
        assert [m.name for m in registry.models] == [m.name for m in models]
        assert registry.get_model_by_name("Role") is models[1]
        assert registry.get_model_by_name("Missing") is None

    def test_resolve_is_idempotent(self, registry):
        registry.register(USER)
        first = registry.resolve()
        second = registry.resolve()
        assert first[0] is second[0]

    def test_assemble_keeps_patch_models(self, registry):
        update = RawModel(name="UserUpdate", doc="patches: User")
        registry.register_all([USER, update])

        assembled = registry.assemble()

        assert [m.name for m in assembled] == ["User", "UserUpdate"]
        assert all(m.patch is None for m in assembled)

    def test_register_after_finalize(self, registry):
        registry.register(USER)
        assert registry.finalize() is True

        with pytest.raises(SchemaResolutionError, match="already finalized"):
            registry.register(ROLE)
        with pytest.raises(SchemaResolutionError):
            registry.register_embeddable(ROLE)

    def test_duplicate_declaration(self, registry):
        registry.register(USER)
        with pytest.raises(SchemaResolutionError, match="declared more than once") as exc_info:
            registry.register(USER)
        assert exc_info.value.model_name == "User"


class TestEmbeddables:
    """Embeddable shapes contribute fields but are not models."""

    def test_embeddable_is_flattened_but_not_emitted(self, registry):
        timestamps = RawModel(
            name="Timestamps",
            fields=[RawField(name="CreatedAt", type_expr="time.Time", tag="created_at,auto")],
        )
        post = RawModel(
            name="Post",
            fields=[
                RawField(name="ID", type_expr="int", tag="id,primary"),
                RawField(type_expr="Timestamps"),
                RawField(name="Body", type_expr="string", tag="body"),
            ],
        )
        registry.register_embeddable(timestamps)
        registry.register(post)

        (model,) = registry.resolve()

        assert model.columns() == ["id", "created_at", "body"]
        assert [f.name for f in model.patch.fields] == ["Body"]


class TestFailures:
    """Failures abort the pass and are recorded."""

    def _conflicting(self):
        return [
            USER,
            RawModel(name="UserUpdate", doc="patches: User"),
            RawModel(name="UserChange", doc="patches: User"),
        ]

    def test_finalize_reports_failure(self, registry):
        registry.register_all(self._conflicting())

        assert registry.finalize() is False
        assert registry.is_finalized() is False
        assert registry.models == []
        errors = registry.get_resolution_errors()
        assert len(errors) == 1
        assert "UserUpdate" in errors[0]

    def test_resolve_raises(self, registry):
        registry.register_all(self._conflicting())
        with pytest.raises(DuplicatePatchBinding):
            registry.resolve()

    def test_assembly_failure_is_recorded(self):
        registry = SchemaRegistry(GeneratorSettings(strict=True))
        registry.register(RawModel(name="Broken", doc="immutable: perhaps"))

        assert registry.finalize() is False
        assert "immutable" in registry.get_resolution_errors()[0]

    def test_resolution_errors_are_copies(self, registry):
        registry.register_all(self._conflicting())
        registry.finalize()
        registry.get_resolution_errors().clear()
        assert len(registry.get_resolution_errors()) == 1
