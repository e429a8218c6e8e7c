# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the template helper functions.
"""

from __future__ import annotations

import pytest

from storegen import ModelAssembler, TemplateFunctions, question_mark_param

from .conftest import USER


@pytest.fixture(scope="function")
def user_model():
    return ModelAssembler().assemble(USER)


class TestColumnHelpers:

    def test_filter_primary(self, user_model):
        names = [f.name for f in TemplateFunctions.filter_primary(user_model.fields)]
        assert names == ["Email", "FirstName", "DisplayName", "CreatedAt"]

    def test_to_columns(self, user_model):
        assert TemplateFunctions.to_columns(user_model.writable_fields) == ["id", "email", "first_name"]

    def test_join_strings(self):
        assert TemplateFunctions.join_strings(", ", ["a", "b", "c"]) == "a, b, c"
        assert TemplateFunctions.join_strings(", ", []) == ""


class TestParameterHelpers:

    def test_map_to_params(self):
        assert TemplateFunctions().map_to_params(["a", "b", "c"]) == ["$1", "$2", "$3"]

    def test_map_to_params_question_mark(self):
        assert TemplateFunctions(question_mark_param).map_to_params(["a", "b"]) == ["?", "?"]

    def test_last_arg(self):
        assert TemplateFunctions.last_arg(["a", "b"]) == 3
        assert TemplateFunctions.last_arg([]) == 1

    def test_to_field_updates(self):
        assert TemplateFunctions().to_field_updates(["email", "first_name"]) == [
            "email = $1",
            "first_name = $2",
        ]

    def test_update_statement(self, user_model):
        funcs = TemplateFunctions()
        columns = funcs.to_columns(funcs.filter_primary(user_model.writable_fields))
        sql = (
            f"UPDATE {user_model.table_name} SET {funcs.join_strings(', ', funcs.to_field_updates(columns))}"
            f" WHERE id = ${funcs.last_arg(columns)}"
        )
        assert sql == "UPDATE users SET email = $1, first_name = $2 WHERE id = $3"


class TestMapping:

    def test_as_mapping(self):
        mapping = TemplateFunctions().as_mapping()
        assert set(mapping) == {
            "filter_primary",
            "to_columns",
            "join_strings",
            "map_to_params",
            "last_arg",
            "to_field_updates",
        }
        assert mapping["map_to_params"](["x"]) == ["$1"]

    def test_instances_are_independent(self):
        dollar = TemplateFunctions().as_mapping()
        question = TemplateFunctions(question_mark_param).as_mapping()
        assert dollar["to_field_updates"](["a"]) == ["a = $1"]
        assert question["to_field_updates"](["a"]) == ["a = ?"]
