# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Tests for generator settings validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from storegen import GeneratorSettings, PatchTypeMode


class TestGeneratorSettings:

    def test_defaults(self, settings):
        assert settings.patch_type_mode == PatchTypeMode.INCLUDE
        assert settings.views is False
        assert settings.strict is False
        assert settings.sort_flag is False
        assert settings.ignore_marker == "storegen-ignore"
        assert settings.optional_type_template == "*{}"
        assert settings.max_embed_depth == 32
        assert settings.column_conventions is False

    @pytest.mark.parametrize(
        "mode,allowed",
        [("include", True), ("only", True), ("import", False)],
    )
    def test_patch_synthesis_by_mode(self, mode, allowed):
        assert GeneratorSettings(patch_type_mode=mode).allow_patch_synthesis is allowed

    def test_unknown_mode(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(patch_type_mode="generate")

    def test_optional_type(self, settings):
        assert settings.optional_type("string") == "*string"
        assert GeneratorSettings(optional_type_template="Optional[{}]").optional_type("int") == "Optional[int]"

    @pytest.mark.parametrize("template", ["*", "{}{}", "Optional"])
    def test_invalid_optional_type_template(self, template):
        with pytest.raises(ValueError, match="placeholder"):
            GeneratorSettings(optional_type_template=template)

    def test_invalid_depth_and_marker(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(max_embed_depth=0)
        with pytest.raises(ValidationError):
            GeneratorSettings(ignore_marker="")

    def test_unknown_setting(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(verbose=True)

    def test_frozen(self, settings):
        with pytest.raises(ValidationError):
            settings.strict = True
