# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Dependency resolution between assembled models.

Patch models (models declaring ``patches: <Base>``) are bound to their base,
a base model named ``<Base>Patch`` is bound to ``<Base>`` implicitly, missing
patch models are synthesized when the settings allow it, and the
final model list keeps only the base models. Resolution is all or nothing:
every binding is validated before any model is touched.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .constants import ErrorMessages, NamingConstants
from .store_errors import DuplicatePatchBinding, MissingPatchType, UnresolvedPatchBinding
from .store_schema import Field, Model
from .store_settings import GeneratorSettings

logger = logging.getLogger(__name__)


class PatchResolver:
    """
    Binds or synthesizes the patch model of every updatable base model.

    :class: PatchResolver
    :synopsis: Second pass over all assembled models
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None) -> None:
        self.settings = settings if settings is not None else GeneratorSettings()

    def resolve(self, models: List[Model]) -> List[Model]:
        """
        Resolve patch relationships of ``models``.

        :param models: Every assembled model, in declaration order
        :returns: The base models, in order, with ``patch`` populated where applicable
        :raises UnresolvedPatchBinding: A binding target is missing or not updatable
        :raises DuplicatePatchBinding: Two patch models bind the same base, or a
            model named after a patch type also resolves a patch of its own
        :raises MissingPatchType: An updatable base has no patch and synthesis is disabled
        """
        # @@ STEP 1: Partition, preserving relative order
        patch_models = [m for m in models if m.is_patch_model]
        base_models = [m for m in models if not m.is_patch_model]
        by_name: Dict[str, Model] = {}
        for base in base_models:
            by_name.setdefault(base.name, base)

        # @@ STEP 2: Bind explicit patch models, nothing is mutated yet
        bound: Dict[str, Model] = {}
        for patch in patch_models:
            target = by_name.get(patch.patch_binding)
            if target is None:
                raise UnresolvedPatchBinding(
                    ErrorMessages.UNRESOLVED_PATCH_TARGET.format(patch.name, patch.patch_binding),
                    model_name=patch.name,
                    target_name=patch.patch_binding,
                )
            if not target.updatable:
                raise UnresolvedPatchBinding(
                    ErrorMessages.PATCH_TARGET_NOT_UPDATABLE.format(patch.name, target.name),
                    model_name=patch.name,
                    target_name=target.name,
                )
            existing = bound.get(target.name) or target.patch
            if existing is not None:
                raise DuplicatePatchBinding(
                    ErrorMessages.DUPLICATE_PATCH_BINDING.format(target.name, existing.name, patch.name),
                    model_name=target.name,
                    target_name=patch.name,
                )
            bound[target.name] = patch

        # @@ STEP 3: Bind implicit patch models
        # || S.3.1: A base model named <Base>Patch is the patch of an updatable <Base>
        implicit: Dict[str, Model] = {}
        for base in base_models:
            if not base.updatable or base.patch is not None or base.name in bound:
                continue
            candidate = by_name.get(base.name + NamingConstants.PATCH_SUFFIX)
            if candidate is not None:
                implicit[base.name] = candidate
        # || S.3.2: A candidate resolving a patch of its own cannot be one
        for base_name, candidate in implicit.items():
            if candidate.name in implicit or candidate.name in bound or candidate.patch is not None:
                raise DuplicatePatchBinding(
                    ErrorMessages.IMPLICIT_PATCH_CONFLICT.format(base_name, candidate.name, candidate.name),
                    model_name=base_name,
                    target_name=candidate.name,
                )
        consumed = {id(candidate) for candidate in implicit.values()}

        # @@ STEP 4: Synthesize (or demand) patches for the remaining updatable bases
        assignments: List[Tuple[Model, Model]] = []
        for base in base_models:
            if base.patch is not None or id(base) in consumed:
                continue
            patch = bound.get(base.name) or implicit.get(base.name)
            if patch is None:
                if not base.updatable:
                    continue
                patch_name = base.name + NamingConstants.PATCH_SUFFIX
                if not self.settings.allow_patch_synthesis:
                    raise MissingPatchType(
                        ErrorMessages.MISSING_PATCH_TYPE.format(patch_name, base.name),
                        model_name=base.name,
                        target_name=patch_name,
                    )
                patch = self.new_patch_type_of(base, patch_name)
            assignments.append((base, patch))

        # @@ STEP 5: Every check passed, apply
        for base, patch in assignments:
            base.patch = patch
            if patch.generated:
                logger.info(f"Synthesized patch type {patch.name} for model {base.name}")
            elif not patch.patch_binding:
                patch.patch_binding = base.name
                logger.debug(f"Implicitly bound patch type {patch.name} to model {base.name}")
            else:
                logger.debug(f"Bound patch type {patch.name} to model {base.name}")

        return [m for m in base_models if id(m) not in consumed]

    def new_patch_type_of(self, base: Model, name: str) -> Model:
        """
        Synthesize the patch model of ``base``.

        Each patchable field of the base is mirrored with its type wrapped into
        the configured optional representation.
        """
        patch = Model(
            name=name,
            plural_name=name + NamingConstants.PLURAL_SUFFIX,
            table_name=base.table_name,
            patch_binding=base.name,
            generated=True,
        )
        for field in base.patch_source_fields:
            patch.declared_fields.append(
                Field(
                    name=field.name,
                    column=field.column,
                    declared_type=self.settings.optional_type(field.declared_type),
                )
            )
        return patch


__all__ = ["PatchResolver"]
