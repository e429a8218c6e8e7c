# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Schema registry driving one resolution pass.

The registry resolves in phases:

1. Registration Phase: raw declarations are collected, nothing is interpreted
2. Assembly Phase: every declaration becomes a ``Model`` (fields, directives, defaults)
3. Finalized Phase: patch dependencies are resolved and the base models are frozen in

A failure in any phase aborts the pass: no partial schema is exposed and the
error is kept for inspection.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .constants import ErrorMessages, RegistryResolutionConstants
from .store_declarations import DeclarationTable, RawModel
from .store_errors import SchemaResolutionError
from .store_models import ModelAssembler
from .store_resolver import PatchResolver
from .store_schema import Model
from .store_settings import GeneratorSettings

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """
    Collects raw model declarations and resolves them into a schema.

    :class: SchemaRegistry
    :synopsis: Owner of one generator invocation's model set
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None) -> None:
        self.settings = settings if settings is not None else GeneratorSettings()

        # @@ STEP 1: Declaration storage
        self._declarations = DeclarationTable()
        self._model_declarations: List[RawModel] = []

        # @@ STEP 2: Resolution state tracking
        self._resolution_phase: str = RegistryResolutionConstants.PHASE_REGISTRATION
        self._assembled: List[Model] = []
        self._models: List[Model] = []
        self._resolution_errors: List[str] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, raw: RawModel) -> None:
        """Register a model declaration; it also becomes embeddable by name."""
        self._ensure_registration_open(raw.name)
        self._declarations.add(raw)
        self._model_declarations.append(raw)
        logger.debug(f"Registered model declaration {raw.name}")

    def register_all(self, raws: Iterable[RawModel]) -> None:
        for raw in raws:
            self.register(raw)

    def register_embeddable(self, raw: RawModel) -> None:
        """Register a shape that may only be embedded, never emitted as a model."""
        self._ensure_registration_open(raw.name)
        self._declarations.add(raw)
        logger.debug(f"Registered embeddable declaration {raw.name}")

    def _ensure_registration_open(self, name: str) -> None:
        if self._resolution_phase != RegistryResolutionConstants.PHASE_REGISTRATION:
            raise SchemaResolutionError(ErrorMessages.REGISTRY_FINALIZED.format(name), model_name=name)

    # ------------------------------------------------------------------
    # Resolution phases
    # ------------------------------------------------------------------

    def assemble(self) -> List[Model]:
        """Assemble every registered declaration (idempotent)."""
        if self._resolution_phase != RegistryResolutionConstants.PHASE_REGISTRATION:
            return list(self._assembled)

        assembler = ModelAssembler(self._declarations, self.settings)
        try:
            assembled = assembler.assemble_all(self._model_declarations)
        except SchemaResolutionError as e:
            self._resolution_errors.append(str(e))
            raise

        self._assembled = assembled
        self._resolution_phase = RegistryResolutionConstants.PHASE_ASSEMBLED
        return list(self._assembled)

    def resolve(self) -> List[Model]:
        """
        Resolve patch dependencies and finalize the registry.

        :returns: The resolved base models
        :raises SchemaResolutionError: Any assembly or binding failure
        """
        if self._resolution_phase == RegistryResolutionConstants.PHASE_FINALIZED:
            return list(self._models)

        assembled = self.assemble()
        try:
            models = PatchResolver(self.settings).resolve(assembled)
        except SchemaResolutionError as e:
            self._resolution_errors.append(str(e))
            raise

        self._models = models
        self._resolution_phase = RegistryResolutionConstants.PHASE_FINALIZED
        logger.debug(f"Schema finalized with {len(models)} model(s)")
        return list(self._models)

    def finalize(self) -> bool:
        """
        Resolve without raising.

        Returns:
            bool: True if resolution succeeded, False otherwise (see ``get_resolution_errors``)
        """
        try:
            self.resolve()
        except SchemaResolutionError:
            return False
        return True

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def models(self) -> List[Model]:
        """Resolved base models; empty until the registry is finalized."""
        return list(self._models)

    def get_model_by_name(self, name: str) -> Optional[Model]:
        for model in self._models:
            if model.name == name:
                return model
        return None

    def is_finalized(self) -> bool:
        return self._resolution_phase == RegistryResolutionConstants.PHASE_FINALIZED

    def get_resolution_errors(self) -> List[str]:
        return self._resolution_errors.copy()


def resolve_schema(raws: Iterable[RawModel], settings: Optional[GeneratorSettings] = None) -> List[Model]:
    """Resolve ``raws`` in one call and return the base models."""
    registry = SchemaRegistry(settings)
    registry.register_all(raws)
    return registry.resolve()


__all__ = ["SchemaRegistry", "resolve_schema"]
