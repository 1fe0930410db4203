from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .model import PolicySettings
from .repository import PolicySettingsRepository

logger = logging.getLogger(__name__)


class PolicyService:
    def __init__(self, settings_repo: PolicySettingsRepository, *, defaults: Optional[Mapping[str, Any]] = None):
        self._settings = settings_repo
        self._defaults = PolicySettings.from_mapping(defaults or {})

    def get_settings(self) -> PolicySettings:
        settings = self._settings.get()
        if settings is None:
            logger.warning("No vacation settings stored, using defaults %s", self._defaults.to_dict())
            return self._defaults
        return settings

    def update_settings(self, changes: Mapping[str, Any]) -> PolicySettings:
        """Merge ``changes`` over the current policy and store the whole snapshot.

        Validation runs on the merged snapshot, so an invalid field rejects the
        update entirely.
        """
        merged = {**self.get_settings().to_dict(), **dict(changes)}
        settings = PolicySettings.from_mapping(merged)
        self._settings.upsert(settings)
        logger.info("Vacation settings updated: %s", settings.to_dict())
        return settings
