from __future__ import annotations

from typing import Optional, Protocol

from .model import PolicySettings


class PolicySettingsRepository(Protocol):
    def get(self) -> Optional[PolicySettings]:
        """Return the stored policy, or None when the table has no row yet."""

        raise NotImplementedError

    def upsert(self, settings: PolicySettings) -> None:
        """Administrative path only; calculations never write settings."""

        raise NotImplementedError
