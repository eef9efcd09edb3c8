from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.autofix_settings import AutoFixSettings
from core.settings.modules.mock_settings import MockCollaboratorSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    autofix: AutoFixSettings
    mocks: MockCollaboratorSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        autofix=AutoFixSettings(),
        mocks=MockCollaboratorSettings(),
    )
