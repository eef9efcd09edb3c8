# Settings package
from core.settings.modules import (
    AppSettings,
    AutoFixSettings,
    MockCollaboratorSettings,
    get_app_settings,
)

__all__ = ["get_app_settings", "AppSettings", "AutoFixSettings", "MockCollaboratorSettings"]
