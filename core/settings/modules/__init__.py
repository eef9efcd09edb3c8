# Settings modules
from .app_settings import AppSettings, get_app_settings
from .autofix_settings import AutoFixSettings
from .mock_settings import MockCollaboratorSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "AutoFixSettings",
    "MockCollaboratorSettings",
]
