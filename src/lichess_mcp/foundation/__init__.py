"""Foundation layer: errors, configuration and credentials."""

from .config import LichessSettings, clear_settings_cache, get_settings
from .credentials import CredentialStore
from .errors import ErrorCode, JsonDict, JsonValue, ToolError, ToolException

__all__ = [
    "LichessSettings", "clear_settings_cache", "get_settings",
    "CredentialStore",
    "ErrorCode", "ToolError", "ToolException", "JsonDict", "JsonValue",
]
