from .settings_schemas import AppSettingsResponse

__all__ = ["AppSettingsResponse"]
