"""serde-gettext configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from serde_gettext.configuration.gettext import GettextSettings


class Settings(BaseSettings):
    """serde-gettext configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_JSON: Render logs as JSON instead of the console format

    Example:
        ```python
        from serde_gettext.configuration import settings

        max_depth = settings.gettext.max_depth
        ```
    """

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    gettext: GettextSettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "gettext": GettextSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
