"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        success_status_code: ``code`` reported by value-mode success
            envelopes, i.e. the status a fresh response would carry.
        format_parameterized_messages: Render ``%s`` templates server-side.
            When False, parameterized messages are sent as
            ``[template, *args]`` for client-side localization.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "api-respond"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    success_status_code: int = 200
    format_parameterized_messages: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
