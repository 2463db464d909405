"""
Configuration module for the notification channels.
Handles environment variables and application settings.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TwilioSettings(BaseSettings):
    """Twilio credentials and channel-wide defaults."""

    account_sid: str | None = Field(default=None, description="Twilio Account SID")
    auth_token: str | None = Field(default=None, description="Twilio Auth Token")
    from_number: str | None = Field(
        default=None,
        description="Default sender phone number",
        validation_alias=AliasChoices("TWILIO_FROM_NUMBER", "TWILIO_FROM", "from_number"),
    )
    alphanumeric_sender: str | None = Field(
        default=None,
        description="Alphanumeric sender name (SMS only, used when the notifiable opts in)",
    )
    sms_service_sid: str | None = Field(
        default=None, description="Messaging Service SID attached to outgoing SMS"
    )
    service_sid: str | None = Field(
        default=None, description="Notify Service SID used for notify messages"
    )

    model_config = SettingsConfigDict(
        env_prefix="TWILIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore"
    )


class APISettings(BaseSettings):
    """Runtime environment settings."""

    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(
        default="development",
        description="Environment (development, staging, production)",
    )

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class Settings(BaseSettings):
    """Main application settings."""

    twilio: TwilioSettings = Field(default_factory=TwilioSettings)
    api: APISettings = Field(default_factory=APISettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# Global settings instance
settings = Settings()
