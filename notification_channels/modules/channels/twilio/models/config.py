"""
Twilio channel configuration.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from notification_channels.core.config.settings import TwilioSettings


class TwilioConfig(BaseModel):
    """
    Read-only channel settings resolved once, when the service is built.
    Accepts the channel keys ``from``, ``alphanumeric_sender``,
    ``sms_service_sid`` and ``service_sid``.
    """
    from_number: Optional[str] = Field(default=None, alias="from")
    alphanumeric_sender: Optional[str] = None
    sms_service_sid: Optional[str] = None
    service_sid: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_settings(cls, twilio_settings: TwilioSettings) -> "TwilioConfig":
        return cls(
            from_number=twilio_settings.from_number,
            alphanumeric_sender=twilio_settings.alphanumeric_sender,
            sms_service_sid=twilio_settings.sms_service_sid,
            service_sid=twilio_settings.service_sid,
        )

    # Empty strings from env files count as unset
    def get_from(self) -> Optional[str]:
        return self.from_number or None

    def get_alphanumeric_sender(self) -> Optional[str]:
        return self.alphanumeric_sender or None

    def get_sms_service_sid(self) -> Optional[str]:
        return self.sms_service_sid or None

    def get_service_sid(self) -> Optional[str]:
        return self.service_sid or None
