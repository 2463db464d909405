"""
Contracts the host application implements to use the Twilio channel.
"""
from typing import Any, Optional, Protocol, Union, runtime_checkable

from notification_channels.modules.channels.twilio.models.messages import TwilioMessage


@runtime_checkable
class Notifiable(Protocol):
    """
    Anything that can receive a notification.

    The channel also looks for two optional hooks:
    ``route_notification_for(channel) -> str | None`` and
    ``can_receive_alphanumeric_sender() -> bool``.
    """

    phone_number: Optional[str]


@runtime_checkable
class Notification(Protocol):
    """A notification that knows how to render itself as a Twilio message."""

    def to_twilio(self, notifiable: Any) -> Union[TwilioMessage, str]:
        ...
