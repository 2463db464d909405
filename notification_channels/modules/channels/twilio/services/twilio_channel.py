"""
Twilio notification channel.
"""

from typing import Any, Optional

from notification_channels.core.events import EventDispatcher
from notification_channels.core.utils import get_logger
from notification_channels.modules.channels.twilio.exceptions import InvalidReceiver
from notification_channels.modules.channels.twilio.models.events import NotificationFailed
from notification_channels.modules.channels.twilio.models.messages import TwilioSmsMessage
from notification_channels.modules.channels.twilio.models.notification import (
    Notifiable,
    Notification,
)
from notification_channels.modules.channels.twilio.services.twilio_service import TwilioService

logger = get_logger(__name__)


class TwilioChannel:
    """
    Sends a host notification to a notifiable through Twilio.
    Failures are reported as `NotificationFailed` events and re-raised.
    """

    name = "twilio"

    def __init__(self, twilio: TwilioService, events: EventDispatcher):
        self.twilio = twilio
        self.events = events

    def send(self, notifiable: Notifiable, notification: Notification) -> Any:
        """
        Send the given notification.

        Args:
            notifiable: Recipient of the notification
            notification: Notification providing `to_twilio()`

        Returns:
            The Twilio resource instance created by the request
        """
        try:
            to = self._get_to(notifiable)

            message = notification.to_twilio(notifiable)
            if isinstance(message, str):
                message = TwilioSmsMessage.create(message)

            use_sender = self._can_receive_alphanumeric_sender(notifiable)

            return self.twilio.send_message(message, to, use_sender)
        except Exception as exc:
            logger.error(
                "Twilio notification failed",
                notification=type(notification).__name__,
                error=str(exc),
            )
            self.events.dispatch(
                NotificationFailed(
                    notifiable=notifiable,
                    notification=notification,
                    channel=self.name,
                    data={"message": str(exc), "exception": exc},
                )
            )
            raise

    def _get_to(self, notifiable: Any) -> str:
        """
        Get the recipient number from the notifiable.

        Raises:
            InvalidReceiver: the notifiable has no phone number
        """
        to: Optional[str] = None

        route = getattr(notifiable, "route_notification_for", None)
        if callable(route):
            to = route(self.name)

        if not to:
            to = getattr(notifiable, "phone_number", None)

        if not to:
            raise InvalidReceiver()
        return to

    @staticmethod
    def _can_receive_alphanumeric_sender(notifiable: Any) -> bool:
        check = getattr(notifiable, "can_receive_alphanumeric_sender", None)
        return bool(callable(check) and check())
