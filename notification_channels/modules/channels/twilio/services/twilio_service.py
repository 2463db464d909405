"""
Twilio service for sending notification messages.
"""

from typing import Any, Dict, Optional

from twilio.rest import Client as TwilioClient

from notification_channels.core.utils import get_logger
from notification_channels.modules.channels.twilio.exceptions import (
    InvalidMessageVariant,
    MissingSenderAddress,
    MissingServiceId,
)
from notification_channels.modules.channels.twilio.models.config import TwilioConfig
from notification_channels.modules.channels.twilio.models.messages import (
    TwilioCallMessage,
    TwilioMessage,
    TwilioMmsMessage,
    TwilioNotifyMessage,
    TwilioSmsMessage,
)
from notification_channels.modules.channels.twilio.utils.helpers import (
    build_sms_binding,
    fill_optional_params,
)

logger = get_logger(__name__)

SMS_OPTIONAL_PARAMS = (
    "status_callback",
    "status_callback_method",
    "application_sid",
    "max_price",
    "provide_feedback",
    "validity_period",
)

MMS_OPTIONAL_PARAMS = ("media_url",)

CALL_OPTIONAL_PARAMS = (
    "status_callback",
    "status_callback_method",
    "method",
    "status",
    "fallback_url",
    "fallback_method",
)

# Accepted on the message but not a `calls.create` keyword of the Twilio client
CALL_CREATE_UNSUPPORTED = ("status",)


class TwilioService:
    """
    Service for Twilio notifications.
    Picks the Twilio API for a message and builds its request parameters.
    """

    def __init__(self, twilio_client: TwilioClient, config: TwilioConfig):
        """
        Initialize Twilio service.

        Args:
            twilio_client: Twilio REST client
            config: Channel configuration
        """
        self.twilio_client = twilio_client
        self.config = config

    def send_message(
        self, message: TwilioMessage, to: str, use_alphanumeric_sender: bool = False
    ) -> Any:
        """
        Send a message to a phone number.

        Args:
            message: SMS, MMS, Notify or Call message
            to: Recipient phone number
            use_alphanumeric_sender: Send SMS from the configured alphanumeric sender

        Returns:
            The Twilio resource instance created by the request

        Raises:
            InvalidMessageVariant: message is not a known Twilio message
            MissingSenderAddress: SMS or call without a `from` number
            MissingServiceId: Notify message without a service SID
        """
        match message:
            case TwilioSmsMessage():
                if use_alphanumeric_sender:
                    sender = self._get_alphanumeric_sender()
                    if sender:
                        message = message.with_from(sender)
                return self._send_sms_message(message, to)
            case TwilioNotifyMessage():
                return self._notify_message(message, to)
            case TwilioCallMessage():
                return self._make_call(message, to)
            case _:
                logger.warning(
                    "Rejected message of unknown type", message_type=type(message).__name__
                )
                raise InvalidMessageVariant(message)

    def _send_sms_message(self, message: TwilioSmsMessage, to: str) -> Any:
        params: Dict[str, Any] = {
            "from_": self._get_from(message),
            "body": message.content.strip(),
        }

        service_sid = self.config.get_sms_service_sid()
        if service_sid:
            params["messaging_service_sid"] = service_sid

        fill_optional_params(params, message, SMS_OPTIONAL_PARAMS)

        if isinstance(message, TwilioMmsMessage):
            fill_optional_params(params, message, MMS_OPTIONAL_PARAMS)

        logger.info(
            "Sending SMS via Twilio",
            to=to,
            from_=params["from_"],
            message_type=type(message).__name__,
            params=sorted(params),
        )
        return self.twilio_client.messages.create(to=to, **params)

    def _notify_message(self, message: TwilioNotifyMessage, to: str) -> Any:
        params = {
            "to_binding": build_sms_binding(to),
            "body": message.content.strip(),
        }

        service_sid = self._get_service_sid(message)

        logger.info("Sending notify message via Twilio", to=to, service_sid=service_sid)
        return self.twilio_client.notify.services(service_sid).notifications.create(
            **params
        )

    def _make_call(self, message: TwilioCallMessage, to: str) -> Any:
        params: Dict[str, Any] = {
            "url": message.content.strip(),
        }

        fill_optional_params(params, message, CALL_OPTIONAL_PARAMS)

        from_number = self._get_from(message)

        logger.info(
            "Creating call via Twilio", to=to, from_=from_number, params=sorted(params)
        )

        create_params = dict(params)
        for name in CALL_CREATE_UNSUPPORTED:
            if name in create_params:
                logger.warning(
                    "Dropping call parameter not accepted on create",
                    param=name,
                    value=create_params.pop(name),
                )

        return self.twilio_client.calls.create(to, from_number, **create_params)

    def _get_from(self, message: TwilioMessage) -> str:
        """
        Get the sender from the message, falling back to the config.

        Raises:
            MissingSenderAddress: neither defines one
        """
        from_number = message.get_from() or self.config.get_from()
        if not from_number:
            logger.warning("Missing sender address", message_type=type(message).__name__)
            raise MissingSenderAddress()
        return from_number

    def _get_alphanumeric_sender(self) -> Optional[str]:
        return self.config.get_alphanumeric_sender()

    def _get_service_sid(self, message: TwilioMessage) -> str:
        """
        Get the Notify service SID from the message, falling back to the config.

        Raises:
            MissingServiceId: neither defines one
        """
        service_sid = message.get_service_sid() or self.config.get_service_sid()
        if not service_sid:
            logger.warning("Missing notify service SID", message_type=type(message).__name__)
            raise MissingServiceId()
        return service_sid
