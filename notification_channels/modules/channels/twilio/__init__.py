"""Twilio notification channel: SMS, MMS, voice calls and Notify."""

from .exceptions import (
    CouldNotSendNotification,
    InvalidMessageVariant,
    InvalidReceiver,
    MissingSenderAddress,
    MissingServiceId,
)
from .models import (
    NotificationFailed,
    TwilioCallMessage,
    TwilioConfig,
    TwilioMessage,
    TwilioMmsMessage,
    TwilioNotifyMessage,
    TwilioSmsMessage,
)
from .services import TwilioChannel, TwilioService

__all__ = [
    "CouldNotSendNotification",
    "InvalidMessageVariant",
    "InvalidReceiver",
    "MissingSenderAddress",
    "MissingServiceId",
    "NotificationFailed",
    "TwilioCallMessage",
    "TwilioConfig",
    "TwilioMessage",
    "TwilioMmsMessage",
    "TwilioNotifyMessage",
    "TwilioSmsMessage",
    "TwilioChannel",
    "TwilioService",
]
