from .config import TwilioConfig
from .events import NotificationFailed
from .messages import (
    TwilioCallMessage,
    TwilioMessage,
    TwilioMessageVariant,
    TwilioMmsMessage,
    TwilioNotifyMessage,
    TwilioSmsMessage,
)
from .notification import Notifiable, Notification

__all__ = [
    "TwilioConfig",
    "NotificationFailed",
    "TwilioMessage",
    "TwilioSmsMessage",
    "TwilioMmsMessage",
    "TwilioNotifyMessage",
    "TwilioCallMessage",
    "TwilioMessageVariant",
    "Notifiable",
    "Notification",
]
