from notification_channels.core.utils.exceptions import AppError


class CouldNotSendNotification(AppError):
    """Base exception for notifications that were not handed to Twilio."""
    pass


class InvalidMessageVariant(CouldNotSendNotification):
    """Raised when the message is not an SMS, MMS, Notify or Call message."""

    def __init__(self, message: object):
        self.message_type = type(message).__name__
        super().__init__(
            f"Notification was not sent. Message object class `{self.message_type}` is invalid. "
            "It should be either `TwilioSmsMessage`, `TwilioMmsMessage`, "
            "`TwilioNotifyMessage` or `TwilioCallMessage`."
        )


class MissingSenderAddress(CouldNotSendNotification):
    """Raised when neither the message nor the config provide a `from` number."""

    def __init__(self, message: str = "Notification was not sent. Missing `from` number."):
        super().__init__(message)


class MissingServiceId(CouldNotSendNotification):
    """Raised when neither the message nor the config provide a Notify service SID."""

    def __init__(self, message: str = "Notification was not sent. Missing `service_sid`."):
        super().__init__(message)


class InvalidReceiver(CouldNotSendNotification):
    """Raised when the notifiable has no phone number to send to."""

    def __init__(
        self,
        message: str = (
            "The notifiable did not have a receiving phone number. Add a "
            "route_notification_for('twilio') method or a phone_number attribute "
            "to your notifiable."
        ),
    ):
        super().__init__(message)
