from .twilio_channel import TwilioChannel
from .twilio_service import TwilioService

__all__ = ["TwilioChannel", "TwilioService"]
