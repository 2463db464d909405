"""
Send a single Twilio notification from the command line.

    python -m notification_channels.cli sms +15551234567 "Hello"
    python -m notification_channels.cli call +15551234567 https://example.com/twiml.xml
"""

import argparse
import sys

from twilio.base.exceptions import TwilioException

from notification_channels.core.di.container import container
from notification_channels.modules.channels.twilio.exceptions import CouldNotSendNotification
from notification_channels.modules.channels.twilio.models.messages import (
    TwilioCallMessage,
    TwilioMmsMessage,
    TwilioNotifyMessage,
    TwilioSmsMessage,
)

MESSAGE_TYPES = {
    "sms": TwilioSmsMessage,
    "mms": TwilioMmsMessage,
    "call": TwilioCallMessage,
    "notify": TwilioNotifyMessage,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a notification through Twilio")
    parser.add_argument("type", choices=sorted(MESSAGE_TYPES), help="Message type")
    parser.add_argument("to", help="Recipient phone number")
    parser.add_argument("content", help="Message body, or TwiML URL for calls")
    parser.add_argument("--from", dest="from_number", help="Sender number (overrides TWILIO_FROM_NUMBER)")
    parser.add_argument("--service-sid", help="Notify service SID (overrides TWILIO_SERVICE_SID)")
    parser.add_argument("--media-url", action="append", help="Media URL for MMS (repeatable)")
    parser.add_argument(
        "--alphanumeric",
        action="store_true",
        help="Send SMS from the configured alphanumeric sender",
    )
    return parser


def build_message(args: argparse.Namespace):
    message = MESSAGE_TYPES[args.type].create(args.content)

    if args.from_number:
        message = message.with_from(args.from_number)
    if args.service_sid and isinstance(message, TwilioNotifyMessage):
        message = message.with_service_sid(args.service_sid)
    if args.media_url and isinstance(message, TwilioMmsMessage):
        message = message.with_media_url(args.media_url)

    return message


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        twilio_service = container.twilio.twilio_service()
        result = twilio_service.send_message(build_message(args), args.to, args.alphanumeric)
    except (CouldNotSendNotification, TwilioException) as e:
        print(e, file=sys.stderr)
        return 1

    print(f"Sent via Twilio. SID: {getattr(result, 'sid', result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
