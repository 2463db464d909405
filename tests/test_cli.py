from unittest.mock import Mock, patch

from twilio.base.exceptions import TwilioException

from notification_channels import cli
from notification_channels.modules.channels.twilio.exceptions import MissingSenderAddress
from notification_channels.modules.channels.twilio.models.messages import (
    TwilioCallMessage,
    TwilioMmsMessage,
    TwilioNotifyMessage,
)


def parse(*argv):
    return cli.build_parser().parse_args(list(argv))


def test_build_mms_message():
    args = parse("mms", "+22222222222", "Look", "--media-url", "https://img/1.png", "--from", "+1555")

    message = cli.build_message(args)

    assert isinstance(message, TwilioMmsMessage)
    assert message.media_url == ["https://img/1.png"]
    assert message.get_from() == "+1555"


def test_build_notify_message_with_service_sid():
    message = cli.build_message(parse("notify", "+22222222222", "Hi", "--service-sid", "IS1"))

    assert isinstance(message, TwilioNotifyMessage)
    assert message.get_service_sid() == "IS1"


def test_service_sid_ignored_for_calls():
    message = cli.build_message(parse("call", "+22222222222", "http://example.com", "--service-sid", "IS1"))

    assert isinstance(message, TwilioCallMessage)
    assert message.content == "http://example.com"


def test_main_sends_and_prints_sid(capsys):
    service = Mock()
    service.send_message.return_value = Mock(sid="SM123")

    with patch.object(cli, "container") as mock_container:
        mock_container.twilio.twilio_service.return_value = service
        code = cli.main(["sms", "+22222222222", "Hi", "--alphanumeric"])

    assert code == 0
    message, to, use_sender = service.send_message.call_args.args
    assert message.content == "Hi"
    assert to == "+22222222222"
    assert use_sender is True
    assert "SM123" in capsys.readouterr().out


def test_main_reports_local_errors(capsys):
    service = Mock()
    service.send_message.side_effect = MissingSenderAddress()

    with patch.object(cli, "container") as mock_container:
        mock_container.twilio.twilio_service.return_value = service
        code = cli.main(["call", "+22222222222", "http://example.com"])

    assert code == 1
    assert capsys.readouterr().err == "Notification was not sent. Missing `from` number.\n"


def test_main_reports_missing_credentials(capsys):
    with patch.object(cli, "container") as mock_container:
        mock_container.twilio.twilio_service.side_effect = TwilioException(
            "Credentials are required to create a TwilioClient"
        )
        code = cli.main(["sms", "+22222222222", "Hi"])

    assert code == 1
    assert "Credentials are required" in capsys.readouterr().err
