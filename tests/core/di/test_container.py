from unittest.mock import MagicMock

import pytest

from notification_channels.core.config.settings import Settings, TwilioSettings
from notification_channels.core.di.container import Container
from notification_channels.core.events import InMemoryEventDispatcher
from notification_channels.modules.channels.twilio.models.config import TwilioConfig
from notification_channels.modules.channels.twilio.services.twilio_channel import TwilioChannel
from notification_channels.modules.channels.twilio.services.twilio_service import TwilioService


class TestContainer:
    @pytest.fixture
    def container(self):
        container = Container()
        container.core.settings.override(
            Settings(
                twilio=TwilioSettings(
                    account_sid="ACtest",
                    auth_token="token",
                    from_number="+31612345678",
                    sms_service_sid="MG123",
                )
            )
        )
        # Avoid building a real REST client
        container.twilio.twilio_client.override(MagicMock())
        return container

    def test_config_resolved_from_settings(self, container):
        config = container.twilio.twilio_config()

        assert isinstance(config, TwilioConfig)
        assert config.get_from() == "+31612345678"
        assert config.get_sms_service_sid() == "MG123"

    def test_service_resolution(self, container):
        twilio_service = container.twilio.twilio_service()

        assert isinstance(twilio_service, TwilioService)
        assert twilio_service.config.get_from() == "+31612345678"
        assert twilio_service.twilio_client is container.twilio.twilio_client()

    def test_channel_shares_event_dispatcher(self, container):
        channel = container.twilio.twilio_channel()

        assert isinstance(channel, TwilioChannel)
        assert isinstance(channel.events, InMemoryEventDispatcher)
        assert channel.events is container.core.event_dispatcher()
