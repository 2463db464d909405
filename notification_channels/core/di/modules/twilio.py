from dependency_injector import containers, providers
from twilio.rest import Client as TwilioClient

from notification_channels.modules.channels.twilio.models.config import TwilioConfig
from notification_channels.modules.channels.twilio.services.twilio_channel import TwilioChannel
from notification_channels.modules.channels.twilio.services.twilio_service import TwilioService


class TwilioContainer(containers.DeclarativeContainer):
    """
    Twilio Module Container.
    """

    core = providers.DependenciesContainer()

    # Configuration
    twilio_config = providers.Singleton(
        lambda settings: TwilioConfig.from_settings(settings.twilio), core.settings
    )

    # Client
    twilio_client = providers.Singleton(
        lambda settings: TwilioClient(settings.twilio.account_sid, settings.twilio.auth_token),
        core.settings,
    )

    # Services
    twilio_service = providers.Factory(
        TwilioService, twilio_client=twilio_client, config=twilio_config
    )

    twilio_channel = providers.Factory(
        TwilioChannel, twilio=twilio_service, events=core.event_dispatcher
    )
