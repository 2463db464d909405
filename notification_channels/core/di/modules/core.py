from dependency_injector import containers, providers

from notification_channels.core.config.settings import settings as app_settings
from notification_channels.core.events import InMemoryEventDispatcher


class CoreContainer(containers.DeclarativeContainer):
    """
    Core Infrastructure Container.
    """

    settings = providers.Object(app_settings)

    # Shared so every channel reports failures to the same listeners
    event_dispatcher = providers.Singleton(InMemoryEventDispatcher)
