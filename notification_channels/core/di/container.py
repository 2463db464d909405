"""
Dependency Injection Container.
"""

from dependency_injector import containers, providers

from notification_channels.core.di.modules.core import CoreContainer
from notification_channels.core.di.modules.twilio import TwilioContainer


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Composes the module containers; the Twilio container receives the
    core providers (settings, event dispatcher) it depends on.
    """

    core = providers.Container(CoreContainer)

    twilio = providers.Container(TwilioContainer, core=core)


container = Container()
