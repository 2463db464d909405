from .dispatcher import EventDispatcher, EventHandler, InMemoryEventDispatcher

__all__ = ["EventDispatcher", "EventHandler", "InMemoryEventDispatcher"]
