from .bus import MessageBus, bus
from .protocols import MessageLevel, Renderer

__all__ = ["MessageBus", "MessageLevel", "Renderer", "bus"]
