from .messaging import MessageBus, Renderer, bus

__all__ = ["MessageBus", "Renderer", "bus"]
