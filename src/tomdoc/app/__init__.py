from .core import TomdocApp

__all__ = ["TomdocApp"]
