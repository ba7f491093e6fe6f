from .pointer import L, SemanticPointer
from .runtime import needle, Needle
from .loader import Loader
from .handlers import FileHandler, JsonHandler, YamlHandler

__all__ = [
    "L",
    "SemanticPointer",
    "needle",
    "Needle",
    "Loader",
    "FileHandler",
    "JsonHandler",
    "YamlHandler",
]
