from .models import (
    Declaration,
    DeclarationKind,
    DocBlock,
    DocEntry,
    OutputFormat,
    RenderedEntry,
)
from .errors import TomdocError, ConfigError
from .protocols import DeclarationClassifierProtocol, DocRendererProtocol

__all__ = [
    "DeclarationClassifierProtocol",
    "DocRendererProtocol",
    "Declaration",
    "DeclarationKind",
    "DocBlock",
    "DocEntry",
    "OutputFormat",
    "RenderedEntry",
    # Errors
    "TomdocError",
    "ConfigError",
]
