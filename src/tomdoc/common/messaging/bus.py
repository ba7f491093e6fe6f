from typing import Any, Optional, Union

from tomdoc.needle import Needle, SemanticPointer, needle as default_needle
from .protocols import MessageLevel, Renderer


class MessageBus:
    def __init__(self, catalog: Optional[Needle] = None):
        self._renderer: Optional[Renderer] = None
        self._catalog = catalog or default_needle

    def set_renderer(self, renderer: Optional[Renderer]) -> None:
        self._renderer = renderer

    def _render(
        self, level: MessageLevel, msg_id: Union[str, SemanticPointer], **kwargs: Any
    ) -> None:
        if not self._renderer:
            return

        template = self._catalog.get(msg_id)
        try:
            message = template.format(**kwargs)
        except (KeyError, IndexError):
            message = f"<formatting_error for '{str(msg_id)}'>"

        self._renderer.render(message, level)

    def debug(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)


# Global singleton instance
bus = MessageBus()
