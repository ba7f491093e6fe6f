from typing import Literal, Protocol

MessageLevel = Literal["debug", "info", "success", "warning", "error"]


class Renderer(Protocol):
    """
    Sink for messages the bus has already resolved and formatted.

    Filtering by level (e.g. hiding "debug" unless verbose) is up to the
    renderer; the bus forwards everything it is given.
    """

    def render(self, message: str, level: MessageLevel) -> None: ...
