from tomdoc.spec import DocRendererProtocol, OutputFormat
from .markdown import MarkdownRenderer, MarkdownState, render_markdown, step
from .text import TextRenderer, render_text
from .uncomment import uncomment


def get_renderer(fmt: OutputFormat, marker: str = "#") -> DocRendererProtocol:
    if fmt is OutputFormat.MARKDOWN:
        return MarkdownRenderer(marker)
    return TextRenderer(marker)


__all__ = [
    "MarkdownRenderer",
    "MarkdownState",
    "TextRenderer",
    "get_renderer",
    "render_markdown",
    "render_text",
    "step",
    "uncomment",
]
