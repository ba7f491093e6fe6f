from tomdoc.spec import DocBlock
from .uncomment import uncomment

RULE = "-" * 80


class TextRenderer:
    def __init__(self, marker: str = "#"):
        self.marker = marker

    def render(self, name: str, block: DocBlock) -> str:
        body = uncomment(block.text, self.marker).rstrip("\n")
        return f"{RULE}\n{name}\n\n{body}\n\n"


def render_text(name: str, block: DocBlock, marker: str = "#") -> str:
    return TextRenderer(marker).render(name, block)
