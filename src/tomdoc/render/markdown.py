import re
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from tomdoc.spec import DocBlock
from .uncomment import uncomment

# "ARG - description", optionally indented for a nested option.
OPTION_RE = re.compile(r"^\s*\S+\s+-\s+")


@dataclass(frozen=True)
class MarkdownState:
    # Whether the output so far ends with a newline. The heading does.
    did_newline: bool = True
    last_was_option: bool = False
    previous_line: str = ""


def step(state: MarkdownState, line: str) -> Tuple[MarkdownState, str]:
    """
    Renders one uncommented, right-stripped doc line.

    Returns the state to use for the next line and the markdown fragment to
    append to the output.
    """
    if OPTION_RE.match(line):
        prefix = "" if state.did_newline else "\n"
        if line[:1].isspace():
            fragment = f"{prefix}    * {line.lstrip()}"
        else:
            fragment = f"{prefix}* {line}"
        new_state = replace(state, did_newline=False, last_was_option=True)

    elif line == "":
        # End of paragraph or section. Runs of blank lines collapse into one.
        if state.did_newline and state.previous_line == "":
            fragment = ""
        else:
            fragment = "\n" if state.did_newline else "\n\n"
        new_state = replace(state, did_newline=True, last_was_option=False)

    elif line.startswith("  "):
        if state.last_was_option:
            # Option continuation, glued onto the bullet above.
            fragment = " " + line.lstrip(" ")
            new_state = replace(state, did_newline=False)
        else:
            # Example code.
            fragment = f"  {line}\n"
            new_state = replace(state, did_newline=True)

    elif line.startswith("* "):
        # A list never continues the previous paragraph.
        prefix = "" if state.did_newline else "\n"
        fragment = f"{prefix}{line}\n"
        new_state = replace(state, did_newline=True)

    else:
        fragment = line if state.previous_line == "" else f"\n{line}"
        new_state = replace(state, did_newline=False, last_was_option=False)

    return replace(new_state, previous_line=line), fragment


def render_body(lines: Iterable[str]) -> str:
    state = MarkdownState()
    fragments = []
    for line in lines:
        state, fragment = step(state, line)
        fragments.append(fragment)

    body = "".join(fragments)
    if not body.endswith("\n"):
        body += "\n"
    return body


def render_heading(name: str) -> str:
    return f"`{name}`\n{'-' * (len(name) + 2)}\n\n"


class MarkdownRenderer:
    def __init__(self, marker: str = "#"):
        self.marker = marker

    def render(self, name: str, block: DocBlock) -> str:
        body = uncomment(block.text, self.marker)
        lines = [line.rstrip() for line in body.split("\n")]
        return render_heading(name) + render_body(lines)


def render_markdown(name: str, block: DocBlock, marker: str = "#") -> str:
    return MarkdownRenderer(marker).render(name, block)
