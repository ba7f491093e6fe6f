from typing import Optional

from tomdoc.spec import DocBlock


def filter_access(
    block: DocBlock, level: Optional[str], marker: str = "#"
) -> Optional[DocBlock]:
    """
    Keeps a doc block only if its first line is tagged with the requested
    access level (e.g. "# Public: Does a thing.").

    Without a requested level every block passes. The tag line itself stays
    part of the block.
    """
    if not level:
        return block

    first = block.first_line
    if first is not None and first.startswith(f"{marker} {level}:"):
        return block
    return None
