import re
from functools import lru_cache
from re import Pattern


@lru_cache(maxsize=None)
def _marker_pattern(marker: str) -> Pattern[str]:
    return re.compile(rf"^\s*{re.escape(marker)}\s?")


def uncomment(text: str, marker: str = "#") -> str:
    """
    Strips leading whitespace, the comment marker and at most one following
    whitespace character from every line of `text`.
    """
    pattern = _marker_pattern(marker)
    return "\n".join(pattern.sub("", line, count=1) for line in text.split("\n"))
