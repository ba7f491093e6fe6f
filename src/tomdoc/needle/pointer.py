from typing import Any, Tuple


class SemanticPointer:
    """
    Message id assembled from attribute access.

    `L.cli.error.read_failed` names the catalog key "cli.error.read_failed";
    `L.cli + "usage"` does the same for segments that aren't identifiers.
    """

    __slots__ = ("_segments",)

    def __init__(self, *segments: str):
        object.__setattr__(self, "_segments", tuple(s for s in segments if s))

    def __getattr__(self, name: str) -> "SemanticPointer":
        if name.startswith("__"):
            raise AttributeError(name)
        return SemanticPointer(*self._segments, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SemanticPointer is immutable")

    def __add__(self, segment: str) -> "SemanticPointer":
        return SemanticPointer(*self._segments, *segment.split("."))

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    def __str__(self) -> str:
        return ".".join(self._segments)

    def __repr__(self) -> str:
        return f"L.{self}" if self._segments else "L"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SemanticPointer):
            return self._segments == other._segments
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


L = SemanticPointer()
