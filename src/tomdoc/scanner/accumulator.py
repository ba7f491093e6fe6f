import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence

from tomdoc.spec import DocBlock, DocEntry, DeclarationClassifierProtocol
from .access import filter_access
from .classifier import DeclarationClassifier

log = logging.getLogger(__name__)

DEFAULT_SKIP_PREFIXES = ("# shellcheck",)


class AccumulatorState(str, Enum):
    IDLE = "IDLE"
    COLLECTING = "COLLECTING"


class CommentAccumulator:
    """
    Pairs runs of comment lines with the declaration line that follows them.

    Feed source lines one at a time; every accepted pairing is returned as a
    DocEntry. Any non-comment line (blank or code) is a decision point after
    which the pending block is gone, whether or not it was emitted.
    """

    def __init__(
        self,
        access: Optional[str] = None,
        marker: str = "#",
        skip_prefixes: Sequence[str] = DEFAULT_SKIP_PREFIXES,
        classifier: Optional[DeclarationClassifierProtocol] = None,
    ):
        self.access = access
        self.marker = marker
        self.skip_prefixes = tuple(skip_prefixes)
        self.classifier = classifier or DeclarationClassifier()
        self.state = AccumulatorState.IDLE
        self._block = DocBlock()

    def _is_comment(self, line: str) -> bool:
        return line == self.marker or line.startswith(f"{self.marker} ")

    def _reset(self) -> None:
        self.state = AccumulatorState.IDLE
        self._block = DocBlock()

    def feed(self, raw_line: str) -> Optional[DocEntry]:
        # Lines are trimmed on both ends, the way the shell's `read` does.
        line = raw_line.strip()

        if self.skip_prefixes and line.startswith(self.skip_prefixes):
            return None

        if self._is_comment(line):
            self._block.append(line)
            self.state = AccumulatorState.COLLECTING
            return None

        if self.state is AccumulatorState.IDLE:
            return None

        block = self._block
        self._reset()

        if not line:
            log.debug("Discarding doc block (%d lines): blank line", len(block))
            return None

        if filter_access(block, self.access, self.marker) is None:
            log.debug("Discarding doc block: access level is not '%s'", self.access)
            return None

        declaration = self.classifier.classify(line)
        if declaration is None:
            log.debug("Discarding doc block: no declaration on %r", line)
            return None

        return DocEntry(
            name=declaration.display_name, block=block, kind=declaration.kind
        )

    def finish(self) -> None:
        if self.state is AccumulatorState.COLLECTING:
            log.debug(
                "Discarding doc block (%d lines): end of input", len(self._block)
            )
        self._reset()


def iter_doc_entries(
    lines: Iterable[str],
    access: Optional[str] = None,
    marker: str = "#",
    skip_prefixes: Sequence[str] = DEFAULT_SKIP_PREFIXES,
) -> Iterator[DocEntry]:
    accumulator = CommentAccumulator(
        access=access, marker=marker, skip_prefixes=skip_prefixes
    )
    for line in lines:
        entry = accumulator.feed(line)
        if entry is not None:
            yield entry
    accumulator.finish()


def collect_doc_entries(lines: Iterable[str], **kwargs) -> List[DocEntry]:
    return list(iter_doc_entries(lines, **kwargs))
