import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, TextIO

from tomdoc.common import bus
from tomdoc.config import TomdocConfig
from tomdoc.needle import L
from tomdoc.render import get_renderer
from tomdoc.scanner import iter_doc_entries
from tomdoc.spec import DocRendererProtocol, RenderedEntry

log = logging.getLogger(__name__)

STDIN_MARKER = "-"


class TomdocApp:
    """
    Wires the scanner and a renderer together for one configuration.

    Every call is independent: no state survives between `render_*` calls.
    """

    def __init__(
        self,
        config: Optional[TomdocConfig] = None,
        renderer: Optional[DocRendererProtocol] = None,
        stdin: Optional[TextIO] = None,
    ):
        self.config = config or TomdocConfig()
        self.renderer = renderer or get_renderer(
            self.config.format, self.config.comment_marker
        )
        self._stdin = stdin
        self.failed_sources: List[str] = []

    def iter_entries(self, lines: Iterable[str]) -> Iterator[RenderedEntry]:
        for entry in iter_doc_entries(
            lines,
            access=self.config.access,
            marker=self.config.comment_marker,
            skip_prefixes=self.config.skip_prefixes,
        ):
            yield RenderedEntry(
                name=entry.name, text=self.renderer.render(entry.name, entry.block)
            )

    def render_lines(self, lines: Iterable[str]) -> List[RenderedEntry]:
        return list(self.iter_entries(lines))

    def render_source(self, source: str) -> str:
        return "".join(entry.text for entry in self.iter_entries(source.splitlines()))

    def _iter_stdin(self) -> Iterator[str]:
        if self._stdin is not None:
            yield from self._stdin
            return

        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield from sys.stdin
            return
        for raw in buffer:
            yield raw.decode("utf-8", errors="replace")

    def _read_lines(self, source: str) -> Iterator[str]:
        if source == STDIN_MARKER:
            count = 0
            for line in self._iter_stdin():
                count += 1
                yield line
            log.debug("Read %d lines from standard input", count)
            return

        path = Path(source)
        try:
            # Undecodable bytes are replaced rather than failing the file.
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            bus.error(L.cli.error.read_failed, path=source, error=e)
            self.failed_sources.append(source)
            return
        log.debug("Read %s", path)
        yield from text.splitlines()

    def iter_source_lines(self, sources: Sequence[str]) -> Iterator[str]:
        # Sources form a single stream, so a doc block may end one file and
        # attach to a declaration at the top of the next.
        for source in sources or [STDIN_MARKER]:
            yield from self._read_lines(source)

    def run(self, sources: Sequence[str], write: Callable[[str], None]) -> bool:
        """
        Renders every documented declaration found in `sources` and hands the
        output to `write` in input order.

        Returns False if any source could not be read.
        """
        self.failed_sources = []
        bus.debug(
            L.app.debug.config,
            format=self.config.format.value,
            access=self.config.access or "",
        )

        count = 0
        for entry in self.iter_entries(self.iter_source_lines(sources)):
            write(entry.text)
            count += 1

        bus.debug(
            L.app.debug.source_done,
            source=", ".join(sources) or STDIN_MARKER,
            count=count,
        )
        return not self.failed_sources
