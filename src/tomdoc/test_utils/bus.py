from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Union

import tomdoc.common
from tomdoc.common.messaging.protocols import Renderer
from tomdoc.needle import SemanticPointer


class SpyRenderer(Renderer):
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        pass

    def record(self, level: str, msg_id: SemanticPointer, params: Dict[str, Any]):
        self.messages.append({"level": level, "id": str(msg_id), "params": params})


class SpyBus:
    """
    Captures the message ids sent through the global `tomdoc.common.bus`.

    The singleton is patched in place, so modules that already imported it
    via `from tomdoc.common import bus` are covered too.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        real_bus = tomdoc.common.bus

        def intercept_render(
            level: str, msg_id: Union[str, SemanticPointer], **kwargs: Any
        ) -> None:
            if isinstance(msg_id, SemanticPointer):
                self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)
        # The CLI installs its own renderer on startup; keep the spy in place.
        monkeypatch.setattr(real_bus, "set_renderer", lambda renderer: None)

        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def assert_id_called(self, msg_id: SemanticPointer, level: Optional[str] = None):
        key = str(msg_id)
        captured = self.get_messages()

        for msg in captured:
            if msg["id"] == key and (level is None or msg["level"] == level):
                return

        ids_seen = [m["id"] for m in captured]
        raise AssertionError(
            f"Message with ID '{key}' was not sent.\nCaptured IDs: {ids_seen}"
        )
