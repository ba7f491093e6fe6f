from typing import List, Tuple

import pytest

import tomdoc.common
from tomdoc.common import MessageBus
from tomdoc.needle import L, Needle
from tomdoc.test_utils import SpyBus


class ListRenderer:
    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def render(self, message: str, level: str) -> None:
        self.messages.append((level, message))


@pytest.fixture
def catalog(tmp_path):
    (tmp_path / "needle" / "en").mkdir(parents=True)
    (tmp_path / "needle" / "en" / "m.json").write_text(
        '{"greeting": "Hello {name}"}'
    )
    return Needle(roots=[tmp_path])


def test_bus_formats_and_forwards(catalog):
    renderer = ListRenderer()
    bus = MessageBus(catalog)
    bus.set_renderer(renderer)

    bus.info(L.greeting, name="World")
    bus.error("greeting", name="tomdoc")

    assert renderer.messages == [
        ("info", "Hello World"),
        ("error", "Hello tomdoc"),
    ]


def test_bus_reports_formatting_errors(catalog):
    renderer = ListRenderer()
    bus = MessageBus(catalog)
    bus.set_renderer(renderer)

    bus.warning(L.greeting)

    assert renderer.messages == [("warning", "<formatting_error for 'greeting'>")]


def test_bus_without_renderer_is_silent(catalog):
    MessageBus(catalog).info(L.greeting, name="nobody")


def test_spy_bus_captures_ids(monkeypatch):
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        tomdoc.common.bus.info(L.cli.usage)
        tomdoc.common.bus.error(L.cli.error.read_failed, path="x", error="boom")

    assert spy_bus.get_messages()[1] == {
        "level": "error",
        "id": "cli.error.read_failed",
        "params": {"path": "x", "error": "boom"},
    }
    spy_bus.assert_id_called(L.cli.usage, level="info")
    with pytest.raises(AssertionError):
        spy_bus.assert_id_called(L.cli.version)
