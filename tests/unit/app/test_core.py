import io
from textwrap import dedent

from tomdoc.app import TomdocApp
from tomdoc.config import TomdocConfig
from tomdoc.needle import L
from tomdoc.spec import OutputFormat
from tomdoc.test_utils import SpyBus

SCRIPT = dedent(
    """\
    #!/bin/bash

    # Public: Say hello.
    #
    # $1 - Name to greet.
    greet() {
        echo "Hello $1"
    }

    # Internal: Default greeting.
    : ${GREETING:=hello}

    # Orphaned comment at the end.
    """
)


def test_render_source_text():
    output = TomdocApp().render_source(SCRIPT)

    rule = "-" * 80
    assert output == (
        f"{rule}\ngreet()\n\nPublic: Say hello.\n\n$1 - Name to greet.\n\n"
        f"{rule}\nGREETING\n\nInternal: Default greeting.\n\n"
    )


def test_render_lines_with_access_and_markdown():
    app = TomdocApp(TomdocConfig(format=OutputFormat.MARKDOWN, access="Public"))

    entries = app.render_lines(SCRIPT.splitlines())

    assert [e.name for e in entries] == ["greet()"]
    assert entries[0].text == (
        "`greet()`\n"
        "---------\n"
        "\n"
        "Public: Say hello.\n"
        "\n"
        "* $1 - Name to greet.\n"
        "\n"
    )


def test_app_calls_are_independent():
    app = TomdocApp()

    # A dangling block in one call must not leak into the next.
    assert app.render_source("# Dangling doc.") == ""
    assert app.render_source("foo() {") == ""


def test_run_reads_files_as_one_stream(tmp_path):
    first = tmp_path / "a.sh"
    second = tmp_path / "b.sh"
    first.write_text("# Documents foo.\nfoo() {\n}\n# Spans files.\n")
    second.write_text("BAR=1\n")

    chunks = []
    ok = TomdocApp().run([str(first), str(second)], write=chunks.append)

    assert ok is True
    assert [chunk.split("\n")[1] for chunk in chunks] == ["foo()", "BAR"]


def test_run_reads_stdin_when_no_sources():
    stdin = io.StringIO("# Doc.\nFOO=1\n")
    chunks = []

    ok = TomdocApp(stdin=stdin).run([], write=chunks.append)

    assert ok is True
    assert len(chunks) == 1
    assert "\nFOO\n" in chunks[0]


def test_run_reports_unreadable_files(tmp_path, monkeypatch):
    good = tmp_path / "good.sh"
    good.write_text("# Doc.\nFOO=1\n")
    missing = tmp_path / "missing.sh"
    spy_bus = SpyBus()
    chunks = []

    with spy_bus.patch(monkeypatch):
        app = TomdocApp()
        ok = app.run([str(missing), str(good)], write=chunks.append)

    assert ok is False
    assert app.failed_sources == [str(missing)]
    assert len(chunks) == 1
    spy_bus.assert_id_called(L.cli.error.read_failed, level="error")


def test_run_replaces_undecodable_bytes(tmp_path, monkeypatch):
    script = tmp_path / "latin1.sh"
    script.write_bytes(b"# Written by Ant\xf3nio.\nfoo() {\n}\n")
    spy_bus = SpyBus()
    chunks = []

    with spy_bus.patch(monkeypatch):
        ok = TomdocApp().run([str(script)], write=chunks.append)

    assert ok is True
    assert len(chunks) == 1
    assert "\nfoo()\n\nWritten by Ant\ufffdnio.\n" in chunks[0]
    assert [m for m in spy_bus.get_messages() if m["level"] == "error"] == []
