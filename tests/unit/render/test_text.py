from tomdoc.render import TextRenderer, render_text, uncomment
from tomdoc.spec import DocBlock

RULE = "-" * 80


def test_uncomment_strips_marker_and_one_space():
    assert uncomment("# Foo") == "Foo"
    assert uncomment("#   indented") == "  indented"
    assert uncomment("#") == ""
    assert uncomment("   # leading") == "leading"
    assert uncomment("# a\n#\n# b\n") == "a\n\nb\n"


def test_uncomment_custom_marker():
    assert uncomment("// Foo\n//", marker="//") == "Foo\n"


def test_render_text_layout():
    block = DocBlock(["# Public: Foo.", "#", "#   indented"])

    output = render_text("foo()", block)

    assert output == f"{RULE}\nfoo()\n\nPublic: Foo.\n\n  indented\n\n"


def test_render_text_body_is_verbatim():
    body_lines = ["Says hello.", "", "$1 - Name", "  Examples:  weird   spacing"]
    block = DocBlock([f"# {line}" if line else "#" for line in body_lines])

    output = TextRenderer().render("greet()", block)

    header = f"{RULE}\ngreet()\n\n"
    assert output.startswith(header)
    assert output.endswith("\n\n")
    assert output[len(header) : -2] == "\n".join(body_lines)


def test_render_text_is_idempotent():
    block = DocBlock(["# Does X."])

    assert render_text("X", block) == render_text("X", block)
