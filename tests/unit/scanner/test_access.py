from tomdoc.scanner import filter_access
from tomdoc.spec import DocBlock


def test_no_level_keeps_every_block():
    block = DocBlock(["# Internal: does Y"])

    assert filter_access(block, None) is block
    assert filter_access(block, "") is block


def test_matching_level_keeps_block():
    block = DocBlock(["# Public: does X", "#", "# More."])

    assert filter_access(block, "Public") is block


def test_other_level_drops_block():
    assert filter_access(DocBlock(["# Internal: does Y"]), "Public") is None


def test_only_first_line_is_inspected():
    block = DocBlock(["# Does X.", "# Public: not a tag here"])

    assert filter_access(block, "Public") is None


def test_level_must_be_followed_by_colon():
    assert filter_access(DocBlock(["# Publicly available"]), "Public") is None


def test_custom_marker():
    block = DocBlock(["// Public: does X"])

    assert filter_access(block, "Public", marker="//") is block
    assert filter_access(block, "Public") is None
