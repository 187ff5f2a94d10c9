import pytest


@pytest.mark.parametrize(
    "line,expected",
    [
        ("plain text", -1),
        ("] after", 0),
        ("escaped \\] bracket", -1),
        ("a td[b", 2),
        ("x] e[y", 1),
        ("table[", 0),
        ("the code[x", 4),
        ("see ref:a[b]", 4),
        ("go to link[u][t]", 6),
    ],
)
def test_find_next_reserved_token(line, expected):
    from xdoc2asciidoc.services.scanner import find_next_reserved_token

    assert find_next_reserved_token(line) == expected


def test_move_forward_returns_none_for_blank_remainder():
    from xdoc2asciidoc.services.scanner import move_forward

    assert move_forward("abc", 3) is None
    assert move_forward("ab \t", 2) is None
    assert move_forward("a b", 1) == " b"


def test_move_forward_to_first_non_whitespace():
    from xdoc2asciidoc.services.scanner import move_forward_to_first_non_whitespace

    assert move_forward_to_first_non_whitespace("]\t  next", 1) == "next"
    assert move_forward_to_first_non_whitespace("]", 1) is None


def test_escaping_modes():
    from xdoc2asciidoc.services.escaping import escape_text

    assert escape_text("a \\[b\\] | c") == "a [b] | c"
    assert escape_text("a \\[b\\] | c", in_table_cell=True) == "a [b] \\| c"
    assert escape_text("# not escaped") == "# not escaped"


def test_move_forward_keeps_non_breaking_space():
    from xdoc2asciidoc.services.scanner import move_forward

    assert move_forward("]\u00a0", 1) == "\u00a0"
    assert move_forward("]\x0c ", 1) is None
