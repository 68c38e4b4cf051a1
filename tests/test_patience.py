from diffpack.core import Delete, Equal, Insert, join_lines, split_lines
from diffpack.diff import diff_lines


def _script(expected: str, actual: str, **kwargs) -> list[tuple[str, str]]:
    ops = diff_lines(split_lines(expected), split_lines(actual), **kwargs)
    rendered: list[tuple[str, str]] = []
    for op in ops:
        if isinstance(op, Equal):
            rendered.append(("=", op.expected.text))
        elif isinstance(op, Delete):
            rendered.append(("-", op.expected.text))
        else:
            rendered.append(("+", op.actual.text))
    return rendered


def _expected_side(expected: str, actual: str) -> str:
    ops = diff_lines(split_lines(expected), split_lines(actual))
    return join_lines([op.expected for op in ops if not isinstance(op, Insert)])


def _actual_side(expected: str, actual: str) -> str:
    ops = diff_lines(split_lines(expected), split_lines(actual))
    return join_lines([op.actual for op in ops if not isinstance(op, Delete)])


def test_changed_last_line_is_delete_then_insert() -> None:
    assert _script("foo\nbar\n", "foo\nfoo\n") == [("=", "foo"), ("-", "bar"), ("+", "foo")]


def test_identical_inputs_are_all_equal() -> None:
    assert _script("foo\nbar\n", "foo\nbar\n") == [("=", "foo"), ("=", "bar")]


def test_empty_inputs_produce_no_operations() -> None:
    assert _script("", "") == []


def test_empty_expected_is_pure_insert() -> None:
    assert _script("", "a\nb\n") == [("+", "a"), ("+", "b")]


def test_empty_actual_is_pure_delete() -> None:
    assert _script("a\nb\n", "") == [("-", "a"), ("-", "b")]


def test_single_replacement_between_context() -> None:
    assert _script("a\nb\nc\n", "a\nx\nc\n") == [
        ("=", "a"),
        ("-", "b"),
        ("+", "x"),
        ("=", "c"),
    ]


def test_moved_block_keeps_longest_anchor_run() -> None:
    assert _script("a\nb\nc\nd\n", "c\nd\na\nb\n") == [
        ("-", "a"),
        ("-", "b"),
        ("=", "c"),
        ("=", "d"),
        ("+", "a"),
        ("+", "b"),
    ]


def test_inserted_function_is_a_pure_insertion() -> None:
    expected = "def one():\n    pass\n}\n\ndef two():\n    pass\n}\n"
    actual = "def one():\n    pass\n}\n\ndef middle():\n    pass\n}\n\ndef two():\n    pass\n}\n"

    script = _script(expected, actual)

    assert [entry for entry in script if entry[0] == "-"] == []
    assert [text for kind, text in script if kind == "+"] == [
        "def middle():",
        "    pass",
        "}",
        "",
    ]


def test_whitespace_is_significant() -> None:
    assert _script("a \n", "a\n") == [("-", "a "), ("+", "a")]
    assert _script("\tx\n", "    x\n") == [("-", "\tx"), ("+", "    x")]


def test_case_is_significant() -> None:
    assert _script("Foo\n", "foo\n") == [("-", "Foo"), ("+", "foo")]


def test_trailing_newline_difference_is_a_line_change() -> None:
    assert _script("a", "a\n") == [("-", "a"), ("+", "a")]


def test_crlf_differences_are_not_changes() -> None:
    assert _script("a\r\nb\r\n", "a\nb\n") == [("=", "a"), ("=", "b")]


def test_repeated_lines_fall_back_to_lcs() -> None:
    script = _script("x\nx\ny\nx\n", "x\ny\nx\nx\n")

    assert [entry for entry in script if entry[0] == "="] == [("=", "x"), ("=", "y"), ("=", "x")]
    assert len(script) == 5


def test_deletes_precede_inserts_within_each_run() -> None:
    script = _script("a\nk\nb\nc\nk\nd\n", "x\nk\ny\nz\nk\nw\n")

    kinds = "".join(kind for kind, _ in script)
    assert "+-" not in kinds
    assert kinds.count("=") == 2


def test_cell_limit_degrades_to_block_replacement() -> None:
    assert _script("p\nq\nq\n", "q\nq\nr\n") == [("-", "p"), ("=", "q"), ("=", "q"), ("+", "r")]
    assert _script("p\nq\nq\n", "q\nq\nr\n", lcs_cell_limit=0) == [
        ("-", "p"),
        ("-", "q"),
        ("-", "q"),
        ("+", "q"),
        ("+", "q"),
        ("+", "r"),
    ]

    script = _script("p\nq\nq\ns\n", "q\nr\nq\nt\n", lcs_cell_limit=0)
    assert script == [
        ("-", "p"),
        ("-", "q"),
        ("-", "q"),
        ("-", "s"),
        ("+", "q"),
        ("+", "r"),
        ("+", "q"),
        ("+", "t"),
    ]


def test_both_sides_are_reconstructed() -> None:
    pairs = [
        ("", ""),
        ("a\nb\nc", "a\nc\nd\n"),
        ("1\n2\n3\n4\n5\n", "0\n1\n3\n5\n6"),
        ("x\r\ny\r\n", "y\nx\n"),
        ("same\nsame\nsame\n", "same\n"),
    ]
    for expected, actual in pairs:
        assert _expected_side(expected, actual) == expected
        assert _actual_side(expected, actual) == actual
