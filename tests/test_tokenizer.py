from diffpack.core import Line, join_lines, split_lines


def test_empty_text_has_no_lines() -> None:
    assert split_lines("") == []


def test_trailing_newline_is_recorded_per_line() -> None:
    lines = split_lines("foo\nbar\n")

    assert [line.text for line in lines] == ["foo", "bar"]
    assert [line.index for line in lines] == [0, 1]
    assert all(line.has_newline for line in lines)


def test_missing_trailing_newline_marks_last_line() -> None:
    lines = split_lines("foo\nbar")

    assert lines[0].has_newline is True
    assert lines[1] == Line(index=1, text="bar", ending="")
    assert lines[1].has_newline is False


def test_crlf_and_lf_are_equivalent_separators() -> None:
    crlf = split_lines("a\r\nb\r\n")
    lf = split_lines("a\nb\n")

    assert [line.key for line in crlf] == [line.key for line in lf]
    assert crlf[0].ending == "\r\n"
    assert lf[0].ending == "\n"


def test_lone_carriage_return_stays_in_content() -> None:
    lines = split_lines("a\rb\n")

    assert len(lines) == 1
    assert lines[0].text == "a\rb"


def test_blank_lines_are_kept() -> None:
    lines = split_lines("\n\nx")

    assert [line.text for line in lines] == ["", "", "x"]
    assert [line.has_newline for line in lines] == [True, True, False]


def test_join_lines_reproduces_source() -> None:
    for text in ["", "a", "a\n", "a\r\nb", "\n", "x\n\ny\r\n"]:
        assert join_lines(split_lines(text)) == text
