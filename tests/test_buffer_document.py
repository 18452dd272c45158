import pytest

from tedit.buffer import OutOfBounds, TextBuffer


@pytest.mark.parametrize(
    "content, lines",
    [
        (b"", [""]),
        (b"abc", ["abc"]),
        (b"a\nb\n", ["a", "b", ""]),
        (b"\n\n", ["", "", ""]),
        (b"caf\xe9\r\n", ["caf\xe9\r", ""]),
    ],
)
def test_load_splits_on_newline_and_serialize_restores_bytes(
    content: bytes, lines: list[str]
) -> None:
    buffer = TextBuffer.from_bytes(content)

    assert list(buffer.lines()) == lines
    assert buffer.serialize() == content
    assert buffer.dirty is False


def test_new_buffer_is_one_empty_line() -> None:
    buffer = TextBuffer()

    assert buffer.line_count == 1
    assert buffer.line(0) == ""
    assert buffer.display_name == "[No Name]"


def test_insert_char_marks_dirty_and_bumps_version() -> None:
    buffer = TextBuffer(["ac"])
    before = buffer.version

    buffer.insert_char(0, 1, "b")

    assert buffer.line(0) == "abc"
    assert buffer.dirty is True
    assert buffer.version > before


def test_insert_char_rejects_newline_and_multi_char() -> None:
    buffer = TextBuffer()

    with pytest.raises(ValueError):
        buffer.insert_char(0, 0, "\n")
    with pytest.raises(ValueError):
        buffer.insert_char(0, 0, "ab")
    assert buffer.dirty is False


def test_insert_tab_stores_single_character() -> None:
    buffer = TextBuffer(["ab"])

    buffer.insert_tab(0, 1)

    assert buffer.line(0) == "a\tb"
    assert buffer.line_length(0) == 3


def test_insert_newline_splits_line() -> None:
    buffer = TextBuffer(["HelloWorld"])

    buffer.insert_newline(0, 5)

    assert list(buffer.lines()) == ["Hello", "World"]


def test_insert_newline_at_end_appends_empty_line() -> None:
    buffer = TextBuffer(["abc"])

    buffer.insert_newline(0, 3)

    assert list(buffer.lines()) == ["abc", ""]


def test_backspace_at_line_start_merges_with_previous_line() -> None:
    buffer = TextBuffer.from_bytes(b"abc\ndef")

    target = buffer.delete_char_before(1, 0)

    assert target == (0, 3)
    assert list(buffer.lines()) == ["abcdef"]
    assert buffer.serialize() == b"abcdef"


def test_backspace_inside_line() -> None:
    buffer = TextBuffer(["abc"])

    assert buffer.delete_char_before(0, 2) == (0, 1)
    assert buffer.line(0) == "ac"


def test_backspace_at_origin_is_a_no_op() -> None:
    buffer = TextBuffer(["abc"])

    assert buffer.delete_char_before(0, 0) is None
    assert buffer.dirty is False
    assert buffer.version == 0


def test_forward_delete_joins_next_line_at_end_of_line() -> None:
    buffer = TextBuffer(["ab", "cd"])

    assert buffer.delete_char_after(0, 2) is True
    assert list(buffer.lines()) == ["abcd"]


def test_forward_delete_at_end_of_document_is_a_no_op() -> None:
    buffer = TextBuffer(["ab", "cd"])

    assert buffer.delete_char_after(1, 2) is False
    assert buffer.dirty is False


@pytest.mark.parametrize("position", [(-1, 0), (2, 0), (0, 4), (0, -1)])
def test_out_of_range_positions_raise(position: tuple[int, int]) -> None:
    buffer = TextBuffer(["abc", ""])

    with pytest.raises(OutOfBounds):
        buffer.insert_char(*position, "x")


def test_mark_clean_and_bind_path(tmp_path) -> None:
    buffer = TextBuffer(["x"])
    buffer.insert_char(0, 0, "y")

    buffer.bind_path(tmp_path / "notes.txt")
    buffer.mark_clean()

    assert buffer.dirty is False
    assert buffer.display_name == "notes.txt"

    buffer.bind_path(None)
    assert buffer.path is None


@pytest.mark.parametrize(
    "lines",
    [
        ["abc", "", "de"],
        ["\tindented", "mid\tdle", "end\t"],
        [""],
    ],
)
def test_insert_then_backspace_restores_every_column(lines: list[str]) -> None:
    original = TextBuffer(lines).serialize()

    for row, line in enumerate(lines):
        for col in range(len(line) + 1):
            buffer = TextBuffer(lines)
            buffer.insert_char(row, col, "x")

            assert buffer.delete_char_before(row, col + 1) == (row, col)
            assert buffer.serialize() == original


def test_backspace_three_times_from_end_of_first_line() -> None:
    buffer = TextBuffer.from_bytes(b"abc\ndef")
    position: tuple[int, int] | None = (0, 3)

    for _ in range(3):
        assert position is not None
        position = buffer.delete_char_before(*position)

    assert position == (0, 0)
    assert buffer.serialize() == b"\ndef"
    assert buffer.delete_char_before(0, 0) is None
