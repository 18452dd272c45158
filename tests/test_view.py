from tedit.buffer import Cursor, TextBuffer
from tedit.terminal import TerminalSize
from tedit.view import FOOTER_ROWS, Renderer, StatusMessage, Viewport, move_to


def test_viewport_scrolls_horizontally_by_minimum() -> None:
    buffer = TextBuffer(["a" * 15])
    viewport = Viewport()

    viewport.recompute(Cursor(0, 15, 15), buffer, TerminalSize(columns=10, rows=5))

    assert viewport.left_col == 6
    assert viewport.to_screen_coords(Cursor(0, 15, 15), buffer) == (0, 9)


def test_viewport_scrolls_vertically_by_minimum() -> None:
    buffer = TextBuffer([str(n) for n in range(30)])
    viewport = Viewport()
    size = TerminalSize(columns=20, rows=12)

    viewport.recompute(Cursor(15, 0, 0), buffer, size)
    assert viewport.height == 12 - FOOTER_ROWS
    assert viewport.top_row == 6

    viewport.recompute(Cursor(10, 0, 0), buffer, size)
    assert viewport.top_row == 6

    viewport.recompute(Cursor(2, 0, 0), buffer, size)
    assert viewport.top_row == 2


def test_viewport_measures_tabs_in_display_columns() -> None:
    buffer = TextBuffer(["\t\tx"])
    viewport = Viewport()

    viewport.recompute(Cursor(0, 2, 2), buffer, TerminalSize(columns=10, rows=5))

    assert viewport.left_col == 7
    assert viewport.to_screen_coords(Cursor(0, 2, 2), buffer) == (0, 9)


def test_renderer_draws_rows_tildes_and_footer() -> None:
    buffer = TextBuffer(["hi"])
    viewport = Viewport()
    viewport.recompute(Cursor(), buffer, TerminalSize(columns=30, rows=5))

    frame = Renderer().compose(buffer, Cursor(), viewport, "hello there")

    assert b"hi\x1b[K\r\n" in frame
    assert frame.count(b"~\x1b[K\r\n") == 2
    assert b"[No Name] [1 lines]" in frame
    assert b"1/1" in frame
    assert b"hello there" in frame
    assert frame.endswith(move_to(0, 0) + b"\x1b[?25h")


def test_renderer_marks_dirty_buffer_and_expands_tabs() -> None:
    buffer = TextBuffer(["\tx"])
    buffer.insert_char(0, 2, "y")
    viewport = Viewport()
    viewport.recompute(Cursor(0, 3, 3), buffer, TerminalSize(columns=40, rows=4))

    frame = Renderer().compose(buffer, Cursor(0, 3, 3), viewport)

    assert b" " * 8 + b"xy" in frame
    assert b"(modified)" in frame
    assert move_to(0, 10) in frame


def test_renderer_clips_to_viewport() -> None:
    buffer = TextBuffer(["0123456789abcdef"])
    viewport = Viewport()
    cursor = Cursor(0, 16, 16)
    viewport.recompute(cursor, buffer, TerminalSize(columns=10, rows=4))

    frame = Renderer().compose(buffer, cursor, viewport)

    assert b"789abcdef\x1b[K" in frame
    assert b"0123" not in frame


def test_status_message_expires() -> None:
    now = [100.0]
    status = StatusMessage(5.0, clock=lambda: now[0])

    status.set("saved")
    assert status.current() == "saved"

    now[0] = 106.0
    assert status.current() is None


def test_renderer_shows_crlf_lines_instead_of_erasing_them() -> None:
    buffer = TextBuffer.from_bytes(b"hello\r\nworld\r\n")
    viewport = Viewport()
    viewport.recompute(Cursor(), buffer, TerminalSize(columns=30, rows=6))

    frame = Renderer().compose(buffer, Cursor(), viewport)

    assert b"hello^M\x1b[K\r\n" in frame
    assert b"world^M\x1b[K\r\n" in frame
    assert b"\r\x1b[K" not in frame
    assert buffer.serialize() == b"hello\r\nworld\r\n"


def test_renderer_never_passes_escape_bytes_from_the_document() -> None:
    buffer = TextBuffer.from_bytes(b"a\x1b[2Jb")
    cursor = Cursor(0, 6, 6)
    viewport = Viewport()
    viewport.recompute(cursor, buffer, TerminalSize(columns=30, rows=4))

    frame = Renderer().compose(buffer, cursor, viewport)

    assert b"a^[[2Jb\x1b[K" in frame
    assert frame.count(b"\x1b[2J") == 1
    assert frame.endswith(move_to(0, 7) + b"\x1b[?25h")


def test_viewport_scrolls_to_keep_mid_line_cursor_visible() -> None:
    buffer = TextBuffer(["x" * 20])
    viewport = Viewport()
    cursor = Cursor(0, 15, 15)

    viewport.recompute(cursor, buffer, TerminalSize(columns=10, rows=5))

    assert viewport.width == 10
    assert viewport.left_col == 6
    assert viewport.to_screen_coords(cursor, buffer) == (0, 9)
