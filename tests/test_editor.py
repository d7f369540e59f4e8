import pytest

from notula.editor import LINE_HEIGHT, EditorCore
from notula.models import DocumentLine, ImageElement, TextElement


def make_lines(*texts):
    return [DocumentLine([TextElement(t)]) for t in texts]


def texts(lines):
    return [line.text_content() for line in lines]


def test_insert_char_appends_and_advances():
    editor = EditorCore()
    lines = [DocumentLine()]
    assert editor.insert_char("a", lines)
    assert editor.insert_char("b", lines)
    assert texts(lines) == ["ab"]
    assert editor.cursor_col == len("ab")


def test_insert_char_in_middle():
    editor = EditorCore(cursor_col=1)
    lines = make_lines("ac")
    editor.insert_char("b", lines)
    assert texts(lines) == ["abc"]
    assert editor.cursor_col == len("ab")


def test_insert_char_creates_missing_line():
    editor = EditorCore(cursor_line=1)
    lines = make_lines("x")
    editor.insert_char("y", lines)
    assert texts(lines) == ["x", "y"]


def test_insert_char_on_image_line_prepends_text():
    editor = EditorCore()
    lines = [DocumentLine([ImageElement("img", 5, 5)])]
    editor.insert_char("z", lines)
    assert lines[0].elements[0] == TextElement("z")
    assert isinstance(lines[0].elements[1], ImageElement)
    assert editor.cursor_col == len("z")


def test_insert_char_beyond_line_raises():
    editor = EditorCore(cursor_col=10)
    with pytest.raises(IndexError):
        editor.insert_char("a", make_lines("ab"))


def test_insert_text_skips_control_characters():
    editor = EditorCore()
    lines = [DocumentLine()]
    assert editor.insert_text("a\tb\x07c", lines)
    assert texts(lines) == ["abc"]


def test_insert_text_only_controls_is_no_change():
    editor = EditorCore()
    lines = [DocumentLine()]
    assert not editor.insert_text("\n\r", lines)
    assert texts(lines) == [""]


def test_enter_splits_line():
    editor = EditorCore(cursor_col=2)
    lines = make_lines("hello")
    assert editor.handle_enter(lines)
    assert texts(lines) == ["he", "llo"]
    assert (editor.cursor_line, editor.cursor_col) == (1, 0)


def test_enter_on_image_line_adds_empty_line():
    editor = EditorCore()
    lines = [DocumentLine([ImageElement("img", 1, 1)])]
    editor.handle_enter(lines)
    assert len(lines) == 2
    assert lines[1].is_empty()
    assert isinstance(lines[0].elements[0], ImageElement)


def test_backspace_deletes_previous_char():
    editor = EditorCore(cursor_col=3)
    lines = make_lines("abcd")
    assert editor.handle_backspace(lines)
    assert texts(lines) == ["abd"]
    assert editor.cursor_col == len("ab")


def test_backspace_at_start_merges_lines():
    editor = EditorCore(cursor_line=1, cursor_col=0)
    lines = make_lines("foo", "bar")
    assert editor.handle_backspace(lines)
    assert texts(lines) == ["foobar"]
    assert (editor.cursor_line, editor.cursor_col) == (0, len("foo"))


def test_backspace_at_document_start_does_nothing():
    editor = EditorCore()
    lines = make_lines("abc")
    assert not editor.handle_backspace(lines)
    assert texts(lines) == ["abc"]


def test_enter_then_backspace_restores_line():
    editor = EditorCore(cursor_col=3)
    lines = make_lines("splitme")
    editor.handle_enter(lines)
    editor.handle_backspace(lines)
    assert texts(lines) == ["splitme"]
    assert (editor.cursor_line, editor.cursor_col) == (0, len("spl"))


def test_move_left_wraps_to_previous_line_end():
    editor = EditorCore(cursor_line=1, cursor_col=0)
    lines = make_lines("abc", "de")
    editor.move_cursor_left(lines)
    assert (editor.cursor_line, editor.cursor_col) == (0, len("abc"))


def test_move_right_wraps_to_next_line_start():
    editor = EditorCore(cursor_col=2)
    lines = make_lines("ab", "cd")
    editor.move_cursor_right(lines)
    assert (editor.cursor_line, editor.cursor_col) == (1, 0)


def test_move_right_stops_at_document_end():
    editor = EditorCore(cursor_col=2)
    lines = make_lines("ab")
    editor.move_cursor_right(lines)
    assert (editor.cursor_line, editor.cursor_col) == (0, len("ab"))


def test_move_up_and_down_clamp_column():
    editor = EditorCore(cursor_line=1, cursor_col=5)
    lines = make_lines("ab", "abcdef", "abc")
    editor.move_cursor_up(lines)
    assert (editor.cursor_line, editor.cursor_col) == (0, len("ab"))
    editor.move_cursor_down(lines)
    editor.move_cursor_down(lines)
    assert editor.cursor_line == 2
    editor.move_cursor_down(lines)
    assert editor.cursor_line == 2


def test_handle_key_dispatch():
    editor = EditorCore()
    lines = make_lines("ab")
    assert not editor.handle_key("ArrowRight", lines)
    assert editor.cursor_col == 1
    assert editor.handle_key("Enter", lines)
    assert texts(lines) == ["a", "b"]
    assert editor.handle_key("Backspace", lines)
    assert texts(lines) == ["ab"]
    assert not editor.handle_key("Escape", lines)
    assert texts(lines) == ["ab"]


def test_scroll_moves_up_to_cursor():
    editor = EditorCore(cursor_line=2, scroll_offset=1000.0)
    assert editor.update_scroll(300.0) == 2 * LINE_HEIGHT


def test_scroll_keeps_cursor_visible_below():
    editor = EditorCore(cursor_line=100)
    height = 200.0
    offset = editor.update_scroll(height)
    cursor_y = editor.cursor_line * LINE_HEIGHT
    assert offset <= cursor_y <= offset + height


def test_scroll_unchanged_when_visible():
    editor = EditorCore(cursor_line=1)
    assert editor.update_scroll(500.0) == 0.0


def test_reset():
    editor = EditorCore(cursor_line=4, cursor_col=3, scroll_offset=12.5)
    editor.reset()
    assert editor == EditorCore()