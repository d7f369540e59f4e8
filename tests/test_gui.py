import pytest

from notula.gui import MenuAction, cursor_segments, line_number_label, scaled_image_size


def test_small_image_keeps_its_size():
    assert scaled_image_size(200, 100, 500) == (200.0, 100.0)


def test_image_at_exact_width_is_not_scaled():
    assert scaled_image_size(300, 150, 300) == (300.0, 150.0)


@pytest.mark.parametrize("width,height,max_width", [(400, 200, 100), (1000, 30, 333), (7, 9, 2)])
def test_wide_image_shrinks_to_max_width_keeping_ratio(width, height, max_width):
    new_width, new_height = scaled_image_size(width, height, max_width)
    assert new_width == pytest.approx(max_width)
    assert new_width / new_height == pytest.approx(width / height)


def test_cursor_in_middle_of_text():
    assert cursor_segments("abc", 1, True) == ("a", "|b", "c")


def test_cursor_at_start():
    assert cursor_segments("abc", 0, False) == ("", "|a", "bc")


def test_cursor_at_end_shows_space():
    assert cursor_segments("abc", 3, True) == ("abc", "| ", "")


def test_empty_sole_element_displays_a_space():
    assert cursor_segments("", 1, True) == (" ", "| ", "")


def test_empty_element_among_others_displays_nothing():
    assert cursor_segments("", 1, False) == ("", "| ", "")


def test_cursor_segments_rebuild_text():
    before, cursor, after = cursor_segments("hello world", 4, True)
    assert before + cursor[1:] + after == "hello world"
    assert cursor.startswith("|")


def test_line_number_is_right_aligned():
    assert line_number_label(1) == "   1"
    assert len(line_number_label(42)) == 4


def test_long_line_number_is_not_truncated():
    assert line_number_label(12345) == "12345"


def test_menu_actions_are_distinct():
    assert MenuAction("paste_image") is MenuAction.PASTE_IMAGE
    assert len({action.value for action in MenuAction}) == len(list(MenuAction))