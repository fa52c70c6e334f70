from monotext.cursor import Cursor


def test_default_cursor_at_origin():
    c = Cursor()
    assert (c.line_n, c.char_n, c.max_char_reached) == (0, 0, 0)


def test_initial_position_kept():
    c = Cursor(3, 5)
    assert (c.line_n, c.char_n) == (3, 5)


def test_up_then_down_returns():
    c = Cursor(3, 5)
    c.move_up()
    assert c.line_n == 3 - 1
    c.move_down()
    assert (c.line_n, c.char_n) == (3, 5)


def test_left_right_without_max_update():
    c = Cursor(1, 4)
    c.move_right()
    c.move_left()
    assert c.char_n == 4
    assert c.max_char_reached == 0


def test_horizontal_moves_update_max_char():
    c = Cursor(1, 4)
    c.move_right(True)
    assert c.max_char_reached == c.char_n
    c.move_left(True)
    assert c.max_char_reached == c.char_n == 4


def test_move_to_end_and_start():
    c = Cursor(2, 1)
    c.move_to_end(7, True)
    assert c.char_n == 7
    assert c.max_char_reached == 7
    c.move_to_start()
    assert c.char_n == 0
    assert c.max_char_reached == 7
    c.move_to_start(True)
    assert c.max_char_reached == 0


def test_set_position_optionally_updates_max():
    c = Cursor()
    c.set_position(4, 9)
    assert (c.line_n, c.char_n, c.max_char_reached) == (4, 9, 0)
    c.set_position(5, 6, True)
    assert (c.line_n, c.char_n, c.max_char_reached) == (5, 6, 6)


def test_vertical_moves_to_max_char():
    c = Cursor(2, 8)
    c.set_position(2, 8, True)
    c.set_position(2, 1)
    c.move_down_to_max_char()
    assert (c.line_n, c.char_n) == (3, 8)
    c.set_position(3, 2)
    c.move_up_to_max_char()
    assert (c.line_n, c.char_n) == (2, 8)


def test_next_line_goes_to_start_of_following_line():
    c = Cursor(6, 3)
    c.next_line()
    assert c.char_n == 0
    assert c.line_n == 6 + 1