from monotext.selection import Position, Selection, SelectionData


def make(anchor, extreme):
    data = SelectionData()
    data.create(*anchor)
    data.update_last(*extreme)
    return data


def test_position_ordering():
    assert Position(0, 5) < Position(1, 0)
    assert Position(2, 1) < Position(2, 3)
    assert not Position(2, 3) < Position(2, 3)


def test_default_selection_is_inactive():
    sel = SelectionData().last()
    assert sel == Selection(False, Position(-1, -1), Position(-1, -1))


def test_new_selection_inactive_until_moved():
    data = SelectionData()
    data.create(1, 2)
    assert not data.last().active
    data.update_last(1, 2)
    assert not data.last().active
    data.update_last(1, 4)
    assert data.last().active
    assert data.last().anchor == Position(1, 2)
    assert data.last().extreme == Position(1, 4)


def test_update_without_selection_is_ignored():
    data = SelectionData()
    data.update_last(3, 3)
    assert len(data) == 0
    assert not data.last().active


def test_single_line_selection_is_half_open():
    data = make((0, 1), (0, 3))
    assert [data.is_selected(0, c) for c in range(5)] == [False, True, True, False, False]
    assert not data.is_selected(1, 2)


def test_reversed_selection_covers_same_chars():
    forward = make((0, 1), (0, 3))
    backward = make((0, 3), (0, 1))
    for c in range(5):
        assert forward.is_selected(0, c) == backward.is_selected(0, c)


def test_multi_line_selection():
    data = make((1, 4), (3, 2))
    assert not data.is_selected(1, 3)
    assert data.is_selected(1, 4)
    assert data.is_selected(1, 100)
    assert data.is_selected(2, 0)
    assert data.is_selected(3, 1)
    assert not data.is_selected(3, 2)
    assert not data.is_selected(0, 4)
    assert not data.is_selected(4, 0)


def test_inactive_selection_selects_nothing():
    data = SelectionData()
    data.create(0, 0)
    assert not data.is_selected(0, 0)


def test_start_and_end_are_ordered():
    sel = make((5, 2), (2, 7)).last()
    assert sel.start() == Position(2, 7)
    assert sel.end() == Position(5, 2)
    assert sel.start() <= sel.end()


def test_last_returns_copy():
    data = make((0, 0), (0, 2))
    copy = data.last()
    copy.active = False
    assert data.last().active


def test_clear_removes_all():
    data = make((0, 0), (0, 2))
    data.create(1, 0)
    data.update_last(1, 3)
    assert len(data) == 2
    data.clear()
    assert len(data) == 0
    assert not data.is_selected(0, 1)
    assert not data.last().active