from tombeau.mouse import Click, Library, click_from_buttons, libraries_to_close


def test_no_button_is_unknown():
    assert click_from_buttons(0) is Click.UNKNOWN


def test_each_button_decoded():
    assert click_from_buttons(1 << 0) is Click.LEFT
    assert click_from_buttons(1 << 1) is Click.MIDDLE
    assert click_from_buttons(1 << 2) is Click.RIGHT


def test_left_has_priority():
    assert click_from_buttons((1 << 0) | (1 << 2)) is Click.LEFT
    assert click_from_buttons((1 << 1) | (1 << 2)) is Click.MIDDLE


def test_close_order_is_reverse_of_init():
    everything = Library.TTF | Library.IMG | Library.MIX
    assert libraries_to_close(everything) == [Library.MIX, Library.IMG, Library.TTF]


def test_only_initialised_are_closed():
    assert libraries_to_close(Library.TTF | Library.MIX) == [Library.MIX, Library.TTF]
    assert libraries_to_close(0) == []


def test_library_names():
    assert [lib.name for lib in libraries_to_close(Library.IMG)] == ["IMG"]