import random

import pytest

from gophcurses.dialogs import (
    MAX_CHOICES,
    ChoiceNavigator,
    RequestItem,
    RequestNavigator,
    RequestType,
    choice,
    request,
    requester,
)


def _label(text="note"):
    return RequestItem(prompt=text, stowage=None, thing=RequestType.LABEL)


def _prompt(text="field"):
    return RequestItem(prompt=text, stowage="", thing=RequestType.PROMPT)


def _mixed_items():
    return [
        _label("a"),
        _prompt("b"),
        _prompt("c"),
        _label("d"),
        _label("e"),
        _prompt("f"),
        _label("g"),
        _prompt("h"),
        _prompt("i"),
        _label("j"),
    ]


def test_label_item_is_not_editable():
    assert _label().editable is False
    assert _prompt().editable is True


def test_request_navigator_starts_after_leading_labels():
    items = [_label(), _label(), _prompt(), _prompt()]
    nav = RequestNavigator(items, 10)
    assert nav.current == 2
    assert nav.first == 0
    assert nav.last == len(items) - 1


def test_request_navigator_rejects_empty_and_all_labels():
    with pytest.raises(ValueError):
        RequestNavigator([], 5)
    with pytest.raises(ValueError):
        RequestNavigator([_label(), _label()], 5)
    with pytest.raises(ValueError):
        RequestNavigator([_prompt()], 0)


def test_next_field_skips_labels_and_wraps():
    items = _mixed_items()
    nav = RequestNavigator(items, 4)
    editable = [i for i, item in enumerate(items) if item.editable]
    visited = [nav.current]
    for _ in range(len(editable)):
        nav.next_field()
        visited.append(nav.current)
    assert visited[:-1] == editable
    assert visited[-1] == editable[0]


def test_previous_field_visits_editable_fields_in_reverse():
    items = _mixed_items()
    nav = RequestNavigator(items, 4)
    editable = [i for i, item in enumerate(items) if item.editable]
    visited = []
    for _ in range(len(editable)):
        nav.previous_field()
        visited.append(nav.current)
    assert visited == list(reversed(editable))


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("page_size", [2, 3, 5, 20])
def test_request_navigator_invariants(seed, page_size):
    items = _mixed_items()
    nav = RequestNavigator(items, page_size)
    moves = [
        nav.next_field,
        nav.previous_field,
        nav.line_down,
        nav.line_up,
        nav.page_down,
        nav.page_up,
    ]
    rng = random.Random(seed)
    expected_window = min(page_size, len(items))
    for _ in range(200):
        rng.choice(moves)()
        assert 0 <= nav.current < len(items)
        assert items[nav.current].editable
        assert nav.last - nav.first + 1 == expected_window
        assert 0 <= nav.first <= nav.last < len(items)


def test_choice_navigator_shows_page_with_default():
    nav = ChoiceNavigator(20, 5, 12)
    assert nav.current == 12
    assert nav.first <= 12 <= nav.last
    assert nav.last - nav.first + 1 == 5


def test_choice_navigator_without_default_starts_at_zero():
    nav = ChoiceNavigator(7, 3, None)
    assert (nav.current, nav.first) == (0, 0)


def test_choice_navigator_down_wraps_to_first():
    count = 9
    nav = ChoiceNavigator(count, 4, count - 1)
    nav.down()
    assert nav.current == 0
    assert nav.first == 0
    assert nav.last == 4 - 1


def test_choice_navigator_up_wraps_to_last():
    count = 9
    nav = ChoiceNavigator(count, 4, 0)
    nav.up()
    assert nav.current == count - 1
    assert nav.last == count - 1


def test_choice_navigator_top_and_bottom():
    count = 15
    nav = ChoiceNavigator(count, 6, 7)
    nav.bottom()
    assert nav.current == count - 1
    assert nav.last == count - 1
    nav.top()
    assert nav.current == 0
    assert nav.first == 0


def test_choice_navigator_page_up_at_top_selects_first():
    nav = ChoiceNavigator(10, 4, 2)
    nav.page_up()
    assert nav.current == nav.first == 0


def test_choice_navigator_page_down_at_end_selects_last():
    count = 10
    nav = ChoiceNavigator(count, 4, count - 2)
    nav.page_down()
    assert nav.current == count - 1


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("count,page_size", [(1, 5), (5, 5), (12, 4), (30, 7)])
def test_choice_navigator_invariants(seed, count, page_size):
    nav = ChoiceNavigator(count, page_size, None)
    moves = [nav.down, nav.up, nav.page_down, nav.page_up, nav.top, nav.bottom]
    rng = random.Random(seed)
    for _ in range(200):
        rng.choice(moves)()
        assert nav.first <= nav.current <= nav.last
        assert nav.last - nav.first + 1 == min(count, page_size)
        assert 0 <= nav.first and nav.last < count


def test_choice_navigator_rejects_bad_arguments():
    with pytest.raises(ValueError):
        ChoiceNavigator(0, 5)
    with pytest.raises(ValueError):
        ChoiceNavigator(5, 0)
    with pytest.raises(ValueError):
        ChoiceNavigator(5, 3, 5)


def test_choice_rejects_too_many_choices():
    with pytest.raises(ValueError):
        choice(None, "title", ["x"] * (MAX_CHOICES + 1), "Pick")


def test_choice_with_nothing_to_choose_returns_none():
    assert choice(None, "title", [], "Pick") is None


def test_requester_with_no_items_is_cancelled():
    assert requester(None, "title", []) is False


def test_request_with_no_prompts_returns_none():
    assert request(None, "title", [], []) is None