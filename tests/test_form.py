import pytest

from gophcurses.form import Form, Item, ItemType, form_from_ask, form_responses


def test_push_choice_appends_in_order():
    item = Item()
    item.push_choice("Red")
    item.push_choice("Green")
    assert item.choices == ["Red", "Green"]


def test_add_label():
    form = Form()
    item = form.add_label("Read this")
    assert item.type == ItemType.LABEL
    assert item.prompt == "Read this"
    assert len(form) == 1
    assert form[0] is item


def test_add_prompt_defaults_to_empty_strings():
    form = Form()
    item = form.add_prompt(None, None)
    assert item.type == ItemType.PROMPT
    assert item.label == ""
    assert item.response == ""


def test_typed_prompts_keep_default():
    form = Form()
    assert form.add_passwd("Secret word", "x").type == ItemType.PASSWD
    assert form.add_long("Comments", "hi").response == "hi"
    assert form.add_long("Comments", "hi").type == ItemType.LONG
    assert form.add_filechoice("File", "a.txt").type == ItemType.FILENAME


def test_add_choice():
    form = Form()
    item = form.add_choice("Color", ["Red", "Green"], 1)
    assert item.type == ItemType.CHOICE
    assert item.choices == ["Red", "Green"]
    assert item.choice_text == "Green"


def test_add_select_offers_no_and_yes():
    form = Form()
    item = form.add_select("Agree", 1)
    assert item.type == ItemType.SELECT
    assert item.choices == ["No", "Yes"]
    assert item.choice_text == "Yes"


def test_form_from_ask_types():
    form = form_from_ask(
        [
            "Ask: Name\tBob",
            "Note: Hello there",
            "Choose: Color\tRed\tGreen\tBlue",
            "Select: Agree:1",
            "AskP: Secret word",
            "AskL: Comments\tsome text",
            "Choosef: File",
            "no colon here",
        ]
    )
    assert [item.type for item in form] == [
        ItemType.PROMPT,
        ItemType.LABEL,
        ItemType.CHOICE,
        ItemType.SELECT,
        ItemType.PASSWD,
        ItemType.LONG,
        ItemType.FILENAME,
        ItemType.LABEL,
    ]
    assert form[0].prompt == "Name"
    assert form[0].response == "Bob"
    assert form[1].prompt == "Hello there"
    assert form[2].choices == ["Red", "Green", "Blue"]
    assert form[2].chooseitem == 0
    assert form[3].prompt == "Agree"
    assert form[3].chooseitem == 1
    assert form[5].response == "some text"
    assert form[7].prompt == ""


def test_select_without_flag_defaults_to_no():
    form = form_from_ask(["Select: Subscribe"])
    assert form[0].prompt == "Subscribe"
    assert form[0].chooseitem == 0


def test_select_with_zero_flag():
    form = form_from_ask(["Select: Subscribe:0"])
    assert form[0].prompt == "Subscribe"
    assert form[0].chooseitem == 0


def test_kind_is_case_insensitive():
    form = form_from_ask(["NOTE: Shout", "askp: Hidden"])
    assert form[0].type == ItemType.LABEL
    assert form[1].type == ItemType.PASSWD


def test_unknown_kind_is_a_prompt():
    form = form_from_ask(["AskF: Something\tdef"])
    assert form[0].type == ItemType.PROMPT
    assert form[0].response == "def"


def test_choose_without_values_is_an_error():
    with pytest.raises(ValueError):
        form_from_ask(["Choose: Color"])


def test_form_responses():
    form = form_from_ask(
        [
            "Ask: Name\tBob",
            "Note: Hello",
            "Choose: Color\tRed\tGreen",
            "Select: Agree:1",
            "Select: Spam",
            "AskL: Comments\tsome text",
            "Choosef: File\tx",
        ]
    )
    form[2].chooseitem = 1
    assert form_responses(form) == ["Bob", "Green", "1", "0", "1", "some text"]


def test_form_responses_empty_form():
    assert form_responses(Form()) == []


def test_responses_follow_edits():
    form = Form()
    item = form.add_prompt("Name", "")
    item.response = "Alice"
    assert form_responses(form) == ["Alice"]


def test_empty_ask_block_gives_empty_form():
    assert len(form_from_ask([])) == 0