import pytest

from mipssim.colors import (
    after_input,
    after_prompt,
    before_input,
    before_prompt,
    color_enabled,
    set_color,
    set_no_color,
)


@pytest.fixture(autouse=True)
def _reset_color():
    set_no_color()
    yield
    set_no_color()


def test_color_off_by_default_after_reset():
    assert color_enabled() is False


def test_toggle_color():
    set_color()
    assert color_enabled() is True
    set_no_color()
    assert color_enabled() is False


def test_no_color_sequences_are_empty():
    assert [before_prompt(), after_prompt(), before_input(), after_input()] == [""] * 4


def test_prompt_sequences_with_color():
    set_color()
    assert before_prompt() == "\x1b[32m\x1b[1m"
    assert after_prompt() == "\x1b[0m"


def test_input_sequences_with_color():
    set_color()
    assert before_input() == "\x1b[97m"
    assert after_input() == after_prompt()


def test_all_sequences_are_escape_codes_when_colored():
    set_color()
    for seq in (before_prompt(), after_prompt(), before_input(), after_input()):
        assert seq.startswith("\x1b[")
        assert seq.endswith("m")