import io

from mipssim.history import History


def make(*commands):
    history = History(10)
    for command in commands:
        history.new_command(command)
    return history


def test_commands_returned_oldest_first():
    assert make("a", "b", "c").get_commands() == ["a", "b", "c"]


def test_repeated_command_is_stored_once():
    assert make("a", "a", "b", "b").get_commands() == ["a", "b"]


def test_non_adjacent_repeat_is_kept():
    assert make("a", "b", "a").get_commands() == ["a", "b", "a"]


def test_previous_walks_back_and_stops_at_oldest():
    history = make("a", "b")
    assert history.previous("") == "b"
    assert history.previous("b") == "a"
    assert history.previous("a") == "a"


def test_next_walks_forward_to_edited_line():
    history = make("a", "b")
    history.previous("typed")
    history.previous("b")
    assert history.next() == "b"
    assert history.next() == "typed"
    assert history.next() == ""


def test_next_on_empty_history_is_empty():
    assert History(5).next() == ""


def test_previous_on_empty_history_returns_the_line():
    history = History(5)
    assert history.previous("x") == "x"


def test_command_while_browsing_replaces_edit_line():
    history = make("a", "b")
    history.previous("")
    history.new_command("c")
    assert history.get_commands() == ["a", "b", "c"]


def test_command_while_browsing_equal_to_last_is_not_duplicated():
    history = make("a", "b")
    history.previous("")
    history.new_command("b")
    assert history.get_commands() == ["a", "b"]


def test_get_commands_while_browsing_skips_edit_line():
    history = make("a", "b")
    history.previous("partial")
    assert history.get_commands() == ["a", "b"]


def test_loaded_commands_are_not_reported_as_issued():
    history = History(10)
    history.load_commands(["old1", "old2"])
    assert history.get_commands() == []
    history.new_command("new")
    assert history.get_commands() == ["new"]


def test_loaded_commands_are_browsable():
    history = History(10)
    history.load_commands(["old1", "old2"])
    assert history.previous("") == "old2"
    assert history.previous("old2") == "old1"


def test_size_limit_drops_oldest():
    history = History(2)
    for command in ("a", "b", "c"):
        history.new_command(command)
    assert history.get_commands() == ["b", "c"]


def test_show_lists_newest_first():
    out = io.StringIO()
    make("a", "b").show(out)
    assert out.getvalue() == "\nb\na\n\n"