import io

import pytest

from mipssim.commands import (
    CommandHandle,
    FreeformCommand,
    FunctionCommand,
    get_completions,
    type_name,
)


class FakeSession:
    def __init__(self):
        self.out = io.StringIO()


def make_add(calls):
    def add(out, a, b):
        calls.append((a, b))
        out.write(str(a + b))

    return FunctionCommand("add", add, [int, int], "Add numbers")


@pytest.mark.parametrize(
    "kind, expected",
    [
        (int, "<int>"),
        (str, "<string>"),
        (bool, "<bool>"),
        ("unsigned short", "<unsigned short>"),
        ("long double", "<long double>"),
        (object, ""),
    ],
)
def test_type_name(kind, expected):
    assert type_name(kind) == expected


def test_function_command_runs_with_converted_arguments():
    calls = []
    session = FakeSession()
    assert make_add(calls).execute(["add", "2", "3"], session) is True
    assert calls == [(2, 3)]
    assert session.out.getvalue() == "5"


def test_function_command_wrong_arity_is_not_run():
    calls = []
    assert make_add(calls).execute(["add", "2"], FakeSession()) is False
    assert calls == []


def test_function_command_other_name_is_not_run():
    calls = []
    assert make_add(calls).execute(["sub", "2", "3"], FakeSession()) is False
    assert calls == []


def test_function_command_bad_argument_is_not_run():
    calls = []
    assert make_add(calls).execute(["add", "two", "3"], FakeSession()) is False
    assert calls == []


def test_disabled_command_is_not_run_and_has_no_help():
    calls = []
    command = make_add(calls)
    command.disable()
    out = io.StringIO()
    command.help(out)
    assert command.execute(["add", "1", "1"], FakeSession()) is False
    assert out.getvalue() == ""
    command.enable()
    assert command.execute(["add", "1", "1"], FakeSession()) is True


def test_function_help_lists_types():
    out = io.StringIO()
    make_add([]).help(out)
    assert out.getvalue() == " - add <int> <int>\n\tAdd numbers\n"


def test_function_help_prefers_parameter_descriptions():
    out = io.StringIO()
    command = FunctionCommand("add", lambda out, a, b: None, [int, int], "Add", ["x", "y"])
    command.help(out)
    assert out.getvalue() == " - add <x> <y>\n\tAdd\n"


def test_freeform_command_gets_remaining_words():
    received = []
    command = FreeformCommand("echo", lambda out, args: received.append(args), "Echo")
    assert command.execute(["echo", "a", "b"], FakeSession()) is True
    assert command.execute(["other"], FakeSession()) is False
    assert received == [["a", "b"]]


def test_freeform_help():
    out = io.StringIO()
    FreeformCommand("echo", lambda out, args: None, "Echo").help(out)
    assert out.getvalue() == " - echo <list of strings>\n\tEcho\n"


def test_freeform_empty_line_raises():
    command = FreeformCommand("echo", lambda out, args: None)
    with pytest.raises(ValueError):
        command.execute([], FakeSession())


def test_completions_by_prefix():
    commands = [make_add([]), FunctionCommand("addi", lambda out: None), FunctionCommand("run", lambda out: None)]
    assert get_completions(commands, "ad") == ["add", "addi"]
    assert get_completions(commands, "") == ["add", "addi", "run"]
    commands[0].disable()
    assert get_completions(commands, "ad") == ["addi"]


def test_handle_enable_disable_remove():
    command = make_add([])
    commands = [command]
    handle = CommandHandle(command, commands)
    handle.disable()
    assert command.enabled is False
    handle.enable()
    assert command.enabled is True
    handle.remove()
    assert commands == []
    handle.remove()
    assert commands == []


def test_empty_handle_does_nothing():
    handle = CommandHandle()
    handle.enable()
    handle.disable()
    handle.remove()
    command = make_add([])
    assert CommandHandle(command, None)._target() is command