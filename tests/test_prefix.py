import pytest

from mipssim.prefix import common_prefix


def test_shared_prefix():
    assert common_prefix(["help", "hello", "helm"]) == "hel"


def test_single_string_is_its_own_prefix():
    assert common_prefix(["run"]) == "run"


def test_no_common_prefix():
    assert common_prefix(["step", "run"]) == ""


def test_one_string_is_prefix_of_another():
    assert common_prefix(["mem", "memory"]) == "mem"


def test_identical_strings():
    assert common_prefix(["exit", "exit"]) == "exit"


def test_accepts_any_iterable():
    assert common_prefix(iter(["reg int", "reg fp"])) == "reg "


@pytest.mark.parametrize(
    "strings",
    [["abc", "abd", "a"], ["load", "load file", "loads"], ["", "x"], ["zz", "zy", "zx"]],
)
def test_result_prefixes_every_input(strings):
    prefix = common_prefix(strings)
    assert all(s.startswith(prefix) for s in strings)
    assert len(prefix) <= min(len(s) for s in strings)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        common_prefix([])