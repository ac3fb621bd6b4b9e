import pytest

from arcanum.options import (
    ButtonOption,
    CheckOption,
    ComboOption,
    SpinOption,
    StringOption,
)


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_matches_ignores_case():
    option = SpinOption("MoveOverhead", 10, 0, 5000)
    assert option.matches("moveoverhead")
    assert option.matches("MOVEOVERHEAD")
    assert not option.matches("Move")


def test_spin_list(capsys):
    line = SpinOption("Hash", 32, 0, 8196).list()
    assert line == "option name Hash type spin default 32 min 0 max 8196"
    assert capsys.readouterr().out == line + "\n"


def test_spin_set_within_range_calls_back():
    counter = Counter()
    option = SpinOption("Hash", 32, 0, 8196, counter)
    option.set("64")
    assert option.value == 64
    assert counter.calls == 1


def test_spin_set_clamps():
    option = SpinOption("Hash", 32, 0, 8196)
    option.set("99999")
    assert option.value == 8196
    option.set("-5")
    assert option.value == 0


def test_spin_set_reads_leading_integer():
    option = SpinOption("MoveOverhead", 10, 0, 5000)
    option.set(" 250ms")
    assert option.value == 250


def test_spin_set_rejects_text():
    counter = Counter()
    option = SpinOption("Hash", 32, 0, 8196, counter)
    with pytest.raises(ValueError):
        option.set("big")
    assert option.value == 32
    assert counter.calls == 0


def test_check_list_and_set(capsys):
    counter = Counter()
    option = CheckOption("NormalizeScore", True, counter)
    assert option.list() == "option name NormalizeScore type check default true"
    option.set("FALSE")
    assert option.value is False
    option.set("True")
    assert option.value is True
    assert counter.calls == 2


def test_check_invalid_value_is_ignored():
    counter = Counter()
    option = CheckOption("NormalizeScore", False, counter)
    option.set("yes")
    assert option.value is False
    assert counter.calls == 0


def test_check_list_false_default():
    assert CheckOption("Ponder", False).list() == "option name Ponder type check default false"


def test_button():
    counter = Counter()
    option = ButtonOption("ClearHash", counter)
    assert option.list() == "option name ClearHash type button"
    option.set("")
    option.set("anything")
    assert counter.calls == 2


def test_string_option():
    counter = Counter()
    option = StringOption("SyzygyPath", "<empty>", counter)
    assert option.list() == "option name SyzygyPath type string default <empty>"
    option.set("/tmp/tables")
    assert option.value == "/tmp/tables"
    assert counter.calls == 1


def test_combo_list():
    option = ComboOption("Style", 1, ["Solid", "Normal", "Risky"])
    assert option.list() == "option name Style type combo default Normal var Solid var Normal var Risky"


def test_combo_set_case_insensitive():
    option = ComboOption("Style", 1, ["Solid", "Normal", "Risky"])
    option.set("risky")
    assert option.index == 2
    assert option.selected == "Risky"


def test_combo_unknown_value_keeps_index():
    counter = Counter()
    option = ComboOption("Style", 0, ["Solid", "Normal"], counter)
    option.set("wild")
    assert option.index == 0
    assert counter.calls == 0


def test_combo_bad_default_index():
    with pytest.raises(IndexError):
        ComboOption("Style", 3, ["Solid"])