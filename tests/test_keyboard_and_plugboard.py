import string

import pytest

from keyboard_and_plugboard import Keyboard, Plugboard, to_index, to_letter, to_setting


def test_to_index_is_case_insensitive() -> None:
    assert to_index("A") == 0
    assert to_index("a") == 0
    assert to_index("z") == 25


@pytest.mark.parametrize("bad", ["", "AB", "1", " ", "é", "-"])
def test_to_index_rejects_non_letters(bad: str) -> None:
    with pytest.raises(ValueError):
        to_index(bad)


def test_to_letter_reduces_modulo_26() -> None:
    assert to_letter(0) == "A"
    assert to_letter(26) == "A"
    assert to_letter(27) == "B"
    assert to_letter(-1) == "Z"


def test_to_setting_accepts_ints_and_letters() -> None:
    assert to_setting(4) == 4
    assert to_setting(30) == 4
    assert to_setting("e") == 4
    with pytest.raises(ValueError):
        to_setting(2.5)  # type: ignore[arg-type]


def test_keyboard_range_check() -> None:
    kb = Keyboard()
    assert kb.forward("q") == 16
    assert kb.backward(16) == "Q"
    with pytest.raises(ValueError):
        kb.backward(26)


def test_empty_plugboard_passes_letters_through() -> None:
    pb = Plugboard()
    assert len(pb) == 0
    assert pb.process("k") == "K"
    assert pb.describe() == []


def test_connect_is_symmetric_and_normalised() -> None:
    pb = Plugboard()
    pb.connect("a", "b")
    assert pb.process("A") == "B"
    assert pb.process("b") == "A"
    assert pb.process("C") == "C"


def test_connect_conflict_leaves_existing_pairs() -> None:
    pb = Plugboard(["AB"])
    with pytest.raises(ValueError, match="already connected"):
        pb.connect("A", "C")
    with pytest.raises(ValueError, match="already connected"):
        pb.connect("C", "B")
    assert pb.process("A") == "B"
    assert pb.process("C") == "C"
    assert pb.describe() == [("A", "B")]


def test_self_pairing_is_rejected() -> None:
    pb = Plugboard()
    with pytest.raises(ValueError, match="itself"):
        pb.connect("A", "a")
    assert pb.describe() == []


def test_non_letters_are_rejected() -> None:
    pb = Plugboard()
    with pytest.raises(ValueError):
        pb.connect("A", "1")
    with pytest.raises(ValueError):
        Plugboard(["ABC"])


def test_describe_reports_each_pair_once_in_alphabetical_order() -> None:
    pb = Plugboard([("Q", "W"), "RE", "ZA"])
    assert pb.describe() == [("A", "Z"), ("E", "R"), ("Q", "W")]
    assert repr(pb) == "<Plugboard AZ ER QW>"


def test_plugboard_is_an_involution() -> None:
    pb = Plugboard(["AV", "BS", "CG", "DL", "FU", "HZ", "IN", "KM", "OW", "RX", "EJ", "PQ", "TY"])
    assert len(pb) == 13
    for letter in string.ascii_uppercase:
        assert pb.process(pb.process(letter)) == letter


def test_replace_is_all_or_nothing() -> None:
    pb = Plugboard(["AB", "CD"])
    with pytest.raises(ValueError):
        pb.replace(["EF", "GE"])
    assert pb.describe() == [("A", "B"), ("C", "D")]

    pb.replace(["EF"])
    assert pb.describe() == [("E", "F")]
    assert pb.process("A") == "A"


def test_clear_removes_all_pairs() -> None:
    pb = Plugboard(["AB", "CD"])
    pb.clear()
    assert pb.describe() == []
    pb.connect("A", "C")
    assert pb.process("C") == "A"


def test_signal_level_map() -> None:
    pb = Plugboard(["AZ"])
    assert pb.forward(0) == 25
    assert pb.backward(25) == 0
    assert pb.forward(1) == 1
