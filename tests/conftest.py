"""Pytest configuration and fixtures."""

import pytest

from debug import get_debug
from enigma_machine import EnigmaMachine
from utilities import build_machine


@pytest.fixture(autouse=True)
def quiet_debug():
    """Every test starts with all trace components switched off."""
    dbg = get_debug()
    state = dbg.status(), dbg.enabled
    dbg.disable(*dbg.components)
    dbg.toggle_global(True)
    yield dbg
    dbg.components.update(state[0])
    dbg.toggle_global(state[1])
    dbg.close_file()


@pytest.fixture
def machine() -> EnigmaMachine:
    """Rotors I-II-III, reflector B, rings AAA, key AAA, empty plugboard."""
    return build_machine(("I", "II", "III"), "B")


@pytest.fixture
def plugged_machine() -> EnigmaMachine:
    return build_machine(
        ("IV", "II", "V"),
        "C",
        ring_settings="BUL",
        positions="QEV",
        plugs=["AV", "BS", "CG", "DL", "FU", "HZ", "IN", "KM", "OW", "RX"],
    )
