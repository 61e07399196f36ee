# enigma_machine.py  ─────────────────────────────────────────────
from __future__ import annotations

import string
from collections.abc import Iterable, Sequence

from debug import get_debug
from keyboard_and_plugboard import SIZE, Keyboard, Plugboard, to_letter, to_setting
from rotor_and_reflector import Reflector, Rotor

debug = get_debug()

ROTOR_COUNT = 3

Positions = tuple[int, int, int]


# ── stepping logic  ─────────────────────────────────────────────

def turnover(middle_at_notch: bool, right_at_notch: bool) -> tuple[bool, bool, bool]:
    """Decide which of (left, middle, right) move on one key press.

    Both notches are read before anything moves. A middle rotor sitting on
    its own notch steps again and carries the left rotor (double step).
    """
    step_l = middle_at_notch
    step_m = middle_at_notch or right_at_notch
    return step_l, step_m, True


def step_positions(positions: Sequence[int], notches: Sequence[int]) -> Positions:
    """Return the window positions after one key press."""
    left, middle, right = positions
    flags = turnover(middle == notches[1], right == notches[2])
    return tuple(  # type: ignore[return-value]
        (pos + flag) % SIZE for pos, flag in zip((left, middle, right), flags)
    )


# ── the machine ─────────────────────────────────────────────────

class EnigmaMachine:
    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        plugboard: Plugboard | None = None,
    ) -> None:
        if len(rotors) != ROTOR_COUNT:
            raise ValueError(
                f"Enigma machine requires exactly {ROTOR_COUNT} rotors, got {len(rotors)}"
            )

        self.kb        = Keyboard()
        self.pb        = plugboard if plugboard is not None else Plugboard()
        self.rotors    = list(rotors)
        self.reflector = reflector

    @property
    def left(self) -> Rotor:
        return self.rotors[0]

    @property
    def middle(self) -> Rotor:
        return self.rotors[1]

    @property
    def right(self) -> Rotor:
        return self.rotors[2]

    # ── key material ────────────────────────────────────────────

    def set_rotor_positions(self, left: int | str, middle: int | str, right: int | str) -> None:
        values = [to_setting(v) for v in (left, middle, right)]
        for rotor, value in zip(self.rotors, values):
            rotor.set_position(value)

    def set_ring_settings(self, left: int | str, middle: int | str, right: int | str) -> None:
        """Apply ring-stellung offsets (0-based or letters) to every rotor."""
        values = [to_setting(v) for v in (left, middle, right)]
        for rotor, value in zip(self.rotors, values):
            rotor.set_ring_setting(value)

    def set_plugboard_connections(self, pairs: Iterable[str | tuple[str, str]]) -> None:
        self.pb.replace(pairs)

    # ── diagnostics ─────────────────────────────────────────────

    @property
    def positions(self) -> Positions:
        return (self.left.position, self.middle.position, self.right.position)

    def window(self) -> str:
        """Rotor positions as the letters shown in the machine's windows."""
        return "".join(to_letter(p) for p in self.positions)

    def get_state(self) -> tuple[Positions, list[tuple[str, str]]]:
        return self.positions, self.pb.describe()

    # ── stepping  ───────────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors one key-press."""
        flags = turnover(self.middle.is_at_notch(), self.right.is_at_notch())
        for rotor, flag in zip(self.rotors, flags):
            if flag:
                rotor.rotate()
        debug.log("stepping", f"Rotor pos {self.window()}")

    # ── encipher  ───────────────────────────────────────────────

    def encrypt_char(self, letter: str) -> str:
        signal = self.kb.forward(letter)    # reject bad input before stepping
        self._step_rotors()

        signal = self.pb.forward(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        signal = self.pb.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{letter.upper()} -> {out_ch}")
        return out_ch

    def encrypt(self, message: str) -> str:
        """Encipher every letter in turn; anything else passes through unstepped."""
        return "".join(
            self.encrypt_char(ch) if ch in string.ascii_letters else ch
            for ch in message
        )

    decrypt = encrypt

    def __repr__(self) -> str:
        names = "-".join(r.name for r in self.rotors)
        return f"<EnigmaMachine {names} {self.reflector.name} window={self.window()} {self.pb!r}>"
