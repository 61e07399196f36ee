# rotor_and_reflector.py
from __future__ import annotations

from debug import get_debug
from keyboard_and_plugboard import SIZE, to_index, to_letter, to_setting

debug = get_debug()


def parse_wiring(wiring: str) -> list[int]:
    """Turn a 26-letter wiring string into an integer lookup table."""
    if len(wiring) != SIZE:
        raise ValueError(f"Wiring must be exactly {SIZE} letters, got {len(wiring)}")
    table = [to_index(ch) for ch in wiring]
    if len(set(table)) != SIZE:
        raise ValueError(f"Wiring {wiring!r} must be a permutation of the alphabet")
    return table


def apply_offset(signal: int, position: int, ring_setting: int, forward: bool) -> int:
    """Shift a contact index by how far the wheel has turned against its ring."""
    offset = (position - ring_setting) % SIZE
    if forward:
        return (signal + offset) % SIZE
    return (signal - offset) % SIZE


class _Settings:
    """Position and ring setting, both kept in 0-25 on every assignment."""

    _position: int
    _ring_setting: int

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int | str) -> None:
        self._position = to_setting(value)

    @property
    def ring_setting(self) -> int:
        return self._ring_setting

    @ring_setting.setter
    def ring_setting(self, value: int | str) -> None:
        self._ring_setting = to_setting(value)

    def set_position(self, value: int | str) -> None:
        self.position = value

    def set_ring_setting(self, value: int | str) -> None:
        self.ring_setting = value

    def apply_offset(self, signal: int, forward: bool) -> int:
        return apply_offset(signal, self._position, self._ring_setting, forward)


class Rotor(_Settings):
    def __init__(self, wiring: str, notch: int | str, name: str = "Rotor") -> None:
        self._fwd = parse_wiring(wiring)

        # inverse table for the return pass
        self._rev = [0] * SIZE
        for contact, out in enumerate(self._fwd):
            self._rev[out] = contact

        self.wiring = wiring.upper()
        self.name = name
        self.notch = to_setting(notch)
        self.position = 0
        self.ring_setting = 0

    # ── notch & stepping ─────────────────────────────────────────
    def set_notch(self, notch: int | str) -> None:
        self.notch = to_setting(notch)

    def is_at_notch(self) -> bool:
        return self._position == self.notch

    def rotate(self) -> None:
        self._position = (self._position + 1) % SIZE
        debug.log("rotor", f"{self.name} -> {to_letter(self._position)}")

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        shift = self.apply_offset(sig, True)
        return self.apply_offset(self._fwd[shift], False)

    def backward(self, sig: int) -> int:
        shift = self.apply_offset(sig, True)
        return self.apply_offset(self._rev[shift], False)

    def process(self, letter: str, forward: bool = True) -> str:
        signal = to_index(letter)
        signal = self.forward(signal) if forward else self.backward(signal)
        return to_letter(signal)

    def __repr__(self) -> str:
        return (
            f"<Rotor {self.name} pos={to_letter(self._position)} "
            f"ring={to_letter(self._ring_setting)} notch={to_letter(self.notch)}>"
        )


class Reflector(_Settings):
    """Fixed return wheel; position and ring setting are carried but unused."""

    def __init__(self, wiring: str, name: str = "Reflector") -> None:
        self._map = parse_wiring(wiring)
        self.wiring = wiring.upper()
        self.name = name
        self.position = 0
        self.ring_setting = 0

    def reflect(self, sig: int) -> int:
        out = self._map[sig]
        debug.log("reflector", f"{sig}->{out}")
        return out

    def process(self, letter: str) -> str:
        return to_letter(self.reflect(to_index(letter)))

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
