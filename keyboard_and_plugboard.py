# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable

from debug import get_debug

debug = get_debug()

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)
MAX_PAIRS = SIZE // 2


# ── alphabet codec ────────────────────────────────────────────────
def to_index(letter: str) -> int:
    """Map a letter (either case) to its 0-25 index."""
    if len(letter) != 1 or letter not in string.ascii_letters:
        raise ValueError(f"Invalid character {letter!r}: expected a letter A-Z")
    return ord(letter.upper()) - ord("A")


def to_letter(index: int) -> str:
    return ALPHABET[index % SIZE]


def to_setting(value: int | str) -> int:
    """Normalise a position, ring setting or notch given as int or letter."""
    if isinstance(value, str):
        return to_index(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Setting {value!r} must be an int or a letter")
    return value % SIZE


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Letter <-> signal boundary of the machine."""

    # letter → integer signal
    def forward(self, letter: str) -> int:
        signal = to_index(letter)
        debug.log("keyboard", f"{letter!r}->{signal}")
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < SIZE):
            raise ValueError(f"Signal {signal} out of range 0–{SIZE - 1}")
        return ALPHABET[signal]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Iterable[str | tuple[str, str]] = ()) -> None:
        self.mapping: dict[str, str] = {}
        for raw in pairs:
            self.connect(*_split_pair(raw))

    def connect(self, a: str, b: str) -> None:
        a, b = a.upper(), b.upper()
        for ch in (a, b):
            to_index(ch)
        if a == b:
            raise ValueError(f"Plugboard cannot connect a letter to itself: {a}")
        if a in self.mapping or b in self.mapping:
            dup = a if a in self.mapping else b
            raise ValueError(f"Letter {dup!r} is already connected")

        self.mapping[a], self.mapping[b] = b, a

    def clear(self) -> None:
        self.mapping.clear()

    def replace(self, pairs: Iterable[str | tuple[str, str]]) -> None:
        """Swap in a whole new pairing; on error the old one stays."""
        fresh = Plugboard(pairs)
        self.mapping = fresh.mapping

    def process(self, letter: str) -> str:
        letter = letter.upper()
        return self.mapping.get(letter, letter)

    def describe(self) -> list[tuple[str, str]]:
        return sorted((a, b) for a, b in self.mapping.items() if a < b)

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        letter = ALPHABET[signal]
        mapped = self.mapping.get(letter, letter)
        debug.log("plugboard", f"{signal}->{letter}->{mapped}")
        return to_index(mapped)

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def __len__(self) -> int:
        return len(self.mapping) // 2

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [a + b for a, b in self.describe()]
        return f"<Plugboard {' '.join(swaps)}>"


def _split_pair(raw: str | tuple[str, str]) -> tuple[str, str]:
    if isinstance(raw, str):
        if len(raw) != 2:
            raise ValueError(f"Pair {raw!r} must be exactly 2 letters")
        return raw[0], raw[1]
    a, b = raw
    return a, b
