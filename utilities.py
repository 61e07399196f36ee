# utilities.py
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import List

from enigma_machine import ROTOR_COUNT, EnigmaMachine
from keyboard_and_plugboard import ALPHABET, Plugboard, to_setting
from rotor_and_reflector import Reflector, Rotor

# ────────────────────────────────────────────────────────────────────────
#  0. Trivial helpers
# ────────────────────────────────────────────────────────────────────────

_roman = {"I": 1, "II": 2, "III": 3, "IV": 4, "V": 5}


def _nat_key(name: str) -> int:
    """Sort wheel names by their roman numeral so IV comes before V."""
    return _roman[name]


# ────────────────────────────────────────────────────────────────────────
#  1. Wheel database
# ────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RotorSpec:
    wiring: str
    notch: str


ROTOR_SPECS: Mapping[str, RotorSpec] = MappingProxyType({
    "I":   RotorSpec("EKMFLGDQVZNTOWYHXUSPAIBRCJ", notch="Q"),
    "II":  RotorSpec("AJDKSIRUXBLHWTMCQGZNPYFVOE", notch="E"),
    "III": RotorSpec("BDFHJLCPRTXVZNYEIWGAKMUSQO", notch="V"),
    "IV":  RotorSpec("ESOVPZJAYQUIRHXLNFTGKDCMWB", notch="J"),
    "V":   RotorSpec("VZBRGITYUPSDNHLXAWMJQOFECK", notch="Z"),
})

REFLECTOR_WIRINGS: Mapping[str, str] = MappingProxyType({
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
})


def rotor_names() -> List[str]:
    return sorted(ROTOR_SPECS, key=_nat_key)


def reflector_names() -> List[str]:
    return sorted(REFLECTOR_WIRINGS)


# ────────────────────────────────────────────────────────────────────────
#  2. Factories
# ────────────────────────────────────────────────────────────────────────


def build_rotor(name: str, position: int | str = 0, ring_setting: int | str = 0) -> Rotor:
    """Return a fresh rotor of catalog type *name* (case-insensitive)."""
    key = name.strip().upper()
    try:
        spec = ROTOR_SPECS[key]
    except KeyError:
        raise ValueError(f"Unknown rotor {name!r}. Expected one of {rotor_names()}") from None

    rotor = Rotor(spec.wiring, spec.notch, name=key)
    rotor.set_position(position)
    rotor.set_ring_setting(ring_setting)
    return rotor


def build_reflector(name: str) -> Reflector:
    key = name.strip().upper()
    try:
        wiring = REFLECTOR_WIRINGS[key]
    except KeyError:
        raise ValueError(
            f"Unknown reflector {name!r}. Expected one of {reflector_names()}"
        ) from None
    return Reflector(wiring, name=key)


def build_machine(
    rotors: Sequence[str] = ("I", "II", "III"),
    reflector: str = "B",
    *,
    ring_settings: Sequence[int | str] | str = (0, 0, 0),
    positions: Sequence[int | str] | str = (0, 0, 0),
    plugs: Iterable[str | tuple[str, str]] = (),
) -> EnigmaMachine:
    """Assemble a machine from catalog names, left rotor first."""
    if len(rotors) != ROTOR_COUNT:
        raise ValueError(f"Need exactly {ROTOR_COUNT} rotor names, got {len(rotors)}")

    rings = parse_settings(ring_settings)
    start = parse_settings(positions)
    wheels = [
        build_rotor(name, position=pos, ring_setting=ring)
        for name, pos, ring in zip(rotors, start, rings)
    ]
    return EnigmaMachine(wheels, build_reflector(reflector), Plugboard(plugs))


# ────────────────────────────────────────────────────────────────────────
#  3. Text & setting parsers
# ────────────────────────────────────────────────────────────────────────


def parse_settings(raw: Sequence[int | str] | str, count: int = ROTOR_COUNT) -> List[int]:
    """Read three positions / ring settings.

    Accepts letters ("ADU"), space separated numbers ("0 3 20") or a
    sequence mixing ints and letters.
    """
    if isinstance(raw, str):
        text = raw.strip()
        items: Sequence[int | str] = (
            [int(tok) for tok in text.split()] if any(c.isdigit() for c in text)
            else list(text.replace(" ", ""))
        )
    elif isinstance(raw, Sequence):
        items = raw
    else:
        raise ValueError(f"Settings must be letters, numbers or a list, got {raw!r}")

    if len(items) != count:
        raise ValueError(f"Need exactly {count} settings, got {raw!r}")
    return [to_setting(item) for item in items]


def parse_plugs(raw: str | Iterable[str]) -> List[str]:
    """Split "AB CD EF" (or a list of such pairs) into upper-case pairs."""
    if isinstance(raw, str):
        pairs = raw.split()
    elif isinstance(raw, Iterable):
        pairs = list(raw)
    else:
        raise ValueError(f"Plugs must be a string or a list of pairs, got {raw!r}")

    bad = [p for p in pairs if not isinstance(p, str)]
    if bad:
        raise ValueError(f"Plug pairs must be strings like 'AB', got {bad[0]!r}")
    return [p.strip().upper() for p in pairs if p.strip()]


def preprocess_message(msg: str) -> str:
    """Upper-case and drop everything that is not a letter."""
    return "".join(ch for ch in msg.upper() if ch in ALPHABET)


def group_blocks(text: str, block: int = 5) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


__all__ = [
    "ROTOR_SPECS",
    "REFLECTOR_WIRINGS",
    "RotorSpec",
    "build_rotor",
    "build_reflector",
    "build_machine",
    "parse_settings",
    "parse_plugs",
    "preprocess_message",
    "group_blocks",
    "rotor_names",
    "reflector_names",
]
