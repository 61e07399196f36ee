# machine_config.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from enigma_machine import EnigmaMachine
from keyboard_and_plugboard import to_letter
from utilities import build_machine, parse_plugs, parse_settings

DEFAULT_CONFIG = Path("enigma_config.json")
REQUIRED_KEYS = {"rotors", "reflector", "ring_set", "plugs", "key"}


@dataclass(slots=True)
class MachineSettings:
    """One key-sheet entry: everything needed to set a machine up."""

    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])
    reflector: str = "B"
    ring_set: List[int] = field(default_factory=lambda: [0, 0, 0])
    plugs: List[str] = field(default_factory=list)
    key: str = "AAA"                # start positions, left to right

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")

        rotors = data["rotors"]
        if isinstance(rotors, str):
            rotors = rotors.split()
        if not isinstance(rotors, list) or not all(isinstance(r, str) for r in rotors):
            raise ValueError(f"Config field 'rotors' must be a list of names, got {data['rotors']!r}")
        if not isinstance(data["reflector"], str):
            raise ValueError(f"Config field 'reflector' must be a name, got {data['reflector']!r}")

        try:
            ring_set = parse_settings(data["ring_set"])
        except ValueError as e:
            raise ValueError(f"Config field 'ring_set': {e}") from None
        try:
            key = parse_settings(data["key"])
        except ValueError as e:
            raise ValueError(f"Config field 'key': {e}") from None
        try:
            plugs = parse_plugs(data["plugs"])
        except ValueError as e:
            raise ValueError(f"Config field 'plugs': {e}") from None

        return cls(
            rotors=[r.upper() for r in rotors],
            reflector=data["reflector"].upper(),
            ring_set=ring_set,
            plugs=plugs,
            key="".join(to_letter(p) for p in key),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def build(self) -> EnigmaMachine:
        """Return a machine set to this sheet's start position."""
        return build_machine(
            self.rotors,
            self.reflector,
            ring_settings=self.ring_set,
            positions=self.key,
            plugs=self.plugs,
        )

    def rewind(self, machine: EnigmaMachine) -> None:
        """Put *machine* back on this sheet's start position."""
        machine.set_rotor_positions(*parse_settings(self.key))


def load_config(path: str | Path = DEFAULT_CONFIG) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return MachineSettings.from_dict(data)


def save_config(settings: MachineSettings, path: str | Path = DEFAULT_CONFIG) -> Path:
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    return path
