# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import List

from debug import get_debug
from enigma_machine import EnigmaMachine
from machine_config import DEFAULT_CONFIG, MachineSettings, load_config
from utilities import group_blocks, preprocess_message

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = get_debug()


@dataclass(slots=True)
class Config:
    """Runtime switches that influence presentation only."""

    block: int = 0                  # group output in blocks; 0 keeps the text as typed


# ────────────────────────────────────────────────────────────────────────
#  1. MachineContext – wraps a machine & reset logic
# ────────────────────────────────────────────────────────────────────────


class MachineContext:
    """A thin wrapper so the key sheet travels with its machine."""

    def __init__(self, settings: MachineSettings) -> None:
        self.settings = settings
        self.machine: EnigmaMachine = settings.build()

    def rewind(self) -> None:
        """Reset the machine to the key sheet's start position."""
        self.settings.rewind(self.machine)

    def encipher_block(self, text: str) -> str:
        """Encipher *text* once from the start position."""
        self.rewind()
        return self.machine.encrypt(text)

    def describe(self) -> str:
        s = self.settings
        plugs = " ".join(s.plugs) or "-"
        return (
            f"Rotors {' '.join(s.rotors)} | Reflector {s.reflector} | "
            f"Rings {s.ring_set} | Key {s.key} | Plugboard {plugs}"
        )


def resolve_settings(args: argparse.Namespace) -> MachineSettings:
    """Key sheet from --config (or defaults) with individual flags on top."""
    settings = load_config(args.config) if args.config else MachineSettings()
    data = settings.to_dict()

    if args.rotors:
        data["rotors"] = args.rotors.split()
    if args.reflector:
        data["reflector"] = args.reflector
    if args.rings:
        data["ring_set"] = args.rings
    if args.key:
        data["key"] = args.key
    if args.plugs is not None:
        data["plugs"] = args.plugs

    return MachineSettings.from_dict(data)


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help=f"Load the key sheet from JSON (e.g. {DEFAULT_CONFIG}).")
    p.add_argument("--rotors", metavar="NAMES", help='Rotor order, left to right, e.g. "I II III".')
    p.add_argument("--reflector", metavar="NAME", help="Reflector name (A, B or C).")
    p.add_argument("--rings", metavar="SETTINGS", help='Ring settings as letters ("AAA") or numbers ("0 0 0").')
    p.add_argument("--key", metavar="SETTINGS", help='Start positions as letters ("ADU") or numbers ("0 3 20").')
    p.add_argument("--plugs", metavar="PAIRS", help='Plugboard pairs, e.g. "AB CD EF". Empty string for none.')
    p.add_argument("--block", type=int, default=0, help="Drop non-letters and print output in blocks of N. Default: 0 (off)")
    p.add_argument(
        "--trace",
        action="append",
        default=[],
        choices=sorted(debug.components),
        help="Log one pipeline component at DEBUG level (repeatable).",
    )
    p.add_argument("--log-file", metavar="FILE", help="Also write trace output to FILE.")
    return p.parse_args(argv)


def run_once(ctx: MachineContext, cfg: Config, text: str) -> None:
    if cfg.block > 0:
        text = preprocess_message(text)
    cipher = ctx.encipher_block(text)
    print("Encrypted:", group_blocks(cipher, cfg.block))
    print("Decrypted:", group_blocks(ctx.encipher_block(cipher), cfg.block))


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    if args.trace:
        debug.enable(*args.trace)
    if args.log_file:
        debug.log_to_file(args.log_file)

    try:
        ctx = MachineContext(resolve_settings(args))
    except (ValueError, OSError) as e:
        sys.exit(f"❌  Failed to set up machine: {e}")

    cfg = Config(block=max(0, args.block))
    print(ctx.describe())

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        run_once(ctx, cfg, args.message)
        return

    # interactive REPL ---------------------------------------------------
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("\nMessage > ")
        except EOFError:
            break
        if not txt.strip():
            break
        run_once(ctx, cfg, txt)


if __name__ == "__main__":
    main()
