# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from enigma_machine import ROTOR_COUNT
from keyboard_and_plugboard import ALPHABET, MAX_PAIRS
from machine_config import DEFAULT_CONFIG, MachineSettings, save_config
from utilities import rotor_names

# reflector A was out of service by the time of the three-rotor key sheets
REFLECTORS = ["B", "C"]
DEFAULT_PAIRS = 10

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(
    rng: Random | SystemRandom, pairs: int = DEFAULT_PAIRS
) -> MachineSettings:
    """Draw one random key-sheet entry."""
    return MachineSettings(
        rotors=rng.sample(rotor_names(), ROTOR_COUNT),
        reflector=rng.choice(REFLECTORS),
        ring_set=[rng.randrange(len(ALPHABET)) for _ in range(ROTOR_COUNT)],
        plugs=choose_pairs(pairs, rng),
        key="".join(rng.choices(ALPHABET, k=ROTOR_COUNT)),
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma key sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=DEFAULT_PAIRS,
        help=f"Number of plugboard cables, 0-{MAX_PAIRS} (default: {DEFAULT_PAIRS})",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        default=DEFAULT_CONFIG,
        help=f"Destination JSON file (default: {DEFAULT_CONFIG})",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    if not 0 <= args.pairs <= MAX_PAIRS:
        sys.exit(f"❌  --pairs must be between 0 and {MAX_PAIRS}.")

    cfg = generate_settings(build_rng(args.seed), args.pairs)
    save_config(cfg, args.outfile)
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg.rotors}\n"
        f"   reflector   : {cfg.reflector}\n"
        f"   ring set    : {cfg.ring_set}\n"
        f"   key         : {cfg.key}\n"
        f"   plug pairs  : {len(cfg.plugs)}")


if __name__ == "__main__":
    main()
