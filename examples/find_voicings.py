#!/usr/bin/env python3
"""CLI tool to find triad voicings and print them as rows or JSON.

Usage:
    python examples/find_voicings.py <root> <quality> [options]

Examples:
    python examples/find_voicings.py C major
    python examples/find_voicings.py F# minor --inversion first --count 5
    python examples/find_voicings.py Bb augmented --tuning "Drop D" --json --pretty
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from triad_voicing import (
    DEFAULT_NUM_FRETS,
    MAX_FRETS,
    NAMED_TUNINGS,
    InvalidArgumentError,
    SearchConfig,
    SearchOrder,
    Triad,
    Voicing,
    find_voicings,
    get_tuning,
    to_harte,
    to_pychord,
)
from triad_voicing.voicing import fret_span, pitch_span, string_span


def voicing_to_dict(voicing: Voicing) -> dict[str, Any]:
    """Convert a Voicing to a JSON-serializable dict for a renderer."""
    return {
        "positions": [
            {
                "string": position.string,
                "fret": position.fret,
                "note": pitch.pitch_class.name,
                "pitch": pitch.name,
                "midi": pitch.value,
            }
            for position, pitch in zip(voicing.positions, voicing.pitches)
        ],
        "fret_span": fret_span(voicing),
        "pitch_span": pitch_span(voicing),
        "string_span": string_span(voicing),
    }


def format_rows(triad: Triad, voicings: list[Voicing]) -> str:
    """Render voicings as plain-text rows, bass note first."""
    lines = [f"{triad} ({to_pychord(triad)}, {to_harte(triad)})"]
    for rank, voicing in enumerate(voicings, start=1):
        ordered = sorted(zip(voicing.positions, voicing.pitches), key=lambda pair: pair[1])
        cells = "  ".join(f"string {p.string} fret {p.fret:>2} {pitch.name:<4}" for p, pitch in ordered)
        lines.append(f"{rank:>2}. {cells}")
    return "\n".join(lines)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Find playable triad voicings on a six-string fretboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
String 0 is the highest-pitched string, string 5 the lowest.
Named tunings: {", ".join(NAMED_TUNINGS)}

Examples:
  %(prog)s C major
  %(prog)s F# minor --inversion first --count 5
  %(prog)s Bb augmented --tuning "Drop D" --json --pretty
        """,
    )
    parser.add_argument("root", help="Root note (e.g., C, F#, Bb)")
    parser.add_argument("quality", help="Triad quality: major, minor, diminished or augmented")
    parser.add_argument(
        "-i", "--inversion",
        default="root",
        help="Inversion: root, first or second (default: root)",
    )
    parser.add_argument(
        "-t", "--tuning",
        default="Standard",
        help="Named tuning (default: Standard)",
    )
    parser.add_argument(
        "-f", "--max-fret",
        type=int,
        default=DEFAULT_NUM_FRETS,
        help=f"Highest fret to use, up to {MAX_FRETS} (default: {DEFAULT_NUM_FRETS})",
    )
    parser.add_argument(
        "-n", "--count",
        type=int,
        default=3,
        help="Maximum number of voicings (default: 3)",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in SearchOrder],
        default=SearchOrder.FIXED.value,
        help="Scan order per search attempt (default: fixed)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the shuffled order",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of text rows",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search details to stderr",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        triad = Triad.of(args.root, args.quality, args.inversion)
        config = SearchConfig(order=SearchOrder(args.order), seed=args.seed)
        voicings = find_voicings(
            triad.root,
            triad.quality,
            triad.inversion,
            get_tuning(args.tuning),
            args.max_fret,
            args.count,
            config=config,
        )
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not voicings:
        print(f"No playable voicing found for {triad} within {args.max_fret} frets", file=sys.stderr)
        return 1

    if args.json:
        data = {
            "chord": str(triad),
            "pychord": to_pychord(triad),
            "harte": to_harte(triad),
            "tuning": args.tuning,
            "voicings": [voicing_to_dict(v) for v in voicings],
        }
        indent = 2 if args.pretty else None
        print(json.dumps(data, indent=indent, ensure_ascii=False))
    else:
        print(format_rows(triad, voicings))

    return 0


if __name__ == "__main__":
    sys.exit(main())
