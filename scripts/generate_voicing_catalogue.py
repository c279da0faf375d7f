#!/usr/bin/env python3
"""Generate a catalogue of triad voicings for a tuning and write it to JSON.

Every root x quality x inversion is searched once, so the catalogue lists
the ranked voicings a practice session can draw from without running the
search at request time.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, dataclass
from itertools import product
from pathlib import Path

from triad_voicing import (
    DEFAULT_NUM_FRETS,
    NAMED_TUNINGS,
    Inversion,
    PitchClass,
    Triad,
    TriadQuality,
    find_voicings,
    get_tuning,
    to_harte,
)

logger = logging.getLogger(__name__)

ROOTS = [PitchClass(index) for index in range(12)]
QUALITIES = list(TriadQuality)
INVERSIONS = list(Inversion)


@dataclass(frozen=True)
class CatalogueEntry:
    """Ranked voicings of a single triad."""

    name: str
    harte: str
    count: int
    voicings: list[list[tuple[int, int]]]


def build_catalogue(tuning_name: str, max_fret: int, count: int) -> list[CatalogueEntry]:
    """Search every triad in a tuning."""
    tuning = get_tuning(tuning_name)
    entries = []
    for root, quality, inversion in product(ROOTS, QUALITIES, INVERSIONS):
        triad = Triad(root, quality, inversion)
        voicings = find_voicings(root, quality, inversion, tuning, max_fret, count)
        if not voicings:
            logger.warning(f"No voicing for {triad} in {tuning_name} tuning")
        entries.append(
            CatalogueEntry(
                name=str(triad),
                harte=to_harte(triad),
                count=len(voicings),
                voicings=[[(p.string, p.fret) for p in v.positions] for v in voicings],
            )
        )
    return entries


def write_json(path: Path, tuning_name: str, entries: list[CatalogueEntry]) -> None:
    """Write catalogue entries to a JSON file."""
    payload: dict[str, object] = {
        "schema": "triad-voicing-catalogue/v1",
        "tuning": tuning_name,
        "count": len(entries),
        "triads": [asdict(e) for e in entries],
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def main() -> None:
    """Generate voicing catalogues and write them to JSON."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--tuning",
        action="append",
        choices=list(NAMED_TUNINGS),
        help="Tuning to catalogue (repeatable, default: all named tunings)",
    )
    parser.add_argument("--max-fret", type=int, default=DEFAULT_NUM_FRETS)
    parser.add_argument("--count", type=int, default=5, help="Voicings per triad")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path(__file__).parent.parent / "catalogue",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    for tuning_name in args.tuning or NAMED_TUNINGS:
        entries = build_catalogue(tuning_name, args.max_fret, args.count)
        slug = tuning_name.lower().replace(" ", "_")
        path = args.out_dir / f"voicings_{slug}.json"
        write_json(path, tuning_name, entries)
        logger.info(f"Wrote {len(entries)} triads to {path.resolve()}")


if __name__ == "__main__":
    main()
