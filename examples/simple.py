import sys

from triad_voicing import Triad, find_voicing, find_voicings, identify_voicing, to_pychord, triad_notes

sys.stdout.write(" ".join(triad_notes("A", "minor")) + "\n")  # "A C E"

# Best voicing of a root-position C major triad
voicing = find_voicing("C", "major", "root")
sys.stdout.write(f"{voicing}\n")  # "S3F5:G3 S4F7:E3 S5F8:C3"

# Several first-inversion shapes, most closed first
triad = Triad.of("F#", "minor", "first")
for v in find_voicings(triad.root, triad.quality, triad.inversion, count=3):
    frets = ", ".join(f"string {p.string} fret {p.fret}" for p in v.positions)
    sys.stdout.write(f"{to_pychord(triad)}: {frets}\n")

# And back again
sys.stdout.write(f"{identify_voicing(voicing)[0]}\n")  # "C Major"
