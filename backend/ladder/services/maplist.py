"""
Ladder maplist — one stage per slot, modes rotated so none repeats early.

Both catalogs are shuffled. Stages are then walked in shuffled order and
each takes the last mode of the shuffled mode list, which is moved to the
front. The mode sequence therefore cycles through the shuffled modes in
reverse: modes [m1, m2, m3, m4] yield m4, m3, m2, m1, m4, ...
"""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from ladder.config import LADDER_MODES, LADDER_STAGES, ROUND_COUNT


class LadderMode(str, Enum):
    SZ = "SZ"  # Splat Zones
    TC = "TC"  # Tower Control
    RM = "RM"  # Rainmaker
    CB = "CB"  # Clam Blitz


@dataclass(frozen=True)
class MapEntry:
    stage: str
    mode: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def rotate_modes(stages: Sequence[str], modes: Sequence[str]) -> List[MapEntry]:
    """Assign modes to *stages* in order, without shuffling anything."""
    working = list(modes)
    maplist: List[MapEntry] = []
    for stage in stages:
        mode = working.pop()
        working.insert(0, mode)
        maplist.append(MapEntry(stage=stage, mode=mode))
    return maplist


def generate_maplist(
    stages: Optional[Sequence[str]] = None,
    modes: Optional[Sequence[str]] = None,
    seed: Optional[int] = None,
) -> List[MapEntry]:
    """Generate the full maplist for a ladder day.

    With the default catalogs this is 18 entries: every stage exactly once
    and the four modes in a period-4 rotation.
    """
    stages = list(LADDER_STAGES if stages is None else stages)
    modes = list(LADDER_MODES if modes is None else modes)

    assert stages, "stage catalog must not be empty"
    assert modes, "mode catalog must not be empty"
    assert len(set(stages)) == len(stages), "stage catalog has duplicates"
    assert len(set(modes)) == len(modes), "mode catalog has duplicates"

    rng = random.Random(seed)
    rng.shuffle(modes)
    rng.shuffle(stages)

    return rotate_modes(stages, modes)


def split_maplist(maplist: Sequence[MapEntry], round_count: int = ROUND_COUNT) -> List[List[MapEntry]]:
    """Slice *maplist* into equal contiguous chunks, one per round."""
    assert round_count >= 1, f"round_count must be >= 1, got {round_count}"
    assert len(maplist) % round_count == 0, (
        f"maplist of {len(maplist)} entries cannot be split into {round_count} rounds"
    )

    per_round = len(maplist) // round_count
    return [list(maplist[i * per_round:(i + 1) * per_round]) for i in range(round_count)]
