"""
Ladder round pairing — shuffle once, pair neighbours, rotate for round 2.

Round 1: shuffle the teams, then pair consecutive teams (0v1, 2v3, ...).
Round 2: rotate the shuffled order left by one and pair consecutive teams
again (1v2, 3v4, ..., n-1v0). Each team meets its other neighbour, so no
round 1 pairing repeats as long as there are at least 4 teams.

The first team of a pair plays ALPHA, the second BRAVO. With an odd team
count the last team in the working order sits out that round.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from ladder.config import MIN_TEAMS, ROSTER_SIZE, ROUND_COUNT


class LadderGenerationError(Exception):
    """Base error for ladder schedule generation"""

    pass


class InsufficientTeamsError(LadderGenerationError):
    """Raised when there are not enough eligible teams to form matches"""

    def __init__(self, team_count: int, minimum: int = MIN_TEAMS):
        self.team_count = team_count
        self.minimum = minimum
        super().__init__(f"At least {minimum} teams are required, got {team_count}")


class InvalidRosterError(LadderGenerationError):
    """Raised when a team handed to the pairer is malformed"""

    pass


class MatchSide(str, Enum):
    ALPHA = "ALPHA"
    BRAVO = "BRAVO"


@dataclass(frozen=True)
class LadderTeam:
    """Lightweight struct for pairing input."""
    team_id: int
    roster: Tuple[int, ...]  # user ids


@dataclass(frozen=True)
class PairedMatch:
    alpha: LadderTeam
    bravo: LadderTeam

    def side_of(self, team_id: int) -> Optional[MatchSide]:
        if self.alpha.team_id == team_id:
            return MatchSide.ALPHA
        if self.bravo.team_id == team_id:
            return MatchSide.BRAVO
        return None

    @property
    def team_ids(self) -> Tuple[int, int]:
        return (self.alpha.team_id, self.bravo.team_id)


@dataclass
class LadderRound:
    order: int  # 1-based
    matches: List[PairedMatch]


@dataclass
class RematchConflict:
    team_a: int
    team_b: int
    first_round: int
    repeat_round: int
    reason: str


def _validate_teams(teams: Sequence[LadderTeam]) -> None:
    seen_ids = set()
    for team in teams:
        if team.team_id in seen_ids:
            raise InvalidRosterError(f"Team {team.team_id} appears more than once")
        seen_ids.add(team.team_id)

        if len(team.roster) != ROSTER_SIZE:
            raise InvalidRosterError(
                f"Team {team.team_id} has {len(team.roster)} players, expected {ROSTER_SIZE}"
            )
        if len(set(team.roster)) != len(team.roster):
            raise InvalidRosterError(f"Team {team.team_id} lists the same player twice")


def _pair_consecutive(order: Sequence[LadderTeam]) -> List[PairedMatch]:
    return [PairedMatch(alpha=order[i], bravo=order[i + 1]) for i in range(0, len(order) - 1, 2)]


def generate_rounds(teams: Iterable[LadderTeam], seed: Optional[int] = None) -> List[LadderRound]:
    """Build both ladder rounds for *teams*.

    Raises InsufficientTeamsError with fewer than MIN_TEAMS teams and
    InvalidRosterError when a roster is not ROSTER_SIZE distinct players.
    The caller's collection is never mutated.
    """
    working = list(teams)
    if len(working) < MIN_TEAMS:
        raise InsufficientTeamsError(len(working))
    _validate_teams(working)

    rng = random.Random(seed)
    rng.shuffle(working)

    rounds: List[LadderRound] = []
    order = working
    for round_number in range(1, ROUND_COUNT + 1):
        rounds.append(LadderRound(order=round_number, matches=_pair_consecutive(order)))
        order = order[1:] + order[:1]

    return rounds


def find_rematches(rounds: Sequence[LadderRound]) -> List[RematchConflict]:
    """Report pairings that repeat in a later round.

    Rotate-and-pair avoids rematches for every supported team count, so
    this is a diagnostic, not a guarantee enforced by generate_rounds.
    """
    first_seen = {}
    conflicts: List[RematchConflict] = []

    for ladder_round in rounds:
        for match in ladder_round.matches:
            key = frozenset(match.team_ids)
            if key in first_seen:
                a, b = sorted(match.team_ids)
                conflicts.append(RematchConflict(
                    team_a=a,
                    team_b=b,
                    first_round=first_seen[key],
                    repeat_round=ladder_round.order,
                    reason=(
                        f"Rematch: team {a} and team {b} already met "
                        f"in round {first_seen[key]}"
                    ),
                ))
            else:
                first_seen[key] = ladder_round.order

    return conflicts
