"""
Ladder Generation Service - matches + maplist for the next ladder day

Runs when the next ladder day has started and has no matches yet:
1. Load registered teams with a full roster
2. Pair them into two rounds
3. Generate the maplist and split it per round
4. Persist matches and player sides
5. Schedule the following ladder day
6. Clear the registration pool

Steps 4-6 share a single commit, so a partial schedule is never visible.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select, text

from ladder.config import LADDER_DAY_INTERVAL_DAYS
from ladder.models import LadderDay, LadderMatch, LadderPlayerInMatch, LadderRegisteredTeam, User
from ladder.services.ladder_days import day_matches, next_ladder_day, registered_teams_for_matches
from ladder.services.maplist import MapEntry, generate_maplist, split_maplist
from ladder.services.round_pairing import (
    InsufficientTeamsError,
    LadderRound,
    LadderTeam,
    RematchConflict,
    find_rematches,
    generate_rounds,
)

logger = logging.getLogger(__name__)

STATUS_GENERATED = "generated"
STATUS_NO_LADDER_DAY = "no_ladder_day"
STATUS_NOT_DUE = "not_due"
STATUS_ALREADY_GENERATED = "already_generated"
STATUS_INSUFFICIENT_TEAMS = "insufficient_teams"


class LadderGenerationResult:
    """Outcome of one generation attempt"""

    def __init__(self):
        self.status = STATUS_NO_LADDER_DAY
        self.day_id: Optional[int] = None
        self.next_day_id: Optional[int] = None
        self.teams_count = 0
        self.matches_created = 0
        self.rematches: List[RematchConflict] = []

    @property
    def generated(self) -> bool:
        return self.status == STATUS_GENERATED

    def to_dict(self):
        return {
            "status": self.status,
            "day_id": self.day_id,
            "next_day_id": self.next_day_id,
            "teams_count": self.teams_count,
            "matches_created": self.matches_created,
            "rematches": [c.reason for c in self.rematches],
        }


def _to_ladder_team(team: LadderRegisteredTeam) -> LadderTeam:
    return LadderTeam(team_id=team.id, roster=tuple(user.id for user in team.roster))


def persist_rounds(
    session: Session,
    day: LadderDay,
    rounds: List[LadderRound],
    maplists: List[List[MapEntry]],
) -> List[LadderMatch]:
    """
    Stage LadderMatch + LadderPlayerInMatch rows for *rounds*.

    Round i gets maplists[i]. Nothing is committed here.
    """
    assert len(rounds) == len(maplists), f"{len(rounds)} rounds but {len(maplists)} maplists"

    created: List[LadderMatch] = []
    for ladder_round, maplist in zip(rounds, maplists):
        maplist_json = [entry.to_dict() for entry in maplist]
        for paired in ladder_round.matches:
            match = LadderMatch(day_id=day.id, order=ladder_round.order, maplist=maplist_json)
            session.add(match)
            session.flush()  # Get match.id

            for side_team in (paired.alpha, paired.bravo):
                side = paired.side_of(side_team.team_id)
                for user_id in side_team.roster:
                    session.add(LadderPlayerInMatch(match_id=match.id, user_id=user_id, team=side.value))

            created.append(match)

    return created


def clear_registrations(session: Session) -> int:
    """Delete every registered team, detaching its roster first. Not committed."""
    teams = session.exec(select(LadderRegisteredTeam)).all()
    for team in teams:
        for user in session.exec(select(User).where(User.ladder_team_id == team.id)).all():
            user.ladder_team_id = None
            session.add(user)
    session.flush()

    for team in teams:
        session.delete(team)
    return len(teams)


def claim_ladder_day(session: Session, day_id: int) -> bool:
    """
    Mark *day_id* as generated unless another request already did.

    Conditional UPDATE inside the caller's transaction: concurrent callers
    serialize on the row (or SQLite database) lock and only one sees a
    changed row. Not committed.
    """
    claimed = session.execute(
        text(
            "UPDATE ladderday SET matches_generated = :generated "
            "WHERE id = :day_id AND matches_generated = :not_generated"
        ),
        {"generated": True, "not_generated": False, "day_id": day_id},
    )
    return claimed.rowcount == 1


def maybe_generate_ladder_matches(
    session: Session,
    now: Optional[datetime] = None,
    seed: Optional[int] = None,
) -> LadderGenerationResult:
    """
    Generate the next ladder day's schedule if it is due.

    Due means: a next ladder day exists, it has no matches yet, and its
    start time has passed. Too few full teams leaves everything untouched
    so a later call can retry.

    Raises:
        SQLAlchemyError: If persisting fails (transaction rolled back)
    """
    now = now or datetime.utcnow()
    result = LadderGenerationResult()

    day = next_ladder_day(session, now=now)
    if not day:
        return result
    result.day_id = day.id

    if day.matches_generated or day_matches(session, day.id):
        result.status = STATUS_ALREADY_GENERATED
        return result

    if day.date >= now:
        result.status = STATUS_NOT_DUE
        return result

    ladder_teams = [_to_ladder_team(team) for team in registered_teams_for_matches(session)]
    result.teams_count = len(ladder_teams)

    try:
        rounds = generate_rounds(ladder_teams, seed=seed)
    except InsufficientTeamsError as e:
        logger.info("Ladder day %s not generated: %s", day.id, e)
        result.status = STATUS_INSUFFICIENT_TEAMS
        return result

    result.rematches = find_rematches(rounds)
    for conflict in result.rematches:
        logger.warning("Ladder day %s: %s", day.id, conflict.reason)

    maplists = split_maplist(generate_maplist(seed=seed), round_count=len(rounds))

    try:
        if not claim_ladder_day(session, day.id):
            session.rollback()
            logger.info("Ladder day %s was generated by a concurrent request", day.id)
            result.status = STATUS_ALREADY_GENERATED
            return result

        matches = persist_rounds(session, day, rounds, maplists)

        following_date = day.date + timedelta(days=LADDER_DAY_INTERVAL_DAYS)
        following_day = session.exec(select(LadderDay).where(LadderDay.date == following_date)).first()
        if not following_day:
            following_day = LadderDay(date=following_date)
            session.add(following_day)

        cleared = clear_registrations(session)

        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Ladder generation for day %s failed, transaction rolled back", day.id)
        raise

    session.refresh(following_day)
    result.status = STATUS_GENERATED
    result.next_day_id = following_day.id
    result.matches_created = len(matches)

    logger.info(
        "Ladder day %s generated: %d teams, %d matches, %d registrations cleared, next day %s at %s",
        day.id,
        len(ladder_teams),
        len(matches),
        cleared,
        following_day.id,
        following_day.date.isoformat(),
    )
    return result
