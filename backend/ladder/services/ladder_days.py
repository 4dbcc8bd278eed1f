"""
Ladder day queries — which day is "next", and who is registered for it.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from sqlmodel import Session, select

from ladder.config import LADDER_DAY_DISPLAY_HOURS, ROSTER_SIZE
from ladder.models.ladder_day import LadderDay
from ladder.models.ladder_match import LadderMatch
from ladder.models.ladder_registered_team import LadderRegisteredTeam


def next_ladder_day(session: Session, now: Optional[datetime] = None) -> Optional[LadderDay]:
    """
    Get the ladder day players should be looking at.

    That is the earliest day starting no more than LADDER_DAY_DISPLAY_HOURS
    before *now*: a day that already started stays "next" while it is played,
    so its freshly generated matches remain visible.
    """
    now = now or datetime.utcnow()
    cutoff = now - timedelta(hours=LADDER_DAY_DISPLAY_HOURS)

    return session.exec(select(LadderDay).where(LadderDay.date >= cutoff).order_by(LadderDay.date)).first()


def day_matches(session: Session, day_id: int) -> List[LadderMatch]:
    """Matches of a day ordered by round, then creation order"""
    return list(
        session.exec(
            select(LadderMatch).where(LadderMatch.day_id == day_id).order_by(LadderMatch.order, LadderMatch.id)
        ).all()
    )


def registered_teams(session: Session) -> List[LadderRegisteredTeam]:
    """
    Get the registration pool, biggest rosters first.

    Ties keep registration order (id ascending).
    """
    teams = session.exec(select(LadderRegisteredTeam).order_by(LadderRegisteredTeam.id)).all()
    return sorted(teams, key=lambda team: -len(team.roster))


def registered_teams_for_matches(session: Session) -> List[LadderRegisteredTeam]:
    """Registered teams with a full roster, i.e. eligible for match generation"""
    teams = session.exec(select(LadderRegisteredTeam).order_by(LadderRegisteredTeam.id)).all()
    return [team for team in teams if len(team.roster) == ROSTER_SIZE]
