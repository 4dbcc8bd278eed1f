"""
Ladder Play API Routes

Read side of the weekly ladder: the next ladder day with its generated
rounds, and the current registration pool. Reading the next ladder day
also triggers match generation once the day has started.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ladder.database import get_session
from ladder.models.ladder_day import LadderDay
from ladder.models.ladder_match import LadderMatch
from ladder.services.ladder_days import day_matches, next_ladder_day, registered_teams
from ladder.services.ladder_generation import maybe_generate_ladder_matches
from ladder.services.maplist import LadderMode
from ladder.services.round_pairing import MatchSide

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    discord_id: str
    username: str
    discriminator: Optional[str] = None


class MapEntryResponse(BaseModel):
    stage: str
    mode: LadderMode


class PlayerResponse(BaseModel):
    user: UserResponse
    team: str  # "ALPHA" | "BRAVO"


class LadderMatchResponse(BaseModel):
    id: int
    order: int
    maplist: List[MapEntryResponse]
    players: List[PlayerResponse]


class LadderDayResponse(BaseModel):
    id: int
    date: datetime
    matches: List[LadderMatchResponse]


class MatchUpResponse(BaseModel):
    id: int
    alpha: List[UserResponse]
    bravo: List[UserResponse]


class LadderRoundResponse(BaseModel):
    order: int
    maplist: List[MapEntryResponse]
    matches: List[MatchUpResponse]


class RegisteredTeamResponse(BaseModel):
    id: int
    owner_id: int
    roster: List[UserResponse]


class LadderDayCreateRequest(BaseModel):
    date: datetime


class LadderDayCreatedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: datetime


def _match_response(match: LadderMatch) -> LadderMatchResponse:
    players = sorted(match.players, key=lambda p: (p.team, p.id))
    return LadderMatchResponse(
        id=match.id,
        order=match.order,
        maplist=match.maplist,
        players=[PlayerResponse(user=UserResponse.model_validate(p.user), team=p.team) for p in players],
    )


def _load_next_day(session: Session) -> Optional[LadderDay]:
    result = maybe_generate_ladder_matches(session)
    if result.generated:
        logger.info("Generated ladder matches on read: %s", result.to_dict())
    return next_ladder_day(session)


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/play/next-ladder-day", response_model=Optional[LadderDayResponse])
def get_next_ladder_day(session: Session = Depends(get_session)):
    """
    Get the next ladder day and its matches.

    Generates the day's matches first if the day has started and none exist.
    Returns null when no ladder day is scheduled.
    """
    day = _load_next_day(session)
    if not day:
        return None

    return LadderDayResponse(
        id=day.id,
        date=day.date,
        matches=[_match_response(m) for m in day_matches(session, day.id)],
    )


@router.get("/play/rounds", response_model=List[LadderRoundResponse])
def get_next_ladder_rounds(session: Session = Depends(get_session)):
    """Get the next ladder day's matches grouped per round (empty until generated)"""
    day = _load_next_day(session)
    if not day:
        return []

    by_order = {}
    for match in day_matches(session, day.id):
        by_order.setdefault(match.order, []).append(match)

    rounds = []
    for order in sorted(by_order):
        matches = by_order[order]
        rounds.append(
            LadderRoundResponse(
                order=order,
                maplist=matches[0].maplist,
                matches=[
                    MatchUpResponse(
                        id=m.id,
                        alpha=[UserResponse.model_validate(p.user) for p in m.players if p.team == MatchSide.ALPHA.value],
                        bravo=[UserResponse.model_validate(p.user) for p in m.players if p.team == MatchSide.BRAVO.value],
                    )
                    for m in matches
                ],
            )
        )
    return rounds


@router.get("/play/registered-teams", response_model=List[RegisteredTeamResponse])
def get_registered_teams(session: Session = Depends(get_session)):
    """Get the registration pool, biggest rosters first"""
    return [
        RegisteredTeamResponse(
            id=team.id,
            owner_id=team.owner_id,
            roster=[UserResponse.model_validate(u) for u in team.roster],
        )
        for team in registered_teams(session)
    ]


@router.post("/play/ladder-days", response_model=LadderDayCreatedResponse, status_code=201)
def create_ladder_day(request: LadderDayCreateRequest, session: Session = Depends(get_session)):
    """
    Schedule a ladder day.

    Timezone-aware dates are stored as naive UTC.
    """
    date = request.date
    if date.tzinfo is not None:
        date = date.astimezone(timezone.utc).replace(tzinfo=None)

    existing = session.exec(select(LadderDay).where(LadderDay.date == date)).first()
    if existing:
        raise HTTPException(status_code=409, detail=f"Ladder day at {date.isoformat()} already exists")

    day = LadderDay(date=date)
    try:
        session.add(day)
        session.commit()
        session.refresh(day)
        return day
    except IntegrityError as e:
        session.rollback()
        raise HTTPException(status_code=409, detail=str(e))
